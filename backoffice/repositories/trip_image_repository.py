from sqlalchemy.orm import Session
from backoffice.models.trip_image import TripImage


class TripImageRepository:
    """Repository for TripImage model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_trip(self, trip_id: int) -> list[TripImage]:
        """Get all images of a trip ordered for display"""
        return (
            self.db.query(TripImage)
            .filter(TripImage.trip_id == trip_id)
            .order_by(TripImage.display_order, TripImage.id)
            .all()
        )

    def get_by_id_and_trip(self, image_id: int, trip_id: int) -> TripImage | None:
        """Get image ensuring it belongs to trip"""
        return (
            self.db.query(TripImage)
            .filter(TripImage.id == image_id, TripImage.trip_id == trip_id)
            .first()
        )

    def get_main_by_trip(self, trip_id: int) -> list[TripImage]:
        return (
            self.db.query(TripImage)
            .filter(TripImage.trip_id == trip_id, TripImage.is_main.is_(True))
            .all()
        )

    def unset_main_images(self, trip_id: int, keep_image_id: int | None = None) -> int:
        """
        Clear is_main on every image of the trip except keep_image_id.

        Returns:
            Number of images that were un-marked
        """
        query = self.db.query(TripImage).filter(
            TripImage.trip_id == trip_id, TripImage.is_main.is_(True)
        )
        if keep_image_id is not None:
            query = query.filter(TripImage.id != keep_image_id)
        updated = query.update({TripImage.is_main: False}, synchronize_session="fetch")
        self.db.commit()
        return updated

    def create(self, image: TripImage) -> TripImage:
        self.db.add(image)
        self.db.commit()
        self.db.refresh(image)
        return image

    def update(self, image: TripImage) -> TripImage:
        self.db.commit()
        self.db.refresh(image)
        return image

    def delete(self, image: TripImage) -> None:
        self.db.delete(image)
        self.db.commit()
