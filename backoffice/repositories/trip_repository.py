from sqlalchemy.orm import Session
from backoffice.models.trip import Trip


class TripRepository:
    """Repository for Trip model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_agency(self, agency_id: int) -> list[Trip]:
        """Get all trips of an agency, newest first"""
        return (
            self.db.query(Trip)
            .filter(Trip.agency_id == agency_id)
            .order_by(Trip.id.desc())
            .all()
        )

    def get_by_id_and_agency(self, trip_id: int, agency_id: int) -> Trip | None:
        """
        Get trip ensuring it belongs to agency.

        Returns None if trip doesn't exist or belongs to another agency.
        """
        return (
            self.db.query(Trip)
            .filter(Trip.id == trip_id, Trip.agency_id == agency_id)
            .first()
        )

    def get_by_slug_and_agency(self, slug: str, agency_id: int) -> Trip | None:
        return (
            self.db.query(Trip)
            .filter(Trip.slug == slug, Trip.agency_id == agency_id)
            .first()
        )

    def update_main_image(
        self, trip_id: int, image_url: str | None, thumbnail_url: str | None
    ) -> bool:
        """
        Overwrite the trip's main image mirror fields.

        Returns:
            True if the trip exists and was updated
        """
        updated = (
            self.db.query(Trip)
            .filter(Trip.id == trip_id)
            .update(
                {
                    Trip.main_image_url: image_url,
                    Trip.main_image_thumbnail_url: thumbnail_url,
                },
                synchronize_session="fetch",
            )
        )
        self.db.commit()
        return updated > 0

    def create(self, trip: Trip) -> Trip:
        self.db.add(trip)
        self.db.commit()
        self.db.refresh(trip)
        return trip

    def update(self, trip: Trip) -> Trip:
        self.db.commit()
        self.db.refresh(trip)
        return trip

    def delete(self, trip: Trip) -> None:
        """Delete trip (cascades to images and items)"""
        self.db.delete(trip)
        self.db.commit()
