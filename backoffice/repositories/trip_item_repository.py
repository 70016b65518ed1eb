from sqlalchemy.orm import Session
from backoffice.models.trip_item import TripItem


class TripItemRepository:
    """Repository for TripItem model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_trip(self, trip_id: int) -> list[TripItem]:
        return (
            self.db.query(TripItem)
            .filter(TripItem.trip_id == trip_id)
            .order_by(TripItem.id)
            .all()
        )

    def get_by_id_and_trip(self, item_id: int, trip_id: int) -> TripItem | None:
        """Get item ensuring it belongs to trip"""
        return (
            self.db.query(TripItem)
            .filter(TripItem.id == item_id, TripItem.trip_id == trip_id)
            .first()
        )

    def create(self, item: TripItem) -> TripItem:
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def update(self, item: TripItem) -> TripItem:
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete(self, item: TripItem) -> None:
        self.db.delete(item)
        self.db.commit()

