from sqlalchemy.orm import Session
from backoffice.models.trip_price_group import TripAgePriceGroup


class TripPriceGroupRepository:
    """Repository for TripAgePriceGroup model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_trip(self, trip_id: int) -> list[TripAgePriceGroup]:
        """Get all price groups of a trip ordered for display"""
        return (
            self.db.query(TripAgePriceGroup)
            .filter(TripAgePriceGroup.trip_id == trip_id)
            .order_by(TripAgePriceGroup.display_order, TripAgePriceGroup.id)
            .all()
        )

    def get_by_id_and_trip(self, group_id: int, trip_id: int) -> TripAgePriceGroup | None:
        """Get price group ensuring it belongs to trip"""
        return (
            self.db.query(TripAgePriceGroup)
            .filter(TripAgePriceGroup.id == group_id, TripAgePriceGroup.trip_id == trip_id)
            .first()
        )

    def count_by_age_range(self, age_range_id: int) -> int:
        """Number of price groups (on any trip) priced for the age range"""
        return (
            self.db.query(TripAgePriceGroup)
            .filter(TripAgePriceGroup.age_range_id == age_range_id)
            .count()
        )

    def create(self, group: TripAgePriceGroup) -> TripAgePriceGroup:
        self.db.add(group)
        self.db.commit()
        self.db.refresh(group)
        return group

    def update(self, group: TripAgePriceGroup) -> TripAgePriceGroup:
        self.db.commit()
        self.db.refresh(group)
        return group

    def delete(self, group: TripAgePriceGroup) -> None:
        self.db.delete(group)
        self.db.commit()
