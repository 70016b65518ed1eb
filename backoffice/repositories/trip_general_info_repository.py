from sqlalchemy.orm import Session
from backoffice.models.trip_general_info import TripGeneralInfo


class TripGeneralInfoRepository:
    """Repository for TripGeneralInfo model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_trip(self, trip_id: int) -> list[TripGeneralInfo]:
        return (
            self.db.query(TripGeneralInfo)
            .filter(TripGeneralInfo.trip_id == trip_id)
            .order_by(TripGeneralInfo.display_order, TripGeneralInfo.id)
            .all()
        )

    def get_by_id_and_trip(self, info_id: int, trip_id: int) -> TripGeneralInfo | None:
        """Get info item ensuring it belongs to trip"""
        return (
            self.db.query(TripGeneralInfo)
            .filter(TripGeneralInfo.id == info_id, TripGeneralInfo.trip_id == trip_id)
            .first()
        )

    def create(self, info: TripGeneralInfo) -> TripGeneralInfo:
        self.db.add(info)
        self.db.commit()
        self.db.refresh(info)
        return info

    def update(self, info: TripGeneralInfo) -> TripGeneralInfo:
        self.db.commit()
        self.db.refresh(info)
        return info

    def delete(self, info: TripGeneralInfo) -> None:
        self.db.delete(info)
        self.db.commit()
