from sqlalchemy.orm import Session
from backoffice.models.boarding_location import BoardingLocation


class BoardingLocationRepository:
    """Repository for BoardingLocation model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_agency(self, agency_id: int) -> list[BoardingLocation]:
        return (
            self.db.query(BoardingLocation)
            .filter(BoardingLocation.agency_id == agency_id)
            .order_by(BoardingLocation.id)
            .all()
        )

    def get_by_id_and_agency(self, location_id: int, agency_id: int) -> BoardingLocation | None:
        """Get boarding location ensuring it belongs to agency"""
        return (
            self.db.query(BoardingLocation)
            .filter(BoardingLocation.id == location_id, BoardingLocation.agency_id == agency_id)
            .first()
        )

    def create(self, location: BoardingLocation) -> BoardingLocation:
        self.db.add(location)
        self.db.commit()
        self.db.refresh(location)
        return location

    def update(self, location: BoardingLocation) -> BoardingLocation:
        self.db.commit()
        self.db.refresh(location)
        return location

    def delete(self, location: BoardingLocation) -> None:
        self.db.delete(location)
        self.db.commit()
