from sqlalchemy.orm import Session
from backoffice.models.age_range import AgeRange


class AgeRangeRepository:
    """Repository for AgeRange model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_agency(self, agency_id: int) -> list[AgeRange]:
        """
        Get all age ranges of an agency in creation order.

        The order matters: overlap detection reports the first
        conflicting range in this order.
        """
        return (
            self.db.query(AgeRange)
            .filter(AgeRange.agency_id == agency_id)
            .order_by(AgeRange.id)
            .all()
        )

    def get_by_id_and_agency(self, age_range_id: int, agency_id: int) -> AgeRange | None:
        """Get age range ensuring it belongs to agency"""
        return (
            self.db.query(AgeRange)
            .filter(AgeRange.id == age_range_id, AgeRange.agency_id == agency_id)
            .first()
        )

    def get_by_name_and_agency(self, name: str, agency_id: int) -> AgeRange | None:
        return (
            self.db.query(AgeRange)
            .filter(AgeRange.name == name, AgeRange.agency_id == agency_id)
            .first()
        )

    def create(self, age_range: AgeRange) -> AgeRange:
        self.db.add(age_range)
        self.db.commit()
        self.db.refresh(age_range)
        return age_range

    def update(self, age_range: AgeRange) -> AgeRange:
        self.db.commit()
        self.db.refresh(age_range)
        return age_range

    def delete(self, age_range: AgeRange) -> None:
        self.db.delete(age_range)
        self.db.commit()

