from sqlalchemy.orm import Session
from backoffice.models.agency_phone import AgencyPhone, PhoneType


class AgencyPhoneRepository:
    """Repository for AgencyPhone model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_agency(self, agency_id: int) -> list[AgencyPhone]:
        return (
            self.db.query(AgencyPhone)
            .filter(AgencyPhone.agency_id == agency_id)
            .order_by(AgencyPhone.id)
            .all()
        )

    def get_by_id_and_agency(self, phone_id: int, agency_id: int) -> AgencyPhone | None:
        """Get phone ensuring it belongs to agency"""
        return (
            self.db.query(AgencyPhone)
            .filter(AgencyPhone.id == phone_id, AgencyPhone.agency_id == agency_id)
            .first()
        )

    def get_by_number(self, number: str) -> AgencyPhone | None:
        """Look a number up across all agencies"""
        return self.db.query(AgencyPhone).filter(AgencyPhone.number == number).first()

    def get_by_type_and_agency(self, phone_type: PhoneType, agency_id: int) -> AgencyPhone | None:
        """First phone of the given type registered for the agency"""
        return (
            self.db.query(AgencyPhone)
            .filter(AgencyPhone.type == phone_type, AgencyPhone.agency_id == agency_id)
            .order_by(AgencyPhone.id)
            .first()
        )

    def create(self, phone: AgencyPhone) -> AgencyPhone:
        self.db.add(phone)
        self.db.commit()
        self.db.refresh(phone)
        return phone

    def update(self, phone: AgencyPhone) -> AgencyPhone:
        self.db.commit()
        self.db.refresh(phone)
        return phone

    def delete(self, phone: AgencyPhone) -> None:
        self.db.delete(phone)
        self.db.commit()
