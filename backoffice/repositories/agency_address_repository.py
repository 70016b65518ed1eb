from sqlalchemy.orm import Session
from backoffice.models.agency_address import AgencyAddress, AddressType


class AgencyAddressRepository:
    """Repository for AgencyAddress model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_agency(self, agency_id: int) -> list[AgencyAddress]:
        return (
            self.db.query(AgencyAddress)
            .filter(AgencyAddress.agency_id == agency_id)
            .order_by(AgencyAddress.id)
            .all()
        )

    def get_by_id_and_agency(self, address_id: int, agency_id: int) -> AgencyAddress | None:
        """Get address ensuring it belongs to agency"""
        return (
            self.db.query(AgencyAddress)
            .filter(AgencyAddress.id == address_id, AgencyAddress.agency_id == agency_id)
            .first()
        )

    def get_by_type_and_agency(self, address_type: AddressType, agency_id: int) -> AgencyAddress | None:
        """First address of the given type registered for the agency"""
        return (
            self.db.query(AgencyAddress)
            .filter(AgencyAddress.type == address_type, AgencyAddress.agency_id == agency_id)
            .order_by(AgencyAddress.id)
            .first()
        )

    def create(self, address: AgencyAddress) -> AgencyAddress:
        self.db.add(address)
        self.db.commit()
        self.db.refresh(address)
        return address

    def update(self, address: AgencyAddress) -> AgencyAddress:
        self.db.commit()
        self.db.refresh(address)
        return address

    def delete(self, address: AgencyAddress) -> None:
        self.db.delete(address)
        self.db.commit()
