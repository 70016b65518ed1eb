from sqlalchemy.orm import Session
from backoffice.models.agency_email import AgencyEmail


class AgencyEmailRepository:
    """Repository for AgencyEmail model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_agency(self, agency_id: int) -> list[AgencyEmail]:
        """Get the agency's e-mails in registration order"""
        return (
            self.db.query(AgencyEmail)
            .filter(AgencyEmail.agency_id == agency_id)
            .order_by(AgencyEmail.id)
            .all()
        )

    def get_by_id_and_agency(self, email_id: int, agency_id: int) -> AgencyEmail | None:
        """Get e-mail ensuring it belongs to agency"""
        return (
            self.db.query(AgencyEmail)
            .filter(AgencyEmail.id == email_id, AgencyEmail.agency_id == agency_id)
            .first()
        )

    def get_by_email(self, email: str) -> AgencyEmail | None:
        """Look an address up across all agencies"""
        return self.db.query(AgencyEmail).filter(AgencyEmail.email == email).first()

    def get_first_by_agency(self, agency_id: int) -> AgencyEmail | None:
        return (
            self.db.query(AgencyEmail)
            .filter(AgencyEmail.agency_id == agency_id)
            .order_by(AgencyEmail.id)
            .first()
        )

    def create(self, email: AgencyEmail) -> AgencyEmail:
        self.db.add(email)
        self.db.commit()
        self.db.refresh(email)
        return email

    def update(self, email: AgencyEmail) -> AgencyEmail:
        self.db.commit()
        self.db.refresh(email)
        return email

    def delete(self, email: AgencyEmail) -> None:
        self.db.delete(email)
        self.db.commit()
