from sqlalchemy.orm import Session
from backoffice.models.agency_social import AgencySocial, SocialPlatform


class AgencySocialRepository:
    """Repository for AgencySocial model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_agency(self, agency_id: int) -> list[AgencySocial]:
        return (
            self.db.query(AgencySocial)
            .filter(AgencySocial.agency_id == agency_id)
            .order_by(AgencySocial.id)
            .all()
        )

    def get_by_id_and_agency(self, social_id: int, agency_id: int) -> AgencySocial | None:
        """Get profile ensuring it belongs to agency"""
        return (
            self.db.query(AgencySocial)
            .filter(AgencySocial.id == social_id, AgencySocial.agency_id == agency_id)
            .first()
        )

    def get_by_platform_and_agency(self, platform: SocialPlatform, agency_id: int) -> AgencySocial | None:
        return (
            self.db.query(AgencySocial)
            .filter(AgencySocial.type == platform, AgencySocial.agency_id == agency_id)
            .first()
        )

    def create(self, social: AgencySocial) -> AgencySocial:
        self.db.add(social)
        self.db.commit()
        self.db.refresh(social)
        return social

    def update(self, social: AgencySocial) -> AgencySocial:
        self.db.commit()
        self.db.refresh(social)
        return social

    def delete(self, social: AgencySocial) -> None:
        self.db.delete(social)
        self.db.commit()
