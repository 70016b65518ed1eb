from sqlalchemy.orm import Session

from backoffice.core.exceptions import ConflictException, NotFoundException
from backoffice.models.agency_social import AgencySocial, SocialPlatform
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.agency_social_repository import AgencySocialRepository
from backoffice.schemas.agency_social_schemas import AgencySocialCreate, AgencySocialUpdate
from backoffice.services.agency_service import AgencyService


class AgencySocialService:
    """
    Service for agency social network profiles.

    An agency has at most one profile per platform.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = AgencySocialRepository(db)
        self.agency_service = AgencyService(db)

    def _ensure_platform_free(self, platform: SocialPlatform, agency_id: int) -> None:
        if self.repo.get_by_platform_and_agency(platform, agency_id):
            raise ConflictException(f"Agency already has a {platform.value} profile")

    def create_social(self, agency_id: int, data: AgencySocialCreate, tenant: TenantContext) -> AgencySocial:
        self.agency_service.get_agency(agency_id, tenant)
        self._ensure_platform_free(data.type, agency_id)

        social = AgencySocial(agency_id=agency_id, type=data.type, url=data.url)
        return self.repo.create(social)

    def list_socials(self, agency_id: int, tenant: TenantContext) -> list[AgencySocial]:
        """Every profile of the agency; all stored profiles count as active"""
        self.agency_service.get_agency(agency_id, tenant)
        return self.repo.get_by_agency(agency_id)

    def get_by_platform(self, agency_id: int, platform: SocialPlatform, tenant: TenantContext) -> AgencySocial:
        self.agency_service.get_agency(agency_id, tenant)
        social = self.repo.get_by_platform_and_agency(platform, agency_id)
        if not social:
            raise NotFoundException(f"No {platform.value} profile for this agency")
        return social

    def get_social(self, agency_id: int, social_id: int, tenant: TenantContext) -> AgencySocial:
        self.agency_service.get_agency(agency_id, tenant)
        social = self.repo.get_by_id_and_agency(social_id, agency_id)
        if not social:
            raise NotFoundException("Social profile not found in this agency")
        return social

    def update_social(
        self, agency_id: int, social_id: int, data: AgencySocialUpdate, tenant: TenantContext
    ) -> AgencySocial:
        social = self.get_social(agency_id, social_id, tenant)

        if data.type is not None and data.type != social.type:
            self._ensure_platform_free(data.type, agency_id)
            social.type = data.type
        if data.url is not None:
            social.url = data.url

        return self.repo.update(social)

    def delete_social(self, agency_id: int, social_id: int, tenant: TenantContext) -> None:
        social = self.get_social(agency_id, social_id, tenant)
        self.repo.delete(social)
