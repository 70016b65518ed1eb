import logging

from sqlalchemy.orm import Session

from backoffice.core.exceptions import ConflictException, NotFoundException
from backoffice.models.category import Category
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.category_repository import CategoryRepository
from backoffice.schemas.category_schemas import CategoryCreate, CategoryUpdate
from backoffice.services.agency_service import AgencyService

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for trip categories; names are unique within an agency"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CategoryRepository(db)
        self.agency_service = AgencyService(db)

    def _ensure_name_free(self, name: str, agency_id: int) -> None:
        if self.repo.get_by_name_and_agency(name, agency_id):
            raise ConflictException("Category name already in use in this agency")

    def create_category(self, agency_id: int, data: CategoryCreate, tenant: TenantContext) -> Category:
        self.agency_service.get_agency(agency_id, tenant)
        self._ensure_name_free(data.name, agency_id)
        return self.repo.create(Category(agency_id=agency_id, name=data.name))

    def list_categories(self, agency_id: int, tenant: TenantContext) -> list[Category]:
        self.agency_service.get_agency(agency_id, tenant)
        return self.repo.get_by_agency(agency_id)

    def get_category(self, agency_id: int, category_id: int, tenant: TenantContext) -> Category:
        self.agency_service.get_agency(agency_id, tenant)
        category = self.repo.get_by_id_and_agency(category_id, agency_id)
        if not category:
            raise NotFoundException("Category not found in this agency")
        return category

    def update_category(
        self, agency_id: int, category_id: int, data: CategoryUpdate, tenant: TenantContext
    ) -> Category:
        category = self.get_category(agency_id, category_id, tenant)

        if data.name is not None and data.name != category.name:
            self._ensure_name_free(data.name, agency_id)
            category.name = data.name

        return self.repo.update(category)

    def delete_category(self, agency_id: int, category_id: int, tenant: TenantContext) -> None:
        """
        Raises:
            ConflictException: If trips are still filed under the category
        """
        category = self.get_category(agency_id, category_id, tenant)

        trips = self.repo.count_trips(category.id)
        if trips:
            logger.info("Category %s still used by %d trip(s)", category_id, trips)
            raise ConflictException("Category is used by trips and cannot be deleted")

        self.repo.delete(category)
