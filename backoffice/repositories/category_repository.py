from sqlalchemy.orm import Session
from backoffice.models.category import Category
from backoffice.models.trip import Trip


class CategoryRepository:
    """Repository for Category model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_agency(self, agency_id: int) -> list[Category]:
        """Get the agency's categories sorted by name"""
        return (
            self.db.query(Category)
            .filter(Category.agency_id == agency_id)
            .order_by(Category.name)
            .all()
        )

    def get_by_id_and_agency(self, category_id: int, agency_id: int) -> Category | None:
        """Get category ensuring it belongs to agency"""
        return (
            self.db.query(Category)
            .filter(Category.id == category_id, Category.agency_id == agency_id)
            .first()
        )

    def get_by_name_and_agency(self, name: str, agency_id: int) -> Category | None:
        return (
            self.db.query(Category)
            .filter(Category.name == name, Category.agency_id == agency_id)
            .first()
        )

    def count_trips(self, category_id: int) -> int:
        """Number of trips filed under the category"""
        return self.db.query(Trip).filter(Trip.category_id == category_id).count()

    def create(self, category: Category) -> Category:
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def update(self, category: Category) -> Category:
        self.db.commit()
        self.db.refresh(category)
        return category

    def delete(self, category: Category) -> None:
        self.db.delete(category)
        self.db.commit()
