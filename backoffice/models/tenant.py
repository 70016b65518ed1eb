"""Tenant model for multi-tenant isolation."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.agency import Agency


class Tenant(Base, TimestampMixin):
    """
    Multi-tenant isolation and billing boundary.

    A tenant is addressed by its slug, either through the X-Tenant-ID
    header or as the first label of the request host
    (e.g. "bora.example.com" -> "bora"). The slug is the immutable
    business key; it is unique across all tenants.

    All agencies (and through them trips, age ranges, phones, images
    and items) belong to exactly one tenant.
    """

    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    plan: Mapped[str] = mapped_column(String(50), nullable=False, default="free")

    # Relationships
    agencies: Mapped[list["Agency"]] = relationship(
        "Agency",
        back_populates="tenant",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, slug='{self.slug}')>"
