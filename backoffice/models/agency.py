from sqlalchemy import String, Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.tenant import Tenant
    from backoffice.models.age_range import AgeRange
    from backoffice.models.agency_phone import AgencyPhone
    from backoffice.models.trip import Trip
    from backoffice.models.agency_email import AgencyEmail
    from backoffice.models.agency_address import AgencyAddress
    from backoffice.models.agency_social import AgencySocial
    from backoffice.models.category import Category
    from backoffice.models.boarding_location import BoardingLocation
    from backoffice.models.cancellation_policy import CancellationPolicy


class Agency(Base, TimestampMixin):
    """
    Travel agency account under a tenant.

    CADASTUR (tourism ministry registration) and CNPJ are unique
    across all agencies, not only within the tenant.
    """

    __tablename__ = "agencies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,  # Critical for multi-tenant queries
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    cadastur: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    cnpj: Mapped[str] = mapped_column(String(18), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="agencies")
    age_ranges: Mapped[list["AgeRange"]] = relationship(
        "AgeRange", back_populates="agency", cascade="all, delete-orphan"
    )
    phones: Mapped[list["AgencyPhone"]] = relationship(
        "AgencyPhone", back_populates="agency", cascade="all, delete-orphan"
    )
    trips: Mapped[list["Trip"]] = relationship(
        "Trip", back_populates="agency", cascade="all, delete-orphan"
    )
    emails: Mapped[list["AgencyEmail"]] = relationship(
        "AgencyEmail", back_populates="agency", cascade="all, delete-orphan"
    )
    addresses: Mapped[list["AgencyAddress"]] = relationship(
        "AgencyAddress", back_populates="agency", cascade="all, delete-orphan"
    )
    socials: Mapped[list["AgencySocial"]] = relationship(
        "AgencySocial", back_populates="agency", cascade="all, delete-orphan"
    )
    categories: Mapped[list["Category"]] = relationship(
        "Category", back_populates="agency", cascade="all, delete-orphan"
    )
    boarding_locations: Mapped[list["BoardingLocation"]] = relationship(
        "BoardingLocation", back_populates="agency", cascade="all, delete-orphan"
    )
    cancellation_policies: Mapped[list["CancellationPolicy"]] = relationship(
        "CancellationPolicy", back_populates="agency", cascade="all, delete-orphan"
    )
