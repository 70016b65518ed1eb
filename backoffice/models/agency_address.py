from enum import Enum as PyEnum
from sqlalchemy import String, Integer, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.agency import Agency


class AddressType(str, PyEnum):
    """Agency address type enumeration"""

    MAIN = "main"
    BRANCH = "branch"
    WAREHOUSE = "warehouse"


class AgencyAddress(Base, TimestampMixin):
    """Postal address of an agency (head office, branch or warehouse)."""

    __tablename__ = "agency_addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    agency_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("agencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[AddressType] = mapped_column(
        Enum(AddressType, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    address: Mapped[str] = mapped_column(String(100), nullable=False)
    number: Mapped[str] = mapped_column(String(10), nullable=False)
    complement: Mapped[str | None] = mapped_column(String(50), nullable=True)
    neighborhood: Mapped[str] = mapped_column(String(50), nullable=False)
    city: Mapped[str] = mapped_column(String(50), nullable=False)
    state: Mapped[str] = mapped_column(String(2), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(9), nullable=False)

    # Relationships
    agency: Mapped["Agency"] = relationship("Agency", back_populates="addresses")
