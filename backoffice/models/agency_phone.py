from enum import Enum as PyEnum
from sqlalchemy import String, Integer, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.agency import Agency


class PhoneType(str, PyEnum):
    """Agency phone type enumeration"""

    MAIN = "main"
    MOBILE = "mobile"
    FAX = "fax"
    WHATSAPP = "whatsapp"


class AgencyPhone(Base, TimestampMixin):
    """
    Contact phone of an agency.

    The number is unique across all agencies (see AgencyPhoneService).
    """

    __tablename__ = "agency_phones"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    agency_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("agencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[PhoneType] = mapped_column(
        Enum(PhoneType, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    number: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    # Relationships
    agency: Mapped["Agency"] = relationship("Agency", back_populates="phones")
