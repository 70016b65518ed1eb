from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.agency import Agency


class AgencyEmail(Base, TimestampMixin):
    """
    Contact e-mail of an agency.

    Addresses are unique across all agencies. The agency's main e-mail
    is the earliest one registered.
    """

    __tablename__ = "agency_emails"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    agency_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("agencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    # Relationships
    agency: Mapped["Agency"] = relationship("Agency", back_populates="emails")
