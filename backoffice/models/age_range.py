from sqlalchemy import String, Integer, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.agency import Agency


class AgeRange(Base, TimestampMixin):
    """
    Passenger age bracket used for pricing (e.g. "Adult", 18-59).

    Ranges of one agency never overlap; this is enforced in
    AgeRangeService, not by the database.
    """

    __tablename__ = "age_ranges"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    agency_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("agencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    min_age: Mapped[int] = mapped_column(Integer, nullable=False)
    max_age: Mapped[int] = mapped_column(Integer, nullable=False)
    occupies_seat: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    agency: Mapped["Agency"] = relationship("Agency", back_populates="age_ranges")

    __table_args__ = (
        UniqueConstraint("agency_id", "name", name="uq_age_range_agency_name"),
    )
