from sqlalchemy import String, Integer, Boolean, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.age_range import AgeRange
    from backoffice.models.trip import Trip


class TripAgePriceGroup(Base, TimestampMixin):
    """
    Price of a trip for one of the agency's age ranges.

    original_price, when set, is the crossed-out price shown next to
    final_price and must be greater than it.
    """

    __tablename__ = "trip_age_price_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trip_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("trips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    age_range_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("age_ranges.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    final_price: Mapped[float] = mapped_column(Numeric(precision=10, scale=2), nullable=False)
    original_price: Mapped[float | None] = mapped_column(Numeric(precision=10, scale=2), nullable=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    trip: Mapped["Trip"] = relationship("Trip", back_populates="price_groups")
    age_range: Mapped["AgeRange"] = relationship("AgeRange")
