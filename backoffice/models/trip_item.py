from sqlalchemy import String, Integer, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.trip import Trip


class TripItem(Base, TimestampMixin):
    """Item included in (or excluded from) a trip package, e.g. "Travel insurance"."""

    __tablename__ = "trip_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trip_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("trips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    is_included: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    trip: Mapped["Trip"] = relationship("Trip", back_populates="items")
