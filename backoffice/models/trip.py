from datetime import datetime
from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Text, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional, TYPE_CHECKING
from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.agency import Agency
    from backoffice.models.trip_image import TripImage
    from backoffice.models.trip_item import TripItem
    from backoffice.models.trip_price_group import TripAgePriceGroup
    from backoffice.models.trip_general_info import TripGeneralInfo
    from backoffice.models.category import Category
    from backoffice.models.cancellation_policy import CancellationPolicy


class TripStatus(str, PyEnum):
    """Trip lifecycle status"""

    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    FINISHED = "FINISHED"
    CANCELLED = "CANCELLED"


class Trip(Base, TimestampMixin):
    """
    Catalogued trip (excursion) offered by an agency.

    main_image_url / main_image_thumbnail_url mirror the trip's current
    main TripImage and are maintained by MainImageManager only.
    """

    __tablename__ = "trips"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    agency_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("agencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    slug: Mapped[str] = mapped_column(String(200), nullable=False)
    destination: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    departure_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    return_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[TripStatus] = mapped_column(
        Enum(TripStatus, native_enum=False), nullable=False, default=TripStatus.ACTIVE
    )
    main_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    main_image_thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
    cancellation_policy_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("cancellation_policies.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Relationships
    agency: Mapped["Agency"] = relationship("Agency", back_populates="trips")
    images: Mapped[list["TripImage"]] = relationship(
        "TripImage", back_populates="trip", cascade="all, delete-orphan"
    )
    items: Mapped[list["TripItem"]] = relationship(
        "TripItem", back_populates="trip", cascade="all, delete-orphan"
    )
    price_groups: Mapped[list["TripAgePriceGroup"]] = relationship(
        "TripAgePriceGroup", back_populates="trip", cascade="all, delete-orphan"
    )
    general_info_items: Mapped[list["TripGeneralInfo"]] = relationship(
        "TripGeneralInfo", back_populates="trip", cascade="all, delete-orphan"
    )
    category: Mapped[Optional["Category"]] = relationship("Category")
    cancellation_policy: Mapped[Optional["CancellationPolicy"]] = relationship("CancellationPolicy")

    __table_args__ = (
        UniqueConstraint("agency_id", "slug", name="uq_trip_agency_slug"),
    )
