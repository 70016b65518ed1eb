from sqlalchemy import String, Integer, Boolean, Numeric, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.agency import Agency


class CancellationPolicy(Base, TimestampMixin):
    """
    Refund schedule applied when a booking is cancelled.

    At most one policy per agency has is_default set; the service clears
    the flag on the others when a policy becomes the default.
    """

    __tablename__ = "cancellation_policies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    agency_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("agencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    agency: Mapped["Agency"] = relationship("Agency", back_populates="cancellation_policies")
    rules: Mapped[list["CancellationPolicyRule"]] = relationship(
        "CancellationPolicyRule",
        back_populates="policy",
        cascade="all, delete-orphan",
        order_by="CancellationPolicyRule.display_order",
    )

    __table_args__ = (
        UniqueConstraint("agency_id", "name", name="uq_cancellation_policy_agency_name"),
    )


class CancellationPolicyRule(Base, TimestampMixin):
    """
    One step of a cancellation policy: cancelling at least
    days_before_trip days ahead refunds refund_percentage (0 to 1).
    """

    __tablename__ = "cancellation_policy_rules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    policy_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cancellation_policies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    days_before_trip: Mapped[int] = mapped_column(Integer, nullable=False)
    refund_percentage: Mapped[float] = mapped_column(Numeric(precision=5, scale=2), nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    policy: Mapped["CancellationPolicy"] = relationship("CancellationPolicy", back_populates="rules")
