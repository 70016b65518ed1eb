from enum import Enum as PyEnum
from sqlalchemy import String, Integer, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from backoffice.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from backoffice.models.agency import Agency


class SocialPlatform(str, PyEnum):
    """Supported social network platforms"""

    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    YOUTUBE = "youtube"
    TIKTOK = "tiktok"


class AgencySocial(Base, TimestampMixin):
    """Social network profile of an agency; one profile per platform."""

    __tablename__ = "agency_socials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    agency_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("agencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[SocialPlatform] = mapped_column(
        Enum(SocialPlatform, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    url: Mapped[str] = mapped_column(String(200), nullable=False)

    # Relationships
    agency: Mapped["Agency"] = relationship("Agency", back_populates="socials")

    __table_args__ = (
        UniqueConstraint("agency_id", "type", name="uq_agency_social_type"),
    )
