"""
Meal log models.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    Text,
    TIMESTAMP,
    ForeignKey,
    Uuid,
    Enum as SQLEnum,
    Index,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import DietStatus


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Meal(Base):
    """A logged meal and whether it was within the diet"""

    __tablename__ = "meals"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    is_on_diet = Column(
        SQLEnum(
            DietStatus,
            name="is_on_diet",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=DietStatus.OFF_DIET,
        server_default=DietStatus.OFF_DIET.value,
    )
    # Stamped client-side for sub-second ordering; server default covers raw inserts
    created_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    user = relationship("AppUser", back_populates="meals")

    __table_args__ = (Index("ix_meals_user_created", "user_id", "created_at"),)
