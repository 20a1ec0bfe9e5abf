"""
User-related database models.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class AppUser(Base):
    """Registered user; identified on requests by session_id"""

    __tablename__ = "app_user"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(Text, unique=True, nullable=False)
    session_id = Column(Text, unique=True, nullable=False, index=True)
    created_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    meals = relationship(
        "Meal",
        back_populates="user",
        cascade="all, delete-orphan",
    )
