"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import ConflictError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_session_id(self, session_id: str) -> Optional[AppUser]:
        """Get the user a session cookie was issued to"""
        return (
            self.db.query(AppUser).filter(AppUser.session_id == session_id).first()
        )

    def create_user(self, name: str, email: str, session_id: str) -> AppUser:
        """Create a new user"""
        user = AppUser(name=name, email=email, session_id=session_id)
        try:
            return self.create(user)
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(
                f"User with email {email} already exists", code="EMAIL_TAKEN"
            )
