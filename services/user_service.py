from typing import Optional
from sqlalchemy.orm import Session
import logging
import uuid

from domain.models import AppUser
from repositories import UserRepository

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Registration and session lookup"""

    @staticmethod
    def register_user(db: Session, name: str, email: str) -> AppUser:
        """Create a user with a freshly issued session id.

        Raises:
            ConflictError: If the email is already registered
        """
        session_id = str(uuid.uuid4())
        user = UserRepository(db).create_user(name, email, session_id)
        logger.info(f"user_created user_id={user.user_id}")
        return user

    @staticmethod
    def resolve_session(db: Session, session_id: str) -> Optional[AppUser]:
        """Return the user a session id belongs to, if any"""
        if not session_id:
            return None
        return UserRepository(db).get_by_session_id(session_id)
