"""User registration routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from app.config import settings
from domain.schemas.user_schemas import UserCreate, UserResponse
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("dailydiet.api.users")


def _set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(
        settings.session_cookie_name,
        session_id,
        max_age=settings.session_max_age_sec,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, response: Response, db: Session = Depends(get_db)):
    """Register a user and start their session.

    The session cookie set here identifies the user on every /meals request.
    """
    new_user = UserService.register_user(db, user.name, str(user.email))
    _set_session_cookie(response, new_user.session_id)
    return UserResponse.model_validate(new_user)
