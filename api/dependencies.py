"""
API dependencies for dependency injection
"""

import logging
from typing import Generator, Protocol
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session
from services.user_service import UserService

logger = logging.getLogger("dailydiet.api.identity")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


class SessionIdentityResolver(Protocol):
    """Maps a request credential to a stable user identifier"""

    def resolve(self, request: Request, db: Session) -> UUID: ...


class CookieSessionResolver:
    """Resolves the owner from the session cookie issued at registration"""

    def __init__(self, cookie_name: str):
        self.cookie_name = cookie_name

    def resolve(self, request: Request, db: Session) -> UUID:
        session_id = request.cookies.get(self.cookie_name)
        if not session_id:
            raise UnauthorizedError("Missing session", code="SESSION_REQUIRED")

        user = UserService.resolve_session(db, session_id)
        if user is None:
            logger.warning("Unknown session presented")
            raise UnauthorizedError("Unknown session", code="SESSION_INVALID")
        return user.user_id


def get_identity_resolver() -> SessionIdentityResolver:
    """Resolver used by get_current_owner; override in tests or deployments"""
    return CookieSessionResolver(settings.session_cookie_name)


def get_current_owner(
    request: Request,
    db: Session = Depends(get_db),
    resolver: SessionIdentityResolver = Depends(get_identity_resolver),
) -> UUID:
    """
    Owner id of the caller, resolved once per request.

    Raises:
        UnauthorizedError: If the request has no valid session
    """
    return resolver.resolve(request, db)
