"""
Login endpoint.

Exchanges a username/password pair for a signed bearer token.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.auth import get_token_service
from app.core.errors import AuthenticationFailure
from app.core.tokens import TokenService
from app.database import get_db
from app.services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/login", tags=["login"])

INVALID_CREDENTIALS_MESSAGE = "invalid username or password"


class LoginRequest(BaseModel):
    """Request model for login. Missing fields fail as bad credentials."""
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    """Response model for a successful login."""
    token: str
    username: str
    name: Optional[str] = None


@router.post("", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Log a user in.

    Args:
        request: Credentials
        db: Database session
        token_service: Signs the issued token

    Returns:
        Token plus the user's username and name

    Raises:
        401: Unknown username or wrong password
    """
    user = user_service.authenticate(db, request.username, request.password)
    if user is None:
        logger.info(f"Failed login for username {request.username!r}")
        raise AuthenticationFailure(INVALID_CREDENTIALS_MESSAGE)

    token = token_service.issue({"username": user.username, "id": str(user.id)})
    logger.info(f"User '{user.username}' logged in")

    return LoginResponse(token=token, username=user.username, name=user.name)
