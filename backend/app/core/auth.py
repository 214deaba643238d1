"""
Request authorization.

Token extraction, identity resolution and ownership checks, exposed as
FastAPI dependencies:

- extract_token: bearer token from the Authorization header, or None
- get_identity: the User a valid token names, or None without a token
- require_user: the User, or an explicit 401 when there is none
- ensure_owner: 403 unless the user owns the blog
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.errors import AuthenticationFailure, AuthorizationFailure
from app.core.tokens import TokenService
from app.database import get_db
from app.models.blog import Blog
from app.models.user import User
from app.services import user_service

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def get_token_service(request: Request) -> TokenService:
    """Token service built for this application instance."""
    return request.app.state.token_service


def extract_token(request: Request) -> Optional[str]:
    """
    Read the bearer token from the Authorization header.

    Returns:
        The token, or None if the header is absent or uses another scheme
    """
    authorization = request.headers.get("authorization")
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return None


def get_identity(
    token: Optional[str] = Depends(extract_token),
    token_service: TokenService = Depends(get_token_service),
    db: Session = Depends(get_db),
) -> Optional[User]:
    """
    Resolve the caller's identity.

    Returns:
        The User named by the token, or None if no token was sent or
        the user no longer exists

    Raises:
        InvalidToken: Token signature or payload is bad
        TokenExpired: Token is past its expiry
    """
    if token is None:
        return None

    claims = token_service.verify(token)
    user = user_service.get_user_by_id(db, claims["id"])
    if user is None:
        logger.warning(f"Token for unknown user id {claims['id']!r}")
    return user


def require_user(identity: Optional[User] = Depends(get_identity)) -> User:
    """
    Identity for routes that need an authenticated caller.

    Raises:
        AuthenticationFailure: No usable token was sent
    """
    if identity is None:
        raise AuthenticationFailure("token missing or invalid")
    return identity


def ensure_owner(user: User, blog: Blog, message: str = "permission denied", key: str = "error") -> None:
    """
    Check that a user owns a blog.

    Raises:
        AuthorizationFailure: The blog belongs to someone else
    """
    if str(blog.user_id) != str(user.id):
        logger.warning(f"User '{user.username}' denied access to blog {blog.id}")
        raise AuthorizationFailure(message, key=key)
