"""
User API endpoints for registration and listing.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from pydantic import BaseModel, Field
from typing import List, Optional

from app.api.serializers import UserResponse, user_to_response
from app.database import get_db
from app.services import user_service


router = APIRouter(prefix="/api/users", tags=["users"])


class RegisterUserRequest(BaseModel):
    """Request model for user registration."""
    username: str = Field(..., description="Username (3-255 characters)")
    name: Optional[str] = Field(None, max_length=100, description="Display name")
    password: str = Field(..., description="Password (at least 3 characters)")


@router.get("", response_model=List[UserResponse])
async def list_users(db: Session = Depends(get_db)):
    """
    List all users with their blogs.

    Args:
        db: Database session

    Returns:
        List of all users
    """
    return [user_to_response(user) for user in user_service.get_all_users(db)]


@router.post("", response_model=UserResponse, status_code=201)
async def register_user(
    body: RegisterUserRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Register a new user.

    Args:
        body: Registration data
        request: Incoming request, used for auth settings
        db: Database session

    Returns:
        Created user

    Raises:
        400: Invalid username or password, or username already taken
    """
    auth_config = request.app.state.settings.auth
    user = user_service.create_user(
        db,
        body.username,
        body.password,
        name=body.name,
        rounds=auth_config.BCRYPT_ROUNDS,
        min_password_length=auth_config.MIN_PASSWORD_LENGTH,
    )
    return user_to_response(user)
