"""
User service layer for user management operations.

Handles user registration, retrieval, credential checks and
username validation.
"""

import logging
from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictFailure, ValidationFailure
from app.core.passwords import hash_password, verify_password, DEFAULT_ROUNDS
from app.models.user import User

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 255

DUPLICATE_USERNAME_MESSAGE = "expected `username` to be unique"

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


def validate_username(username: str) -> tuple[bool, Optional[str]]:
    """
    Validate username length.

    The username is stored exactly as given; only its length is checked.

    Args:
        username: Username to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not username:
        return False, "Username is required"

    if len(username) < MIN_USERNAME_LENGTH:
        return False, f"Username must be at least {MIN_USERNAME_LENGTH} characters"

    if len(username) > MAX_USERNAME_LENGTH:
        return False, f"Username must not exceed {MAX_USERNAME_LENGTH} characters"

    return True, None


def validate_password(password: str, min_length: int = 3) -> tuple[bool, Optional[str]]:
    """
    Validate password length.

    Args:
        password: Plain-text password
        min_length: Minimum number of characters

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not password:
        return False, "Password is required"

    if len(password) < min_length:
        return False, f"Password must be at least {min_length} characters"

    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False, f"Password must not exceed {MAX_PASSWORD_BYTES} bytes"

    return True, None


def create_user(
    db: Session,
    username: str,
    password: str,
    name: Optional[str] = None,
    rounds: int = DEFAULT_ROUNDS,
    min_password_length: int = 3,
) -> User:
    """
    Register a new user.

    Args:
        db: Database session
        username: Unique username
        password: Plain-text password, stored only as a bcrypt hash
        name: Optional display name
        rounds: bcrypt cost factor
        min_password_length: Minimum password length

    Returns:
        Newly created User object

    Raises:
        ValidationFailure: If username or password validation fails
        ConflictFailure: If the username is already taken
    """
    is_valid, error_message = validate_username(username)
    if not is_valid:
        raise ValidationFailure(error_message)

    is_valid, error_message = validate_password(password, min_password_length)
    if not is_valid:
        raise ValidationFailure(error_message)

    if get_user_by_username(db, username):
        raise ConflictFailure(DUPLICATE_USERNAME_MESSAGE)

    new_user = User(
        username=username,
        name=name,
        password_hash=hash_password(password, rounds),
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration
        db.rollback()
        raise ConflictFailure(DUPLICATE_USERNAME_MESSAGE)
    db.refresh(new_user)

    logger.info(f"Registered user '{new_user.username}' (id={new_user.id})")
    return new_user


def authenticate(db: Session, username: Optional[str], password: Optional[str]) -> Optional[User]:
    """
    Check a username/password pair.

    Args:
        db: Database session
        username: Claimed username
        password: Candidate password

    Returns:
        The matching User, or None if the user is unknown or the password is wrong
    """
    if not username or not password:
        return None

    user = get_user_by_username(db, username)
    if user is None:
        return None

    if not verify_password(password, user.password_hash):
        return None

    return user


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """
    Get user by username.

    Args:
        db: Database session
        username: Username to lookup

    Returns:
        User object if found, None otherwise
    """
    return db.query(User).filter(User.username == username).first()


def get_user_by_id(db: Session, user_id) -> Optional[User]:
    """
    Get user by ID.

    Accepts the integer key or its string form as carried in tokens.

    Args:
        db: Database session
        user_id: User ID to lookup

    Returns:
        User object if found, None otherwise
    """
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        return None
    return db.query(User).filter(User.id == user_id).first()


def get_all_users(db: Session) -> List[User]:
    """
    Get all users, ordered by username.

    Args:
        db: Database session

    Returns:
        List of all User objects
    """
    return db.query(User).order_by(User.username).all()
