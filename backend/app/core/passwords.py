"""
Password hashing and verification using bcrypt.
"""

import bcrypt

DEFAULT_ROUNDS = 10


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Hash a plain-text password with a fresh salt.

    Args:
        password: Plain-text password
        rounds: bcrypt cost factor (log2 of the iteration count)

    Returns:
        Encoded bcrypt hash

    Raises:
        ValueError: If the password exceeds bcrypt's 72 byte limit
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a candidate password against a stored hash."""
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or over-long candidate
        return False
