"""
User model for blog ownership and authentication.
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base


class User(Base):
    """
    User model for blog ownership and identification.

    Attributes:
        id: Primary key
        username: Unique username (3-255 chars), stored as given
        name: Optional display name
        password_hash: bcrypt hash, never serialized
        created_at: User registration timestamp
        blogs: Relationship to user's blogs, in creation order
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=True)
    password_hash = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    blogs = relationship(
        "Blog",
        back_populates="owner",
        order_by="Blog.id",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
