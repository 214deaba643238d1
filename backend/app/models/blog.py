"""
Blog model for storing user-submitted blog links.

Each blog belongs to the user who created it.
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base


class Blog(Base):
    """
    Blog model for persisting blog entries.

    Attributes:
        id: Primary key
        title: Blog title (required)
        author: Author display string (optional)
        url: Link to the blog (required)
        likes: Non-negative like counter
        user_id: Foreign key to owner user
        created_at: Blog creation timestamp
        updated_at: Last modification timestamp
        owner: Relationship to User model
    """
    __tablename__ = "blogs"
    __table_args__ = (CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=True)
    url = Column(String(2048), nullable=False)
    likes = Column(Integer, default=0, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    owner = relationship("User", back_populates="blogs")

    def __repr__(self):
        return f"<Blog(id={self.id}, title='{self.title}', user_id={self.user_id})>"
