"""
Wire representations of users and blogs.

Identifiers are exposed as strings under "id"; password hashes are
never part of any response model.
"""

from typing import List, Optional
from pydantic import BaseModel

from app.models.blog import Blog
from app.models.user import User


class OwnerSummary(BaseModel):
    """Owner embedded in a blog."""
    id: str
    username: str
    name: Optional[str] = None


class BlogResponse(BaseModel):
    """Response model for blog data."""
    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int
    user: Optional[OwnerSummary] = None


class BlogSummary(BaseModel):
    """Blog embedded in a user."""
    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int


class UserResponse(BaseModel):
    """Response model for user data."""
    id: str
    username: str
    name: Optional[str] = None
    blogs: List[BlogSummary] = []


def blog_to_response(blog: Blog) -> BlogResponse:
    """Convert a Blog row to its response model."""
    owner = blog.owner
    return BlogResponse(
        id=str(blog.id),
        title=blog.title,
        author=blog.author,
        url=blog.url,
        likes=blog.likes,
        user=OwnerSummary(
            id=str(owner.id),
            username=owner.username,
            name=owner.name,
        ) if owner is not None else None,
    )


def user_to_response(user: User) -> UserResponse:
    """Convert a User row to its response model."""
    return UserResponse(
        id=str(user.id),
        username=user.username,
        name=user.name,
        blogs=[
            BlogSummary(
                id=str(blog.id),
                title=blog.title,
                author=blog.author,
                url=blog.url,
                likes=blog.likes,
            )
            for blog in user.blogs
        ],
    )
