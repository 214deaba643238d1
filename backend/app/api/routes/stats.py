"""
Reporting endpoint with summary statistics over all blogs.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core import blog_stats
from app.database import get_db
from app.services import blog_service

router = APIRouter(prefix="/api/stats", tags=["stats"])


class FavoriteBlog(BaseModel):
    title: str
    author: Optional[str] = None
    likes: int


class AuthorBlogCount(BaseModel):
    author: Optional[str] = None
    count: int


class AuthorLikes(BaseModel):
    author: Optional[str] = None
    likes: int


class StatsResponse(BaseModel):
    """Response model for blog statistics."""
    total_likes: int
    favorite_blog: Optional[FavoriteBlog] = None
    most_blogs: Optional[AuthorBlogCount] = None
    most_likes: Optional[AuthorLikes] = None


@router.get("", response_model=StatsResponse)
async def get_stats(db: Session = Depends(get_db)):
    """
    Summary statistics over every stored blog.

    Returns:
        Total likes, the most liked blog, and the authors with the
        most blogs and the most likes (null fields when there are no blogs)
    """
    blogs = blog_service.get_all_blogs(db)
    return blog_stats.summarize(blogs)
