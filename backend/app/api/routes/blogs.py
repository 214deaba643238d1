"""
Blog API endpoints for CRUD operations on user blogs.

Listing and reading are open; creating needs a valid token; updating
and deleting need a valid token that belongs to the blog's owner.
"""

import re

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from pydantic import BaseModel, Field
from typing import Optional, List

from app.api.serializers import BlogResponse, blog_to_response
from app.core.auth import ensure_owner, get_identity, require_user
from app.core.errors import MalformedId, NotFound
from app.database import get_db
from app.models.blog import Blog
from app.models.user import User
from app.services import blog_service


router = APIRouter(prefix="/api/blogs", tags=["blogs"])

BLOG_ID_PATTERN = re.compile(r'[0-9]{1,18}')

# Largest value a signed 64-bit INTEGER column can hold
MAX_LIKES = 2**63 - 1


# Request models
class CreateBlogRequest(BaseModel):
    """Request model for creating a blog. Title and url are checked by the service."""
    title: Optional[str] = Field(None, max_length=255, description="Blog title")
    url: Optional[str] = Field(None, max_length=2048, description="Blog URL")
    author: Optional[str] = Field(None, max_length=255, description="Author name (optional)")
    likes: Optional[int] = Field(None, ge=0, le=MAX_LIKES, description="Initial likes (defaults to 0)")


class UpdateBlogRequest(BaseModel):
    """Request model for updating a blog."""
    title: Optional[str] = Field(None, max_length=255, description="New title (optional)")
    url: Optional[str] = Field(None, max_length=2048, description="New URL (optional)")
    author: Optional[str] = Field(None, max_length=255, description="New author (optional)")
    likes: Optional[int] = Field(None, ge=0, le=MAX_LIKES, description="New like count (optional)")


def parse_blog_id(blog_id: str) -> int:
    """
    Turn a path identifier into a blog key.

    Raises:
        MalformedId: The identifier is not a decimal integer
    """
    if not BLOG_ID_PATTERN.fullmatch(blog_id):
        raise MalformedId()
    return int(blog_id)


def _find_blog(db: Session, blog_id: int, message: str = "blog not found", key: str = "error") -> Blog:
    blog = blog_service.get_blog_by_id(db, blog_id)
    if not blog:
        raise NotFound(message, key=key)
    return blog


@router.get("", response_model=List[BlogResponse])
async def list_blogs(
    identity: Optional[User] = Depends(get_identity),
    db: Session = Depends(get_db),
):
    """
    List all blogs with their owners.

    A token is optional, but one that is sent must be valid.

    Args:
        identity: Resolved caller, if any
        db: Database session

    Returns:
        List of blogs in creation order
    """
    return [blog_to_response(blog) for blog in blog_service.get_all_blogs(db)]


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(
    blog_id: int = Depends(parse_blog_id),
    db: Session = Depends(get_db),
):
    """
    Get a specific blog by ID.

    Raises:
        400: Malformed ID
        404: Blog not found
    """
    return blog_to_response(_find_blog(db, blog_id))


@router.post("", response_model=BlogResponse, status_code=201)
async def create_blog(
    request: CreateBlogRequest,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Create a new blog owned by the caller.

    Args:
        request: Blog creation request
        user: Authenticated caller
        db: Database session

    Returns:
        Created blog

    Raises:
        400: Title or url missing
        401: Missing, invalid or expired token
    """
    blog = blog_service.create_blog(
        db,
        user,
        title=request.title,
        url=request.url,
        author=request.author,
        likes=request.likes,
    )
    return blog_to_response(blog)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(
    request: UpdateBlogRequest,
    blog_id: int = Depends(parse_blog_id),
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Update an existing blog.

    Can update any of title, author, url and likes. Omitted fields keep
    their value; an explicit null author clears it.

    Raises:
        400: Malformed ID or invalid fields
        401: Missing, invalid or expired token
        403: Caller does not own the blog
        404: Blog not found
    """
    blog = _find_blog(db, blog_id)
    ensure_owner(user, blog, message="You do not have permission to update this blog")

    blog = blog_service.update_blog(db, blog, **request.model_dump(exclude_unset=True))
    return blog_to_response(blog)


@router.delete("/{blog_id}", status_code=204)
async def delete_blog(
    blog_id: int = Depends(parse_blog_id),
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Delete a blog.

    Raises:
        400: Malformed ID
        401: Missing, invalid or expired token
        403: Caller does not own the blog
        404: Blog not found
    """
    blog = _find_blog(db, blog_id, message="Blog not found", key="message")
    ensure_owner(user, blog, message="You do not have permission to delete this blog", key="message")

    blog_service.delete_blog(db, blog)
    return Response(status_code=204)
