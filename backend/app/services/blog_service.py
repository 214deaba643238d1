"""
Blog service layer for blog management operations.

Handles blog CRUD operations and required-field validation.
Ownership checks live in the authorization layer (app.core.auth).
"""

import logging
from typing import Optional, List
from sqlalchemy.orm import Session, joinedload

from app.core.errors import ValidationFailure
from app.models.blog import Blog
from app.models.user import User

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "title or url missing"

# Marks update_blog arguments the caller did not send
UNCHANGED = object()


def create_blog(
    db: Session,
    owner: User,
    title: Optional[str],
    url: Optional[str],
    author: Optional[str] = None,
    likes: Optional[int] = None,
) -> Blog:
    """
    Create a new blog owned by a user.

    The blog is appended to the owner's blog list.

    Args:
        db: Database session
        owner: Authenticated user creating the blog
        title: Blog title
        url: Blog URL
        author: Author display string (optional)
        likes: Initial likes, defaults to 0

    Returns:
        Created Blog object

    Raises:
        ValidationFailure: If title or url is missing
    """
    if not title or not url:
        raise ValidationFailure(MISSING_FIELDS_MESSAGE)

    new_blog = Blog(
        title=title,
        author=author,
        url=url,
        likes=likes or 0,
        user_id=owner.id,
    )
    owner.blogs.append(new_blog)

    db.add(new_blog)
    db.commit()
    db.refresh(new_blog)

    logger.info(f"User '{owner.username}' created blog {new_blog.id}")
    return new_blog


def update_blog(
    db: Session,
    blog: Blog,
    title=UNCHANGED,
    author=UNCHANGED,
    url=UNCHANGED,
    likes=UNCHANGED,
) -> Blog:
    """
    Update an existing blog.

    Fields left as UNCHANGED keep their value. Passing None for author
    clears it.

    Args:
        db: Database session
        blog: Blog to update
        title: New title
        author: New author, or None to clear it
        url: New URL
        likes: New like count

    Returns:
        Updated Blog object

    Raises:
        ValidationFailure: If title or url would become empty, or likes null
    """
    if title is not UNCHANGED:
        if not title:
            raise ValidationFailure(MISSING_FIELDS_MESSAGE)
        blog.title = title

    if url is not UNCHANGED:
        if not url:
            raise ValidationFailure(MISSING_FIELDS_MESSAGE)
        blog.url = url

    if author is not UNCHANGED:
        blog.author = author

    if likes is not UNCHANGED:
        if likes is None:
            raise ValidationFailure("likes must be a non-negative integer")
        blog.likes = likes

    db.commit()
    db.refresh(blog)

    return blog


def delete_blog(db: Session, blog: Blog) -> None:
    """
    Delete a blog.

    Args:
        db: Database session
        blog: Blog to delete
    """
    blog_id = blog.id
    db.delete(blog)
    db.commit()

    logger.info(f"Deleted blog {blog_id}")


def get_blog_by_id(db: Session, blog_id: int) -> Optional[Blog]:
    """
    Get blog by ID.

    Args:
        db: Database session
        blog_id: Blog ID to lookup

    Returns:
        Blog object if found, None otherwise
    """
    return db.query(Blog).filter(Blog.id == blog_id).first()


def get_all_blogs(db: Session) -> List[Blog]:
    """
    Get all blogs with their owners, in creation order.

    Args:
        db: Database session

    Returns:
        List of Blog objects
    """
    return db.query(Blog).options(joinedload(Blog.owner)).order_by(Blog.id).all()
