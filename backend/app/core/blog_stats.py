"""
Summary statistics over blog collections.

All functions are pure: they accept any sequence of blog records
(mappings or objects with title/author/likes attributes), never mutate
it and return plain dicts. Ties always go to the record or author seen
first in input order.
"""

from typing import Any, Dict, Iterable, Optional


def _field(blog: Any, name: str, default: Any = None) -> Any:
    """Read a field from a mapping or an attribute-style record."""
    if isinstance(blog, dict):
        return blog.get(name, default)
    return getattr(blog, name, default)


def _likes(blog: Any) -> int:
    return _field(blog, "likes") or 0


def _group_by_author(blogs: Iterable[Any]) -> Dict[Optional[str], list]:
    """Group blogs by exact author string, keeping first-appearance order."""
    groups: Dict[Optional[str], list] = {}
    for blog in blogs:
        groups.setdefault(_field(blog, "author"), []).append(blog)
    return groups


def _top_entry(totals: Dict[Optional[str], int]):
    """Entry with the largest value; max() keeps the first on ties."""
    return max(totals.items(), key=lambda item: item[1])


def total_likes(blogs: Iterable[Any]) -> int:
    """Sum of likes across all blogs (0 for an empty collection)."""
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Iterable[Any]) -> Optional[Dict[str, Any]]:
    """
    Blog with the most likes.

    Returns:
        {"title", "author", "likes"} of the first most-liked blog,
        or None for an empty collection
    """
    blogs = list(blogs)
    if not blogs:
        return None

    favorite = max(blogs, key=_likes)
    return {
        "title": _field(favorite, "title"),
        "author": _field(favorite, "author"),
        "likes": _likes(favorite),
    }


def most_blogs(blogs: Iterable[Any]) -> Optional[Dict[str, Any]]:
    """
    Author with the largest number of blogs.

    Returns:
        {"author", "count"} or None for an empty collection
    """
    groups = _group_by_author(blogs)
    if not groups:
        return None

    author, count = _top_entry({author: len(entries) for author, entries in groups.items()})
    return {"author": author, "count": count}


def most_likes(blogs: Iterable[Any]) -> Optional[Dict[str, Any]]:
    """
    Author whose blogs have the largest combined likes.

    Returns:
        {"author", "likes"} or None for an empty collection
    """
    groups = _group_by_author(blogs)
    if not groups:
        return None

    author, likes = _top_entry({
        author: sum(_likes(blog) for blog in entries)
        for author, entries in groups.items()
    })
    return {"author": author, "likes": likes}


def summarize(blogs: Iterable[Any]) -> Dict[str, Any]:
    """All statistics for one collection, as served by the stats endpoint."""
    blogs = list(blogs)
    return {
        "total_likes": total_likes(blogs),
        "favorite_blog": favorite_blog(blogs),
        "most_blogs": most_blogs(blogs),
        "most_likes": most_likes(blogs),
    }
