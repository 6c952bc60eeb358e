"""
RouteDemo Backend — Read-only Sample Data
==========================================

What:  The blog posts and the sample user the demo routes serve.
Why:   The demo has no database; these values stand in for one so the
       templated routes have something to render.
How:   Built once at startup by `default_fixtures()` (or by a test) and passed
       into `create_app()`. Nothing in the application mutates them.
"""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from pydantic import BaseModel, Field


class BlogPost(BaseModel):
    """A single post of the simulated blog."""

    date: str = Field(description="Publication date (YYYY-MM-DD)")
    author: str = Field(description="Author handle")
    title: str = Field(description="Post title, used as link text in the listing")
    body: str = Field(description="Post body")

    model_config = {"frozen": True}


class User(BaseModel):
    """The user returned by the JSON lookup route."""

    name: str
    surname: str

    model_config = {"frozen": True}


class Fixtures:
    """
    Immutable container for the demo data.

    blog_posts keeps insertion order (the listing renders in that order) and is
    exposed as a read-only mapping. sample_user may be None, in which case the
    user lookup reports "not found" for every id.
    """

    __slots__ = ("_blog_posts", "_sample_user")

    def __init__(
        self,
        blog_posts: Optional[Mapping[int, BlogPost]] = None,
        sample_user: Optional[User] = None,
    ):
        for post_id in blog_posts or {}:
            if post_id < 1:
                raise ValueError(f"Blog post ids must be positive integers, got {post_id}")
        self._blog_posts: Mapping[int, BlogPost] = MappingProxyType(dict(blog_posts or {}))
        self._sample_user = sample_user

    @property
    def blog_posts(self) -> Mapping[int, BlogPost]:
        return self._blog_posts

    @property
    def sample_user(self) -> Optional[User]:
        return self._sample_user

    def iter_posts(self) -> Iterator[Tuple[int, BlogPost]]:
        return iter(self._blog_posts.items())

    def __setattr__(self, name, value):
        if hasattr(self, name):
            raise AttributeError(f"Fixtures are read-only; cannot set '{name}'")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"Fixtures(posts={list(self._blog_posts)}, sample_user={self._sample_user!r})"


def default_fixtures() -> Fixtures:
    """The data the demo ships with: one blog post and one sample user."""
    return Fixtures(
        blog_posts={
            1: BlogPost(
                date="2011-03-29",
                author="igorw",
                title="Using Silex",
                body="...",
            ),
        },
        sample_user=User(name="John", surname="Jim"),
    )
