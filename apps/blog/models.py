"""
Blog database models.

Stores blog posts. Identity and creation time are assigned by the store,
never by API callers.
"""
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, String, Text, DateTime

from apps.shared.database import Base


def new_post_id() -> str:
    return uuid4().hex


def utc_now() -> datetime:
    """Current UTC time truncated to the precision timestamps are serialized with."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    """
    Serialize a timestamp as ISO-8601 UTC with millisecond precision.

    Backends without timezone support hand back naive values; those are
    stored as UTC, so they are read as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class BlogPost(Base):
    """
    A single blog post.

    - id: opaque UUID hex, set on insert, never reused
    - author, title: required, non-empty
    - content: free text, may be empty
    - created: set on insert, never updated
    """
    __tablename__ = "blog_posts"

    id = Column(String(32), primary_key=True, default=new_post_id)
    author = Column(String(200), nullable=False)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False, default="")
    created = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)

    def to_dict(self) -> dict:
        """Convert post to dictionary for API responses."""
        return {
            "id": self.id,
            "author": self.author,
            "content": self.content,
            "title": self.title,
            "created": format_timestamp(self.created),
        }

    def __repr__(self) -> str:
        return f"<BlogPost id={self.id!r} title={self.title!r}>"
