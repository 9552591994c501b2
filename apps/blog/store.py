"""
Blog post store

Durable home for BlogPost records and the sole source of truth for identity,
counts and existence. Knows nothing about HTTP.

Every operation runs in its own session and commits before returning, so a
single call is a single unit of work.

Usage:
    from apps.shared.database import SessionLocal
    from apps.blog.store import BlogPostStore

    store = BlogPostStore(SessionLocal)
    store.insert_many([{"author": "A", "title": "T", "content": "C"}])
    store.count()  # -> 1
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional

from sqlalchemy import func, select, delete
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session, sessionmaker

from apps.blog.models import BlogPost, new_post_id, utc_now
from apps.shared.database import Base
from apps.shared.errors import (
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
    missing_field_message,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("author", "title")
UPDATABLE_FIELDS = ("author", "title", "content")


def validate_required(record: Dict[str, Any], fields: Iterable[str] = REQUIRED_FIELDS) -> None:
    """Raise ValidationError naming the first required field that is missing or empty."""
    for field in fields:
        value = record.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(missing_field_message(field), field=field)


class BlogPostStore:
    """CRUD operations on blog posts backed by a SQLAlchemy session factory."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except (OperationalError, InterfaceError) as e:
            db.rollback()
            logger.error(f"Blog store unavailable: {type(e).__name__}: {e}")
            raise StoreUnavailableError("Blog post store is unavailable") from e
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_schema(self) -> None:
        """Create the blog tables if they do not exist yet."""
        with self._session() as db:
            Base.metadata.create_all(bind=db.get_bind(), tables=[BlogPost.__table__])

    def insert_many(self, records: Iterable[Dict[str, Any]]) -> List[BlogPost]:
        """
        Persist new posts in one transaction.

        Assigns id and created to each record. If any record is missing
        author or title, nothing is persisted.

        Raises:
            ValidationError: a record lacks a required field
        """
        records = list(records)
        for record in records:
            validate_required(record)

        posts = [
            BlogPost(
                id=new_post_id(),
                author=record["author"],
                title=record["title"],
                content=record.get("content") or "",
                created=utc_now(),
            )
            for record in records
        ]

        with self._session() as db:
            db.add_all(posts)
            db.commit()

        if len(posts) > 1:
            logger.info(f"Inserted {len(posts)} blog posts")
        return posts

    def insert_one(self, record: Dict[str, Any]) -> BlogPost:
        return self.insert_many([record])[0]

    def count(self) -> int:
        with self._session() as db:
            return db.scalar(select(func.count()).select_from(BlogPost))

    def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        """Return the post with this id, or None."""
        with self._session() as db:
            return db.get(BlogPost, post_id)

    def find_one(self) -> Optional[BlogPost]:
        """Return any existing post, or None if the store is empty."""
        with self._session() as db:
            return db.scalars(select(BlogPost).limit(1)).first()

    def find_all(self) -> List[BlogPost]:
        with self._session() as db:
            return list(
                db.scalars(select(BlogPost).order_by(BlogPost.created.asc(), BlogPost.id.asc()))
            )

    def update_by_id(self, post_id: str, fields: Dict[str, Any]) -> BlogPost:
        """
        Apply the supplied author/title/content values to a post.

        id and created are never touched; unknown keys are ignored.

        Raises:
            ValidationError: author or title supplied but empty
            NotFoundError: no post has this id
        """
        update_data = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
        validate_required(
            update_data, [field for field in REQUIRED_FIELDS if field in update_data]
        )
        if update_data.get("content", "") is None:
            update_data["content"] = ""

        with self._session() as db:
            post = db.get(BlogPost, post_id)
            if post is None:
                raise NotFoundError(f"Blog post {post_id} not found")

            for key, value in update_data.items():
                setattr(post, key, value)

            db.commit()
            return post

    def delete_by_id(self, post_id: str) -> bool:
        """Delete a post. Returns False when there was nothing to delete."""
        with self._session() as db:
            result = db.execute(delete(BlogPost).where(BlogPost.id == post_id))
            db.commit()

        if result.rowcount == 0:
            logger.debug(f"Delete of absent blog post {post_id}")
            return False
        return True

    def drop_all(self) -> int:
        """Remove every post. Used between test scenarios."""
        with self._session() as db:
            result = db.execute(delete(BlogPost))
            db.commit()

        logger.info(f"Dropped {result.rowcount} blog posts")
        return result.rowcount
