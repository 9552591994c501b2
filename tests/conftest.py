"""
Shared fixtures for the blog tests.

Each test gets its own store on a fresh database, seeded with ten posts and
dropped again on teardown.
"""

import os
import random

# Keep the module-level engine off the production database during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from apps.shared.database import build_engine, build_session_factory
from apps.blog.main import app, get_store
from apps.blog.store import BlogPostStore
from factories import SEED_COUNT, generate_many


@pytest.fixture
def rng():
    """Seeded generator so generated test data is reproducible."""
    return random.Random(20261016)


@pytest.fixture
def store(tmp_path):
    """A clean store on its own database, torn down after the test."""
    url = os.getenv("TEST_DATABASE_URL") or f"sqlite:///{tmp_path / 'blog.db'}"
    engine = build_engine(url)
    blog_store = BlogPostStore(build_session_factory(engine))
    blog_store.create_schema()

    yield blog_store

    blog_store.drop_all()
    engine.dispose()


@pytest.fixture
def seeded_posts(store, rng):
    return store.insert_many(generate_many(rng, SEED_COUNT))


@pytest.fixture
def client(store, seeded_posts):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
