"""
Database configuration and session management

This module provides the basic SQLAlchemy setup for database connectivity.
NO models are defined here - this is just infrastructure.
"""

import os
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool

# Get database URL from environment variable
DATABASE_URL = os.getenv("DATABASE_URL", "postgresql+psycopg2://backend_user:changeme@db:5432/backend_db")


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given database URL.

    SQLite connections are shared across FastAPI's threadpool, so the
    same-thread check is disabled for them.
    """
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    # Using NullPool for better compatibility with containerized environments
    return create_engine(
        url,
        poolclass=NullPool,
        echo=echo,  # Set to True for SQL query logging during development
        connect_args=connect_args,
    )


def build_session_factory(bind: Engine) -> sessionmaker:
    """Session factory whose objects stay readable after commit."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


# Create engine
engine = build_engine(DATABASE_URL)

# Session factory
SessionLocal = build_session_factory(engine)

# Base class for ORM models
Base = declarative_base()


def check_db_connection(bind: Engine = None) -> bool:
    """
    Test database connectivity
    Returns True if connection successful, False otherwise
    """
    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
