"""Database infrastructure for the reports application.

This module exposes concrete helpers to create and reuse a SQLAlchemy engine
connected to the hosted record store (PostgreSQL). It belongs to the
infrastructure layer because it deals with external systems.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

DB_URL_ENV_VAR = "REPORTS_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    The project ``.env`` file is loaded first so local runs do not need
    exported variables.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the record store.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the record store.

    Returns:
        Engine: Lazily initialized engine connected to the record store.
    """
    global _engine
    if _engine is None:
        db_url = _get_env_var(DB_URL_ENV_VAR)
        _engine = _create_engine(db_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application use cases can depend only on the protocol.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the record store.

        Returns:
            Engine: SQLAlchemy engine connected to the record store.
        """
        return get_engine()


__all__ = [
    "DB_URL_ENV_VAR",
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
