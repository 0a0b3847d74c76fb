"""Database ports for the reports application.

This module defines the application-layer protocol for accessing the record
store engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the record store database engine.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the record store database.

        Returns:
            Engine: SQLAlchemy engine connected to the record store.
        """


__all__ = ["DatabaseEnginePort"]
