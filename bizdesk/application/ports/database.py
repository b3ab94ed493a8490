"""Database port for the relational Record Store.

Infrastructure implementations provide the concrete SQLAlchemy engine so the
SQL store does not depend on configuration details.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine backing the records."""

    def get_records_engine(self) -> Engine:
        """Get the engine for the records database.

        Returns:
            Engine: SQLAlchemy engine connected to the records database.
        """


__all__ = ["DatabaseEnginePort"]
