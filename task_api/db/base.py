"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
"""

from typing import Any

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Task API ORM models."""

    def as_dict(self) -> dict[str, Any]:
        """Column values keyed by column name."""
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }
