"""SQLAlchemy Declarative Base: shared base class for all ORM models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Model Service ORM models."""
    pass
