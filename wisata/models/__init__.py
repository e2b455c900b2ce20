"""SQLAlchemy ORM models."""

from wisata.models.base import Base
from wisata.models.user import Role, User

__all__ = ["Base", "Role", "User"]
