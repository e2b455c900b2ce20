"""ORM model for credential records (admin and consumer accounts)."""

import enum
import uuid

from sqlalchemy import Column, DateTime, String, func

from wisata.models.base import Base


class Role(str, enum.Enum):
    """Account role; decides which authorization track an account may sign in to."""

    SUPER_ADMIN = "SUPER_ADMIN"
    TOURISM_ADMIN = "TOURISM_ADMIN"
    CONSUMER = "CONSUMER"


def _new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    """
    Account used for JWT cookie sessions.

    role: SUPER_ADMIN or TOURISM_ADMIN (admin track), CONSUMER (consumer track).
    One row per email.
    """

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_user_id)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        String(32),
        nullable=False,
        default=Role.CONSUMER.value,
        server_default=Role.CONSUMER.value,
        index=True,
    )
    name = Column(String(255), nullable=True)
    phone_number = Column(String(64), nullable=True)
    address = Column(String(1024), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
