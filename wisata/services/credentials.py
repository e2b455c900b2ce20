"""Credential store adapter: account lookup and creation over SQLAlchemy."""

import logging
from typing import Protocol

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from wisata.models.user import User
from wisata.services.errors import DuplicateEmail, UpstreamUnavailable

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class CredentialStore(Protocol):
    """Read/create access to credential records. Implementations own their persistence."""

    def find_by_email(self, email: str) -> User | None: ...

    def count_by_role(self, role: str) -> int: ...

    def create(
        self,
        email: str,
        password_hash: str,
        role: str,
        name: str | None = None,
        phone_number: str | None = None,
        address: str | None = None,
    ) -> User: ...


class SqlCredentialStore:
    """CredentialStore backed by the users table. Database errors become UpstreamUnavailable."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> User | None:
        try:
            return (
                self.session.query(User)
                .filter(User.email == normalize_email(email))
                .first()
            )
        except SQLAlchemyError as e:
            logger.exception("Credential lookup by email failed")
            raise UpstreamUnavailable() from e

    def count_by_role(self, role: str) -> int:
        try:
            return (
                self.session.query(func.count(User.id))
                .filter(User.role == role)
                .scalar()
                or 0
            )
        except SQLAlchemyError as e:
            logger.exception("Credential count by role failed")
            raise UpstreamUnavailable() from e

    def create(
        self,
        email: str,
        password_hash: str,
        role: str,
        name: str | None = None,
        phone_number: str | None = None,
        address: str | None = None,
    ) -> User:
        user = User(
            email=normalize_email(email),
            password_hash=password_hash,
            role=role,
            name=name,
            phone_number=phone_number,
            address=address,
        )
        try:
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateEmail() from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Credential create failed")
            raise UpstreamUnavailable() from e
        return user
