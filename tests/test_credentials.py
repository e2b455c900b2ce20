"""Unit tests for wisata.services.credentials: SqlCredentialStore over a mocked session."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, OperationalError

from wisata.models.user import User
from wisata.services.credentials import SqlCredentialStore, normalize_email
from wisata.services.errors import DuplicateEmail, UpstreamUnavailable


class TestNormalizeEmail(unittest.TestCase):
    def test_strips_and_lowercases(self) -> None:
        self.assertEqual(normalize_email("  Turis@Wisata.ID "), "turis@wisata.id")


class TestLookups(unittest.TestCase):
    def test_find_by_email_returns_first_match(self) -> None:
        session = MagicMock()
        user = User(id="u-1", email="turis@wisata.id", password_hash="h", role="CONSUMER")
        session.query.return_value.filter.return_value.first.return_value = user
        self.assertIs(SqlCredentialStore(session).find_by_email("Turis@wisata.id"), user)
        session.query.assert_called_once_with(User)

    def test_database_error_becomes_upstream_unavailable(self) -> None:
        session = MagicMock()
        session.query.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
        with self.assertRaises(UpstreamUnavailable):
            SqlCredentialStore(session).find_by_email("turis@wisata.id")

    def test_count_by_role_defaults_to_zero(self) -> None:
        session = MagicMock()
        session.query.return_value.filter.return_value.scalar.return_value = None
        self.assertEqual(SqlCredentialStore(session).count_by_role("SUPER_ADMIN"), 0)


class TestCreate(unittest.TestCase):
    def test_create_commits_normalized_record(self) -> None:
        session = MagicMock()
        user = SqlCredentialStore(session).create(
            email="Baru@Wisata.id",
            password_hash="hash",
            role="CONSUMER",
            name="Baru",
        )
        self.assertEqual(user.email, "baru@wisata.id")
        self.assertEqual(user.role, "CONSUMER")
        session.add.assert_called_once_with(user)
        session.commit.assert_called_once()

    def test_unique_violation_is_duplicate_email(self) -> None:
        session = MagicMock()
        session.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))
        with self.assertRaises(DuplicateEmail):
            SqlCredentialStore(session).create(email="a@wisata.id", password_hash="h", role="CONSUMER")
        session.rollback.assert_called_once()

    def test_other_database_error_is_upstream_unavailable(self) -> None:
        session = MagicMock()
        session.commit.side_effect = OperationalError("INSERT", {}, Exception("gone"))
        with self.assertRaises(UpstreamUnavailable):
            SqlCredentialStore(session).create(email="a@wisata.id", password_hash="h", role="CONSUMER")
        session.rollback.assert_called_once()


if __name__ == "__main__":
    unittest.main()
