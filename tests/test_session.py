"""Unit tests for wisata.services.session: login per track, cookie issue and teardown."""

import unittest
from unittest.mock import MagicMock

from starlette.responses import Response

from fakes import VALID_PASSWORD, InMemoryCredentialStore
from wisata.core.security import TokenCodec
from wisata.services.errors import InvalidCredentials, UpstreamUnavailable
from wisata.services.session import SessionIssuer, clear_session_cookie, set_session_cookie
from wisata.services.tracks import ADMIN_TRACK, CONSUMER_TRACK

SECRET = "session-test-secret-with-enough-length-01"


def _issuer(store: InMemoryCredentialStore) -> SessionIssuer:
    return SessionIssuer(store, TokenCodec(SECRET))


def _set_cookie_headers(response: Response) -> list[str]:
    return [v.decode("latin-1") for k, v in response.raw_headers if k == b"set-cookie"]


class TestLoginSucceeds(unittest.TestCase):
    """Valid credentials in the matching track yield a token whose role belongs to the track."""

    def setUp(self) -> None:
        self.store = InMemoryCredentialStore()
        self.store.add("super@wisata.id", "SUPER_ADMIN", name="Super")
        self.store.add("dinas@wisata.id", "TOURISM_ADMIN")
        self.store.add("turis@wisata.id", "CONSUMER", name="Turis")

    def test_each_account_logs_into_its_track(self) -> None:
        cases = [
            ("super@wisata.id", ADMIN_TRACK),
            ("dinas@wisata.id", ADMIN_TRACK),
            ("turis@wisata.id", CONSUMER_TRACK),
        ]
        codec = TokenCodec(SECRET)
        for email, track in cases:
            with self.subTest(email=email):
                result = _issuer(self.store).login(track, email, VALID_PASSWORD)
                payload = codec.verify(result.token)
                self.assertIn(payload["role"], track.allowed_roles)
                self.assertEqual(payload["email"], email)
                self.assertEqual(result.user.email, email)

    def test_public_user_has_no_password_hash(self) -> None:
        result = _issuer(self.store).login(CONSUMER_TRACK, "turis@wisata.id", VALID_PASSWORD)
        dumped = result.user.model_dump()
        self.assertEqual(set(dumped), {"id", "email", "name", "role"})
        self.assertEqual(dumped["name"], "Turis")

    def test_email_lookup_ignores_case(self) -> None:
        result = _issuer(self.store).login(CONSUMER_TRACK, "Turis@Wisata.id", VALID_PASSWORD)
        self.assertEqual(result.user.role, "CONSUMER")


class TestLoginFailsUniformly(unittest.TestCase):
    """Unknown email, wrong password and wrong track are indistinguishable."""

    def setUp(self) -> None:
        self.store = InMemoryCredentialStore()
        self.store.add("dinas@wisata.id", "TOURISM_ADMIN")
        self.store.add("turis@wisata.id", "CONSUMER")

    def _failure(self, track, email: str, password: str) -> InvalidCredentials:
        with self.assertRaises(InvalidCredentials) as ctx:
            _issuer(self.store).login(track, email, password)
        return ctx.exception

    def test_same_error_for_unknown_email_and_bad_password(self) -> None:
        unknown = self._failure(ADMIN_TRACK, "nobody@wisata.id", VALID_PASSWORD)
        bad_password = self._failure(ADMIN_TRACK, "dinas@wisata.id", "salah-password")
        self.assertEqual(unknown.message, bad_password.message)
        self.assertEqual(unknown.status_code, bad_password.status_code)
        self.assertEqual(unknown.status_code, 401)

    def test_wrong_track_is_rejected_like_bad_password(self) -> None:
        consumer_into_admin = self._failure(ADMIN_TRACK, "turis@wisata.id", VALID_PASSWORD)
        admin_into_consumer = self._failure(CONSUMER_TRACK, "dinas@wisata.id", VALID_PASSWORD)
        self.assertEqual(consumer_into_admin.message, InvalidCredentials().message)
        self.assertEqual(admin_into_consumer.message, InvalidCredentials().message)

    def test_store_failure_propagates(self) -> None:
        store = MagicMock()
        store.find_by_email.side_effect = UpstreamUnavailable()
        with self.assertRaises(UpstreamUnavailable):
            SessionIssuer(store, TokenCodec(SECRET)).login(ADMIN_TRACK, "a@wisata.id", "x")
        store.find_by_email.assert_called_once()


class TestSessionCookies(unittest.TestCase):
    def test_issued_cookie_attributes(self) -> None:
        response = Response()
        set_session_cookie(response, ADMIN_TRACK, "tok", secure=False)
        headers = _set_cookie_headers(response)
        self.assertEqual(len(headers), 1)
        cookie = headers[0]
        self.assertTrue(cookie.startswith("admin-token=tok;"))
        self.assertIn("HttpOnly", cookie)
        self.assertIn("Path=/", cookie)
        self.assertIn("Max-Age=604800", cookie)
        self.assertNotIn("Secure", cookie)

    def test_secure_flag_when_requested(self) -> None:
        response = Response()
        set_session_cookie(response, CONSUMER_TRACK, "tok", secure=True)
        self.assertIn("Secure", _set_cookie_headers(response)[0])

    def test_clear_cookie_expires_immediately(self) -> None:
        response = Response()
        clear_session_cookie(response, CONSUMER_TRACK)
        cookie = _set_cookie_headers(response)[0]
        self.assertTrue(cookie.startswith("consumer-token="))
        self.assertIn("Max-Age=0", cookie)
        self.assertIn("expires=Thu, 01 Jan 1970 00:00:00 GMT", cookie)
        self.assertIn("Path=/", cookie)

    def test_clear_cookie_is_idempotent(self) -> None:
        first, second = Response(), Response()
        clear_session_cookie(first, ADMIN_TRACK)
        clear_session_cookie(second, ADMIN_TRACK)
        clear_session_cookie(second, ADMIN_TRACK)
        self.assertEqual(_set_cookie_headers(first)[0], _set_cookie_headers(second)[-1])


if __name__ == "__main__":
    unittest.main()
