"""Authorization tracks: the admin and consumer session domains."""

from dataclasses import dataclass

from wisata.models.user import Role


@dataclass(frozen=True)
class Track:
    """
    One independent authorization domain.

    Each track owns its cookie, its allowed roles and its page paths; nothing
    issued for one track is ever accepted by the other.
    """

    name: str
    cookie_name: str
    allowed_roles: frozenset[str]
    protected_prefixes: tuple[str, ...]
    auth_only_paths: tuple[str, ...]
    login_path: str
    landing_path: str

    def permits(self, role: object) -> bool:
        return isinstance(role, str) and role in self.allowed_roles

    def is_protected(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.protected_prefixes)

    def is_auth_only(self, path: str) -> bool:
        return path in self.auth_only_paths


CONSUMER_TRACK = Track(
    name="consumer",
    cookie_name="consumer-token",
    allowed_roles=frozenset({Role.CONSUMER.value}),
    protected_prefixes=("/consumer/dashboard",),
    auth_only_paths=("/consumer/login", "/consumer/register"),
    login_path="/consumer/login",
    landing_path="/consumer/dashboard",
)

ADMIN_TRACK = Track(
    name="admin",
    cookie_name="admin-token",
    allowed_roles=frozenset({Role.SUPER_ADMIN.value, Role.TOURISM_ADMIN.value}),
    protected_prefixes=("/admin/dashboard",),
    auth_only_paths=("/admin/login",),
    login_path="/admin/login",
    landing_path="/admin/dashboard",
)

TRACKS = (CONSUMER_TRACK, ADMIN_TRACK)
