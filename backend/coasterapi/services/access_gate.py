from __future__ import annotations

import secrets

from coasterapi.core.errors import ConfigurationError

ADMIN_USERNAME = "admin"


class AccessGate:
    """Shared-secret check for the admin surface. Holds no per-request state."""

    def __init__(self, secret: str) -> None:
        self._secret = secret.encode("utf-8")

    @classmethod
    def from_secret(cls, secret: str | None) -> AccessGate:
        if not secret:
            raise ConfigurationError("required environment variable ADMIN_PASSWORD not set")
        return cls(secret)

    def authorize(self, username: str | None, password: str | None) -> bool:
        if username is None or password is None:
            return False
        user_ok = secrets.compare_digest(username.encode("utf-8"), ADMIN_USERNAME.encode("utf-8"))
        password_ok = secrets.compare_digest(password.encode("utf-8"), self._secret)
        return user_ok and password_ok
