"""Admin authorization gate.

A single configured shared secret unlocks admin access. Each successful login
mints a random bearer token stored in an in-memory session table until it
expires or is revoked through logout.
"""

from __future__ import annotations

import hmac
import logging
import secrets
import time
from dataclasses import dataclass
from threading import RLock
from typing import Callable

from .errors import AuthError


log = logging.getLogger("wallet_mock.auth")

BEARER_PREFIX = "Bearer "
DEFAULT_TOKEN_TTL_SECONDS = 3600


@dataclass(frozen=True, slots=True)
class AdminSession:
    token: str
    issued_at: float
    expires_at: float

    def expired(self, now: float) -> bool:
        return now >= self.expires_at


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an `Authorization: Bearer <token>` header value."""

    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):]
    return token or None


class AdminAuthGate:
    def __init__(
        self,
        password: str,
        *,
        token_ttl: float = DEFAULT_TOKEN_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not password:
            raise ValueError("admin password must not be empty")
        if token_ttl <= 0:
            raise ValueError("token_ttl must be positive")
        self._password = password
        self._token_ttl = token_ttl
        self._clock = clock
        self._lock = RLock()
        self._sessions: dict[str, AdminSession] = {}

    @property
    def token_ttl(self) -> float:
        return self._token_ttl

    def login(self, password: object) -> str:
        if not isinstance(password, str) or not hmac.compare_digest(
            password.encode("utf-8"), self._password.encode("utf-8")
        ):
            log.warning("Rejected admin login attempt")
            raise AuthError("Invalid password")

        now = self._clock()
        session = AdminSession(token=secrets.token_urlsafe(32), issued_at=now, expires_at=now + self._token_ttl)
        with self._lock:
            self._purge_expired(now)
            self._sessions[session.token] = session
            log.info("Admin session issued (active sessions: %d)", len(self._sessions))
        return session.token

    def authorize(self, authorization: str | None) -> bool:
        """True only for `Bearer <token>` naming a live session."""

        token = bearer_token(authorization)
        if token is None:
            return False
        now = self._clock()
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return False
            if session.expired(now):
                del self._sessions[token]
                return False
            return True

    def require(self, authorization: str | None) -> None:
        if not self.authorize(authorization):
            log.warning("Unauthorized admin request")
            raise AuthError()

    def logout(self, authorization: str | None) -> None:
        self.require(authorization)
        token = bearer_token(authorization)
        with self._lock:
            self._sessions.pop(token, None)
        log.info("Admin session revoked")

    def active_sessions(self) -> int:
        with self._lock:
            self._purge_expired(self._clock())
            return len(self._sessions)

    def _purge_expired(self, now: float) -> None:
        for token in [t for t, s in self._sessions.items() if s.expired(now)]:
            del self._sessions[token]
