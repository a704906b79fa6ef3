"""Bearer session stores.

A session maps an opaque token to a user id. The in-memory store lives for
the life of the process and is lost on restart; the Redis store can be shared
between workers and expires sessions after the configured TTL.
"""

import logging
import secrets
import threading
from functools import lru_cache
from typing import Protocol

import redis

from tender.config import get_settings

logger = logging.getLogger(__name__)

TOKEN_PREFIX = "sess_"


def generate_token() -> str:
    """Create a new opaque session token."""
    return f"{TOKEN_PREFIX}{secrets.token_urlsafe(32)}"


class SessionStore(Protocol):
    """Keyed store of token -> user id."""

    def create(self, user_id: int) -> str: ...

    def get(self, token: str) -> int | None: ...

    def revoke(self, token: str) -> None: ...

    def revoke_user(self, user_id: int) -> None: ...

    def clear(self) -> None: ...


class InMemorySessionStore:
    """Process-local session store."""

    def __init__(self) -> None:
        self._sessions: dict[str, int] = {}
        self._lock = threading.Lock()

    def create(self, user_id: int) -> str:
        token = generate_token()
        with self._lock:
            self._sessions[token] = user_id
        return token

    def get(self, token: str) -> int | None:
        with self._lock:
            return self._sessions.get(token)

    def revoke(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def revoke_user(self, user_id: int) -> None:
        with self._lock:
            for token in [t for t, uid in self._sessions.items() if uid == user_id]:
                del self._sessions[token]

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


class RedisSessionStore:
    """Session store backed by Redis.

    Each token is a key holding the user id; a per-user set tracks the user's
    tokens so they can all be revoked at once.
    """

    def __init__(self, client: redis.Redis, ttl_seconds: int, namespace: str = "tender") -> None:
        self.client = client
        self.ttl_seconds = ttl_seconds
        self.namespace = namespace

    def _token_key(self, token: str) -> str:
        return f"{self.namespace}:session:{token}"

    def _user_key(self, user_id: int | str) -> str:
        return f"{self.namespace}:user_sessions:{user_id}"

    def create(self, user_id: int) -> str:
        token = generate_token()
        pipe = self.client.pipeline()
        pipe.set(self._token_key(token), user_id, ex=self.ttl_seconds)
        pipe.sadd(self._user_key(user_id), token)
        pipe.expire(self._user_key(user_id), self.ttl_seconds)
        pipe.execute()
        return token

    def get(self, token: str) -> int | None:
        value = self.client.get(self._token_key(token))
        if value is None:
            return None
        return int(value)

    def revoke(self, token: str) -> None:
        user_id = self.get(token)
        self.client.delete(self._token_key(token))
        if user_id is not None:
            self.client.srem(self._user_key(user_id), token)

    def revoke_user(self, user_id: int) -> None:
        tokens = self.client.smembers(self._user_key(user_id))
        keys = [
            self._token_key(t.decode() if isinstance(t, bytes) else t) for t in tokens
        ]
        if keys:
            self.client.delete(*keys)
        self.client.delete(self._user_key(user_id))

    def clear(self) -> None:
        for pattern in (self._token_key("*"), self._user_key("*")):
            keys = list(self.client.scan_iter(match=pattern))
            if keys:
                self.client.delete(*keys)


@lru_cache
def get_session_store() -> SessionStore:
    """Get the process-wide session store selected by configuration."""
    settings = get_settings()
    if settings.session_backend == "redis":
        logger.info("Using Redis session store")
        return RedisSessionStore(
            redis.from_url(settings.redis_url),
            ttl_seconds=settings.session_ttl_minutes * 60,
        )
    logger.info("Using in-memory session store")
    return InMemorySessionStore()
