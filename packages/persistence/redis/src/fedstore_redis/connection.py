"""RedisConnectionManager — sync Redis client lifecycle and health check."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from redis.exceptions import RedisError as RedisClientError

from .exceptions import RedisConnectionError

if TYPE_CHECKING:
    from redis import Redis


class RedisConnectionManager:
    """Wrap a ``redis.Redis`` client with lifecycle and health-check helpers.

    The manager belongs to whoever assembles the stores; stores only
    receive ``manager.client``.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        *,
        socket_timeout: float | None = 5.0,
        socket_connect_timeout: float | None = 5.0,
        decode_responses: bool = True,
        **kwargs: Any,
    ) -> None:
        self._url = url
        self._socket_timeout = socket_timeout
        self._socket_connect_timeout = socket_connect_timeout
        self._decode_responses = decode_responses
        self._kwargs = kwargs
        self._client: Redis | None = None

    def connect(self) -> Redis:
        """Create and cache the client. Idempotent."""
        if self._client is not None:
            return self._client
        from redis import Redis

        try:
            self._client = Redis.from_url(
                self._url,
                socket_timeout=self._socket_timeout,
                socket_connect_timeout=self._socket_connect_timeout,
                decode_responses=self._decode_responses,
                **self._kwargs,
            )
            return self._client
        except (RedisClientError, ValueError) as e:
            raise RedisConnectionError(str(e)) from e

    @property
    def client(self) -> Redis:
        """Return the client; raises if not connected."""
        if self._client is None:
            raise RedisConnectionError("Not connected; call connect() first")
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def health_check(self) -> bool:
        """Ping the server; return True if reachable."""
        if self._client is None:
            return False
        try:
            return bool(self._client.ping())
        except RedisClientError:
            return False
