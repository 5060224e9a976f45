"""
Key-value stores backing the persisted dashboard state.

Values are JSON-compatible objects. Backend failures surface as StorageError
and are never retried here.
"""
import asyncio
import copy
import json
import re
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from redis.asyncio import Redis
from redis.exceptions import RedisError

from content_detector.core.config import Config, RedisConfig
from content_detector.core.exceptions import StorageError
from content_detector.core.logging import get_logger

logger = get_logger(__name__)

_GLOB_SPECIALS = re.compile(r"([*?\[\]\\])")


def escape_glob(value: str) -> str:
    """Escape Redis MATCH metacharacters so the value matches literally."""
    return _GLOB_SPECIALS.sub(r"\\\1", value)


class KeyValueStore(Protocol):
    async def get_many(self, keys: Sequence[str]) -> dict[str, Any]:
        """Return stored values; missing keys are left out of the result."""
        ...

    async def set_many(self, items: Mapping[str, Any]) -> None:
        ...

    async def clear(self) -> None:
        ...

    async def close(self) -> None:
        ...


class InMemoryStore:
    """Process-local store; each instance owns its own state."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._lock = asyncio.Lock()

    async def get_many(self, keys: Sequence[str]) -> dict[str, Any]:
        async with self._lock:
            return {k: copy.deepcopy(self._data[k]) for k in keys if k in self._data}

    async def set_many(self, items: Mapping[str, Any]) -> None:
        async with self._lock:
            for key, value in items.items():
                self._data[key] = copy.deepcopy(value)

    async def clear(self) -> None:
        async with self._lock:
            self._data.clear()

    async def close(self) -> None:
        return None


class RedisStore:
    """Store that survives restarts, one JSON string per key."""

    def __init__(self, client: Redis, key_prefix: str) -> None:
        if not key_prefix:
            raise ValueError("RedisStore needs a non-empty key prefix")
        self._client = client
        self._prefix = key_prefix

    @classmethod
    def from_config(cls, redis_config: RedisConfig) -> "RedisStore":
        client = Redis.from_url(redis_config.redis_url, decode_responses=True)
        return cls(client, redis_config.key_prefix)

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get_many(self, keys: Sequence[str]) -> dict[str, Any]:
        if not keys:
            return {}
        try:
            raw_values = await self._client.mget([self._key(k) for k in keys])
        except RedisError as e:
            logger.error("store_read_failed", keys=list(keys), error=str(e))
            raise StorageError(f"Failed to read from store: {e}") from e

        result: dict[str, Any] = {}
        for key, raw in zip(keys, raw_values):
            if raw is None:
                continue
            try:
                result[key] = json.loads(raw)
            except json.JSONDecodeError as e:
                logger.error("store_value_corrupt", key=key, error=str(e))
                raise StorageError(f"Stored value for {key} is not valid JSON") from e
        return result

    async def set_many(self, items: Mapping[str, Any]) -> None:
        if not items:
            return
        try:
            async with self._client.pipeline(transaction=True) as pipe:
                for key, value in items.items():
                    pipe.set(self._key(key), json.dumps(value))
                await pipe.execute()
        except RedisError as e:
            logger.error("store_write_failed", keys=list(items), error=str(e))
            raise StorageError(f"Failed to write to store: {e}") from e

    async def clear(self) -> None:
        try:
            pattern = escape_glob(self._prefix) + "*"
            keys = [key async for key in self._client.scan_iter(match=pattern)]
            if keys:
                await self._client.delete(*keys)
        except RedisError as e:
            logger.error("store_clear_failed", error=str(e))
            raise StorageError(f"Failed to clear store: {e}") from e

    async def close(self) -> None:
        await self._client.aclose()


def build_store(app_config: Config) -> KeyValueStore:
    if app_config.storage_backend == "redis":
        logger.info("store_backend_selected", backend="redis", url=app_config.redis.redis_url)
        return RedisStore.from_config(app_config.redis)
    logger.info("store_backend_selected", backend="memory")
    return InMemoryStore()
