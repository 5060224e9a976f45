"""Typed access to the persisted detection state."""
import asyncio
from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from content_detector.core.exceptions import StorageError
from content_detector.core.logging import get_logger
from content_detector.storage.defaults import (
    ALL_KEYS,
    BLOCKCHAIN_DATA_KEY,
    DETECTION_DATA_KEY,
    INITIALIZED_KEYS,
    MAX_SECURITY_ALERTS,
    SECURITY_ALERTS_KEY,
    SETTINGS_KEY,
    default_value,
)
from content_detector.storage.models import (
    AlertRecord,
    BlockchainRecord,
    DashboardRecord,
    DetectionRecord,
    SettingsRecord,
)
from content_detector.storage.store import KeyValueStore

logger = get_logger(__name__)

T = TypeVar("T")

_alert_list = TypeAdapter(list[AlertRecord])


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


class DetectionRepository:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        # serializes read-modify-write sequences on the alert list
        self._alerts_lock = asyncio.Lock()

    async def _load(self, keys: Sequence[str]) -> dict[str, Any]:
        stored = await self._store.get_many(keys)
        return {key: stored[key] if key in stored else default_value(key) for key in keys}

    def _parse(self, adapter: TypeAdapter[T], key: str, value: Any) -> T:
        try:
            return adapter.validate_python(value)
        except ValidationError as e:
            logger.error("stored_value_invalid", key=key, error=str(e))
            raise StorageError(f"Stored value for {key} is malformed") from e

    async def initialize(self) -> None:
        """Write defaults for keys that have never been stored."""
        existing = await self._store.get_many(INITIALIZED_KEYS)
        missing = {key: default_value(key) for key in INITIALIZED_KEYS if key not in existing}
        if missing:
            await self._store.set_many(missing)
            logger.info("store_initialized", keys=sorted(missing))

    async def get_dashboard(self) -> DashboardRecord:
        values = await self._load((DETECTION_DATA_KEY, SECURITY_ALERTS_KEY, BLOCKCHAIN_DATA_KEY))
        return DashboardRecord(
            detection_data=self._parse(
                TypeAdapter(DetectionRecord), DETECTION_DATA_KEY, values[DETECTION_DATA_KEY]
            ),
            security_alerts=self._parse(
                _alert_list, SECURITY_ALERTS_KEY, values[SECURITY_ALERTS_KEY]
            ),
            blockchain_data=self._parse(
                TypeAdapter(BlockchainRecord), BLOCKCHAIN_DATA_KEY, values[BLOCKCHAIN_DATA_KEY]
            ),
        )

    async def update_detection(self, record: DetectionRecord) -> None:
        await self._store.set_many({DETECTION_DATA_KEY: _dump(record)})

    async def get_security_alerts(self) -> list[AlertRecord]:
        values = await self._load((SECURITY_ALERTS_KEY,))
        return self._parse(_alert_list, SECURITY_ALERTS_KEY, values[SECURITY_ALERTS_KEY])

    async def add_security_alerts(self, alerts: Sequence[AlertRecord]) -> list[AlertRecord]:
        """Prepend alerts (last given ends up newest) and keep the 10 most recent."""
        async with self._alerts_lock:
            current = await self.get_security_alerts()
            for alert in alerts:
                current.insert(0, alert)
            del current[MAX_SECURITY_ALERTS:]
            await self._store.set_many({SECURITY_ALERTS_KEY: [_dump(a) for a in current]})
            return current

    async def add_security_alert(self, alert: AlertRecord) -> list[AlertRecord]:
        return await self.add_security_alerts([alert])

    async def get_settings(self) -> SettingsRecord:
        values = await self._load((SETTINGS_KEY,))
        return self._parse(TypeAdapter(SettingsRecord), SETTINGS_KEY, values[SETTINGS_KEY])

    async def update_settings(self, settings: SettingsRecord) -> None:
        await self._store.set_many({SETTINGS_KEY: _dump(settings)})

    async def update_blockchain(self, record: BlockchainRecord) -> None:
        await self._store.set_many({BLOCKCHAIN_DATA_KEY: _dump(record)})

    async def clear(self) -> None:
        """Drop every key, then restore first-start defaults."""
        await self._store.clear()
        await self.initialize()
        logger.info("store_cleared", keys=list(ALL_KEYS))
