"""
Canonical default values for every persisted key.

Anything that needs a fallback for a missing key asks this module; nothing
else defines defaults of its own.
"""
from typing import Any, Callable

from content_detector.dtos.detection_dto import Confidence, RiskLevel
from content_detector.storage.models import (
    BlockchainRecord,
    DetectionRecord,
    SettingsRecord,
)

DETECTION_DATA_KEY = "detectionData"
SECURITY_ALERTS_KEY = "securityAlerts"
BLOCKCHAIN_DATA_KEY = "blockchainData"
SETTINGS_KEY = "settings"

ALL_KEYS = (DETECTION_DATA_KEY, SECURITY_ALERTS_KEY, BLOCKCHAIN_DATA_KEY, SETTINGS_KEY)

# Keys written on first start; the others fall back to defaults on read
INITIALIZED_KEYS = (DETECTION_DATA_KEY, SETTINGS_KEY)

MAX_SECURITY_ALERTS = 10


def default_detection() -> DetectionRecord:
    return DetectionRecord(
        ai_content_percent=0,
        human_content_percent=100,
        confidence=Confidence.NOT_AVAILABLE,
        words_analyzed=0,
        risk_level=RiskLevel.LOW,
        risk_score=10,
        last_scan=None,
    )


def default_blockchain() -> BlockchainRecord:
    return BlockchainRecord(status="Not Verified", hash="--", timestamp="--")


def default_settings() -> SettingsRecord:
    return SettingsRecord()


_FACTORIES: dict[str, Callable[[], Any]] = {
    DETECTION_DATA_KEY: lambda: default_detection().model_dump(mode="json", by_alias=True),
    SECURITY_ALERTS_KEY: list,
    BLOCKCHAIN_DATA_KEY: lambda: default_blockchain().model_dump(mode="json", by_alias=True),
    SETTINGS_KEY: lambda: default_settings().model_dump(mode="json", by_alias=True),
}


def default_value(key: str) -> Any:
    """Fresh JSON-compatible default for a store key."""
    return _FACTORIES[key]()
