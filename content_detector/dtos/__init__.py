"""
Data Transfer Objects (DTOs) package.

DTOs are simple dataclasses used to transfer data between layers.
"""

from content_detector.dtos.detection_dto import (
    AlertDTO,
    AlertType,
    Confidence,
    DetectionResultDTO,
    IndicatorName,
    IndicatorResult,
    PageElementDTO,
    RiskLevel,
    ScanOutcomeDTO,
    ScanResultDTO,
    ScoreVector,
    TextSample,
)

__all__ = [
    "AlertDTO",
    "AlertType",
    "Confidence",
    "DetectionResultDTO",
    "IndicatorName",
    "IndicatorResult",
    "PageElementDTO",
    "RiskLevel",
    "ScanOutcomeDTO",
    "ScanResultDTO",
    "ScoreVector",
    "TextSample",
]
