"""Persisted records, serialized with the camelCase keys the store holds."""
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from content_detector.dtos.detection_dto import (
    AlertDTO,
    AlertType,
    Confidence,
    DetectionResultDTO,
    RiskLevel,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DetectionRecord(CamelModel):
    ai_content_percent: int = Field(ge=0, le=100)
    human_content_percent: int = Field(ge=0, le=100)
    confidence: Confidence
    words_analyzed: int = Field(ge=0)
    risk_level: RiskLevel
    risk_score: int = Field(ge=0, le=100)
    last_scan: datetime | None = None

    @model_validator(mode="after")
    def check_percentages(self) -> "DetectionRecord":
        if self.ai_content_percent + self.human_content_percent != 100:
            raise ValueError("aiContentPercent and humanContentPercent must sum to 100")
        return self

    @classmethod
    def from_dto(cls, dto: DetectionResultDTO) -> "DetectionRecord":
        return cls(
            ai_content_percent=dto.ai_content_percent,
            human_content_percent=dto.human_content_percent,
            confidence=dto.confidence,
            words_analyzed=dto.words_analyzed,
            risk_level=dto.risk_level,
            risk_score=dto.risk_score,
            last_scan=dto.last_scan,
        )


class AlertRecord(CamelModel):
    type: AlertType
    title: str
    message: str

    @classmethod
    def from_dto(cls, dto: AlertDTO) -> "AlertRecord":
        return cls(type=dto.type, title=dto.title, message=dto.message)


class BlockchainRecord(CamelModel):
    status: str
    hash: str
    timestamp: str


class SettingsRecord(CamelModel):
    detection_sensitivity: Literal["low", "medium", "high"] = "medium"
    notifications_enabled: bool = True
    auto_scan: bool = False
    theme: Literal["light", "dark"] = "light"


class DashboardRecord(CamelModel):
    detection_data: DetectionRecord
    security_alerts: list[AlertRecord]
    blockchain_data: BlockchainRecord


class ExportRecord(DashboardRecord):
    export_date: datetime
