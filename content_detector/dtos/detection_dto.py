from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class IndicatorName(str, Enum):
    SENTENCE_UNIFORMITY = "sentence_uniformity"
    AI_PHRASES = "ai_phrases"
    FORMALITY = "formality"
    VOCABULARY_DIVERSITY = "vocabulary_diversity"
    PARAGRAPH_UNIFORMITY = "paragraph_uniformity"


class Confidence(str, Enum):
    NOT_AVAILABLE = "N/A"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AlertType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"
    SUCCESS = "success"


@dataclass(frozen=True)
class PageElementDTO:
    """A text-bearing element as rendered by the document host."""
    text: str
    display: str = "block"
    visibility: str = "visible"
    opacity: str = "1"
    width: float = 1.0
    height: float = 1.0


@dataclass(frozen=True)
class TextSample:
    normalized_text: str
    words: tuple[str, ...]


@dataclass(frozen=True)
class IndicatorResult:
    name: IndicatorName
    contribution: float


# One IndicatorResult per indicator, in evaluation order
ScoreVector = tuple[IndicatorResult, ...]


@dataclass(frozen=True)
class ScanResultDTO:
    """What the analysis stage hands back: no risk, no alerts."""
    ai_content_percent: int
    human_content_percent: int
    confidence: Confidence
    words_analyzed: int


@dataclass(frozen=True)
class DetectionResultDTO:
    ai_content_percent: int
    human_content_percent: int
    confidence: Confidence
    words_analyzed: int
    risk_level: RiskLevel
    risk_score: int
    last_scan: datetime | None = None


@dataclass(frozen=True)
class AlertDTO:
    type: AlertType
    title: str
    message: str


@dataclass(frozen=True)
class ScanOutcomeDTO:
    detection: DetectionResultDTO
    alerts: list[AlertDTO] = field(default_factory=list)
