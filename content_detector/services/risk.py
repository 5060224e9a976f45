"""Risk classification and alerts derived from a finished scan."""
from datetime import datetime

from content_detector.dtos.detection_dto import (
    AlertDTO,
    AlertType,
    DetectionResultDTO,
    RiskLevel,
    ScanResultDTO,
)
from content_detector.utils.statistics import round_half_up

HIGH_RISK_PERCENT = 70
MEDIUM_RISK_PERCENT = 40

# Alert cut-offs are exclusive while the risk cut-offs above are inclusive,
# so exactly 70% yields a high risk level with a moderate alert.
DANGER_ALERT_PERCENT = 70
WARNING_ALERT_PERCENT = 40

HIGH_AI_CONTENT_TITLE = "High AI Content Detected"


def classify_risk(ai_percent: int) -> tuple[RiskLevel, int]:
    if ai_percent >= HIGH_RISK_PERCENT:
        level = RiskLevel.HIGH
    elif ai_percent >= MEDIUM_RISK_PERCENT:
        level = RiskLevel.MEDIUM
    else:
        level = RiskLevel.LOW
    return level, min(round_half_up(ai_percent), 100)


def generate_alerts(ai_percent: int) -> list[AlertDTO]:
    if ai_percent > DANGER_ALERT_PERCENT:
        alert = AlertDTO(
            type=AlertType.DANGER,
            title=HIGH_AI_CONTENT_TITLE,
            message=f"{ai_percent}% of the content appears to be AI-generated",
        )
    elif ai_percent > WARNING_ALERT_PERCENT:
        alert = AlertDTO(
            type=AlertType.WARNING,
            title="Moderate AI Content Detected",
            message=f"{ai_percent}% of the content may be AI-generated",
        )
    else:
        alert = AlertDTO(
            type=AlertType.SUCCESS,
            title="Low AI Content",
            message="Content appears to be primarily human-written",
        )
    return [alert]


def derive_detection(scan: ScanResultDTO, last_scan: datetime | None = None) -> DetectionResultDTO:
    risk_level, risk_score = classify_risk(scan.ai_content_percent)
    return DetectionResultDTO(
        ai_content_percent=scan.ai_content_percent,
        human_content_percent=100 - scan.ai_content_percent,
        confidence=scan.confidence,
        words_analyzed=scan.words_analyzed,
        risk_level=risk_level,
        risk_score=risk_score,
        last_scan=last_scan,
    )
