from datetime import datetime, timezone

import pytest

from content_detector.dtos.detection_dto import (
    AlertType,
    Confidence,
    RiskLevel,
    ScanResultDTO,
)
from content_detector.services.risk import classify_risk, derive_detection, generate_alerts


@pytest.mark.parametrize(
    "percent,level",
    [
        (0, RiskLevel.LOW),
        (39, RiskLevel.LOW),
        (40, RiskLevel.MEDIUM),
        (69, RiskLevel.MEDIUM),
        (70, RiskLevel.HIGH),
        (100, RiskLevel.HIGH),
    ],
)
def test_risk_levels(percent, level):
    assert classify_risk(percent) == (level, percent)


@pytest.mark.parametrize(
    "percent,alert_type",
    [
        (0, AlertType.SUCCESS),
        (40, AlertType.SUCCESS),
        (41, AlertType.WARNING),
        (70, AlertType.WARNING),
        (71, AlertType.DANGER),
        (100, AlertType.DANGER),
    ],
)
def test_alert_boundaries(percent, alert_type):
    alerts = generate_alerts(percent)
    assert len(alerts) == 1
    assert alerts[0].type == alert_type


def test_exactly_seventy_is_high_risk_with_moderate_alert():
    assert classify_risk(70)[0] == RiskLevel.HIGH
    assert generate_alerts(70)[0].title == "Moderate AI Content Detected"


def test_alert_texts():
    danger, = generate_alerts(85)
    assert danger.title == "High AI Content Detected"
    assert danger.message == "85% of the content appears to be AI-generated"

    warning, = generate_alerts(55)
    assert warning.message == "55% of the content may be AI-generated"

    success, = generate_alerts(10)
    assert success.title == "Low AI Content"
    assert success.message == "Content appears to be primarily human-written"


def test_derive_detection_keeps_scan_fields():
    scan = ScanResultDTO(
        ai_content_percent=45,
        human_content_percent=55,
        confidence=Confidence.HIGH,
        words_analyzed=320,
    )
    when = datetime(2024, 1, 1, tzinfo=timezone.utc)
    detection = derive_detection(scan, last_scan=when)
    assert detection.risk_level == RiskLevel.MEDIUM
    assert detection.risk_score == 45
    assert detection.human_content_percent == 55
    assert detection.words_analyzed == 320
    assert detection.last_scan == when
