import pytest

from content_detector.core.exceptions import ExtractionError, StorageError
from content_detector.dtos.detection_dto import (
    AlertType,
    Confidence,
    PageElementDTO,
    RiskLevel,
    ScanResultDTO,
)
from content_detector.services.detection_service import DetectionService
from content_detector.storage.defaults import SECURITY_ALERTS_KEY, default_detection
from content_detector.storage.models import SettingsRecord
from content_detector.storage.repository import DetectionRepository
from content_detector.storage.store import InMemoryStore


def make_scan(ai_percent: int) -> ScanResultDTO:
    return ScanResultDTO(
        ai_content_percent=ai_percent,
        human_content_percent=100 - ai_percent,
        confidence=Confidence.HIGH,
        words_analyzed=250,
    )


@pytest.mark.asyncio
async def test_analyze_page_requires_a_document(detection_service):
    with pytest.raises(ExtractionError):
        await detection_service.analyze_page()


@pytest.mark.asyncio
async def test_analyze_page_reads_visible_elements_only(detection_service):
    elements = [
        PageElementDTO(text="This sentence is visible on the rendered page."),
        PageElementDTO(text="This sentence is hidden from every reader.", display="none"),
    ]
    result = await detection_service.analyze_page(elements=elements)
    assert result.words_analyzed == 8
    assert result.confidence == Confidence.LOW


@pytest.mark.asyncio
async def test_analyze_page_with_empty_text(detection_service):
    result = await detection_service.analyze_page(text="")
    assert result.confidence == Confidence.NOT_AVAILABLE
    assert result.human_content_percent == 100


@pytest.mark.asyncio
async def test_record_high_risk_scan(detection_service, repository, notifier, clock):
    outcome = await detection_service.record_scan(make_scan(75))

    assert outcome.detection.risk_level == RiskLevel.HIGH
    assert outcome.detection.risk_score == 75
    assert outcome.detection.last_scan == clock.now()
    assert [a.type for a in outcome.alerts] == [AlertType.DANGER]

    dashboard = await repository.get_dashboard()
    assert dashboard.detection_data.ai_content_percent == 75
    assert dashboard.detection_data.last_scan == clock.now()
    assert dashboard.security_alerts[0].title == "High AI Content Detected"
    assert notifier.sent == [
        ("High AI Content Detected", "75% of the content appears to be AI-generated", "warning")
    ]


@pytest.mark.asyncio
async def test_seventy_percent_notifies_with_moderate_alert(detection_service, notifier):
    outcome = await detection_service.record_scan(make_scan(70))
    assert outcome.detection.risk_level == RiskLevel.HIGH
    assert outcome.alerts[0].type == AlertType.WARNING
    assert len(notifier.sent) == 1


@pytest.mark.asyncio
async def test_no_notification_below_high_risk(detection_service, notifier):
    await detection_service.record_scan(make_scan(55))
    assert notifier.sent == []


@pytest.mark.asyncio
async def test_no_notification_when_disabled(detection_service, repository, notifier):
    await repository.update_settings(SettingsRecord(notifications_enabled=False))
    await detection_service.record_scan(make_scan(90))
    assert notifier.sent == []


@pytest.mark.asyncio
async def test_scans_accumulate_alerts_newest_first(detection_service, repository):
    await detection_service.record_scan(make_scan(10))
    await detection_service.record_scan(make_scan(50))
    alerts = await repository.get_security_alerts()
    assert [a.type for a in alerts] == [AlertType.WARNING, AlertType.SUCCESS]


@pytest.mark.asyncio
async def test_export_bundles_dashboard(detection_service, clock):
    await detection_service.record_scan(make_scan(20))
    export = await detection_service.export()
    assert export.export_date == clock.now()
    assert export.detection_data.ai_content_percent == 20
    assert len(export.security_alerts) == 1


@pytest.mark.asyncio
async def test_verification_record_is_persisted(verification_service, repository, clock):
    record = await verification_service.verify()
    assert record.status == "Verified"
    assert record.hash.startswith("0x")
    assert record.hash.endswith("...")
    assert len(record.hash) == 23
    assert record.timestamp == clock.now().isoformat()
    assert (await repository.get_dashboard()).blockchain_data == record


class AlertWriteFailingStore(InMemoryStore):
    async def set_many(self, items):
        if SECURITY_ALERTS_KEY in items:
            raise StorageError("alert write failed")
        await super().set_many(items)


@pytest.mark.asyncio
async def test_failed_alert_write_leaves_detection_untouched(notifier, clock):
    repository = DetectionRepository(AlertWriteFailingStore())
    service = DetectionService(repository, notifier, clock)

    with pytest.raises(StorageError):
        await service.record_scan(make_scan(90))

    dashboard = await repository.get_dashboard()
    assert dashboard.detection_data == default_detection()
    assert notifier.sent == []
