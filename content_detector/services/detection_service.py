"""Scan orchestration: analysis, risk derivation, persistence and notification."""
import asyncio
from collections.abc import Sequence

from content_detector.core.clock import Clock
from content_detector.core.exceptions import ExtractionError
from content_detector.core.logging import get_logger
from content_detector.dtos.detection_dto import (
    PageElementDTO,
    RiskLevel,
    ScanOutcomeDTO,
    ScanResultDTO,
)
from content_detector.services.notifier import Notifier
from content_detector.services.risk import (
    HIGH_AI_CONTENT_TITLE,
    derive_detection,
    generate_alerts,
)
from content_detector.services.scoring import analyze_text
from content_detector.services.text_extractor import extract_text
from content_detector.storage.models import AlertRecord, DetectionRecord, ExportRecord
from content_detector.storage.repository import DetectionRepository

logger = get_logger(__name__)


class DetectionService:
    def __init__(self, repository: DetectionRepository, notifier: Notifier, clock: Clock) -> None:
        self._repository = repository
        self._notifier = notifier
        self._clock = clock

    async def analyze_page(
        self,
        text: str | None = None,
        elements: Sequence[PageElementDTO] | None = None,
    ) -> ScanResultDTO:
        """First stage: extract and score, without risk or alerts."""
        if text is None and elements is None:
            raise ExtractionError("No document content supplied")
        if text is None:
            text = extract_text(elements)

        # Scoring is CPU-bound; keep it off the event loop
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, analyze_text, text)
        logger.info(
            "page_analyzed",
            words_analyzed=result.words_analyzed,
            ai_content_percent=result.ai_content_percent,
            confidence=result.confidence.value,
        )
        return result

    async def record_scan(self, scan: ScanResultDTO) -> ScanOutcomeDTO:
        """Second stage: derive risk and alerts from a scan and persist them."""
        detection = derive_detection(scan, last_scan=self._clock.now())
        alerts = generate_alerts(scan.ai_content_percent)

        # Alerts first: a failed alert write must leave the stored detection untouched
        await self._repository.add_security_alerts([AlertRecord.from_dto(a) for a in alerts])
        await self.update_detection(DetectionRecord.from_dto(detection))
        logger.info(
            "scan_recorded",
            risk_level=detection.risk_level.value,
            risk_score=detection.risk_score,
            alerts=[a.type.value for a in alerts],
        )
        return ScanOutcomeDTO(detection=detection, alerts=alerts)

    async def scan(
        self,
        text: str | None = None,
        elements: Sequence[PageElementDTO] | None = None,
    ) -> ScanOutcomeDTO:
        scan = await self.analyze_page(text=text, elements=elements)
        return await self.record_scan(scan)

    async def update_detection(self, record: DetectionRecord) -> None:
        await self._repository.update_detection(record)
        await self._notify_if_high_risk(record)

    async def _notify_if_high_risk(self, record: DetectionRecord) -> None:
        if record.risk_level is not RiskLevel.HIGH:
            return
        settings = await self._repository.get_settings()
        if not settings.notifications_enabled:
            return
        await self._notifier.notify(
            HIGH_AI_CONTENT_TITLE,
            f"{record.ai_content_percent}% of the content appears to be AI-generated",
            level="warning",
        )

    async def export(self) -> ExportRecord:
        dashboard = await self._repository.get_dashboard()
        return ExportRecord(export_date=self._clock.now(), **dict(dashboard))
