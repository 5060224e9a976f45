"""
Action-based request/response boundary.

Every request is a mapping with an ``action`` key; every response is a
mapping with ``success`` and, depending on the action, ``data``,
``settings`` or ``error``. Failures are answered, never raised.
"""
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from content_detector.core.exceptions import DetectorError, UnknownActionError
from content_detector.core.logging import get_logger
from content_detector.dtos.detection_dto import PageElementDTO, ScanResultDTO
from content_detector.services.detection_service import DetectionService
from content_detector.services.verification_service import VerificationService
from content_detector.storage.models import AlertRecord, DetectionRecord, SettingsRecord
from content_detector.storage.repository import DetectionRepository

logger = get_logger(__name__)

INVALID_REQUEST_MSG = "Invalid request data"

Handler = Callable[[Mapping[str, Any]], Awaitable[dict[str, Any]]]

_elements_adapter = TypeAdapter(list[PageElementDTO])
_text_adapter = TypeAdapter(str | None)
_payload_adapter = TypeAdapter(dict[str, Any])


def scan_payload(scan: ScanResultDTO) -> dict[str, Any]:
    return {
        "aiContentPercent": scan.ai_content_percent,
        "humanContentPercent": scan.human_content_percent,
        "confidence": scan.confidence.value,
        "wordsAnalyzed": scan.words_analyzed,
    }


def parse_scan_payload(payload: Mapping[str, Any]) -> ScanResultDTO:
    return TypeAdapter(ScanResultDTO).validate_python(
        {
            "ai_content_percent": payload.get("aiContentPercent", 0),
            "human_content_percent": payload.get("humanContentPercent", 100),
            "confidence": payload.get("confidence", "N/A"),
            "words_analyzed": payload.get("wordsAnalyzed", 0),
        }
    )


def _dump(model: Any) -> Any:
    return model.model_dump(mode="json", by_alias=True)


class MessageDispatcher:
    def __init__(
        self,
        detection: DetectionService,
        verification: VerificationService,
        repository: DetectionRepository,
    ) -> None:
        self._detection = detection
        self._verification = verification
        self._repository = repository
        self._handlers: dict[str, Handler] = {
            "analyzePage": self._analyze_page,
            "recordScan": self._record_scan,
            "getDetectionData": self._get_detection_data,
            "updateDetectionData": self._update_detection_data,
            "addSecurityAlert": self._add_security_alert,
            "getSettings": self._get_settings,
            "updateSettings": self._update_settings,
            "clearData": self._clear_data,
            "verifyContent": self._verify_content,
            "exportLogs": self._export_logs,
        }

    async def dispatch(self, request: Mapping[str, Any]) -> dict[str, Any]:
        action = request.get("action")
        logger.debug("message_received", action=action)
        try:
            handler = self._handlers.get(action) if isinstance(action, str) else None
            if handler is None:
                raise UnknownActionError(action)
            return await handler(request)
        except UnknownActionError as e:
            logger.warning("unknown_action", action=e.action)
            return {"success": False, "error": e.message}
        except ValidationError as e:
            logger.warning("message_invalid", action=action, errors=e.errors())
            return {"success": False, "error": INVALID_REQUEST_MSG}
        except DetectorError as e:
            logger.error(
                "message_failed",
                action=action,
                error=e.message,
                error_type=type(e).__name__,
            )
            return {"success": False, "error": e.message}

    async def _analyze_page(self, request: Mapping[str, Any]) -> dict[str, Any]:
        elements = request.get("elements")
        scan = await self._detection.analyze_page(
            text=_text_adapter.validate_python(request.get("text")),
            elements=_elements_adapter.validate_python(elements) if elements is not None else None,
        )
        return {"success": True, "data": scan_payload(scan)}

    async def _record_scan(self, request: Mapping[str, Any]) -> dict[str, Any]:
        payload = _payload_adapter.validate_python(request.get("data") or {})
        outcome = await self._detection.record_scan(parse_scan_payload(payload))
        return {
            "success": True,
            "data": {
                "detectionData": _dump(DetectionRecord.from_dto(outcome.detection)),
                "securityAlerts": [_dump(AlertRecord.from_dto(a)) for a in outcome.alerts],
            },
        }

    async def _get_detection_data(self, request: Mapping[str, Any]) -> dict[str, Any]:
        dashboard = await self._repository.get_dashboard()
        return {"success": True, "data": _dump(dashboard)}

    async def _update_detection_data(self, request: Mapping[str, Any]) -> dict[str, Any]:
        record = DetectionRecord.model_validate(request.get("data"))
        await self._detection.update_detection(record)
        return {"success": True}

    async def _add_security_alert(self, request: Mapping[str, Any]) -> dict[str, Any]:
        await self._repository.add_security_alert(AlertRecord.model_validate(request.get("alert")))
        return {"success": True}

    async def _get_settings(self, request: Mapping[str, Any]) -> dict[str, Any]:
        settings = await self._repository.get_settings()
        return {"success": True, "settings": _dump(settings)}

    async def _update_settings(self, request: Mapping[str, Any]) -> dict[str, Any]:
        await self._repository.update_settings(SettingsRecord.model_validate(request.get("settings")))
        return {"success": True}

    async def _clear_data(self, request: Mapping[str, Any]) -> dict[str, Any]:
        await self._repository.clear()
        return {"success": True}

    async def _verify_content(self, request: Mapping[str, Any]) -> dict[str, Any]:
        record = await self._verification.verify()
        return {"success": True, "data": _dump(record)}

    async def _export_logs(self, request: Mapping[str, Any]) -> dict[str, Any]:
        export = await self._detection.export()
        return {"success": True, "data": _dump(export)}
