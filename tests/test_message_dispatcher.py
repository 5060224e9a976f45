import pytest

from content_detector.core.exceptions import StorageError
from content_detector.services.detection_service import DetectionService
from content_detector.services.message_dispatcher import MessageDispatcher
from content_detector.storage.repository import DetectionRepository


class FailingStore:
    async def get_many(self, keys):
        raise StorageError("store unavailable")

    async def set_many(self, items):
        raise StorageError("store unavailable")

    async def clear(self):
        raise StorageError("store unavailable")

    async def close(self):
        return None


@pytest.mark.asyncio
async def test_unknown_action(dispatcher):
    assert await dispatcher.dispatch({"action": "launchRocket"}) == {
        "success": False,
        "error": "Unknown action",
    }
    assert (await dispatcher.dispatch({}))["error"] == "Unknown action"


@pytest.mark.asyncio
async def test_analyze_page_returns_scan_fields_only(dispatcher):
    response = await dispatcher.dispatch({"action": "analyzePage", "text": ""})
    assert response == {
        "success": True,
        "data": {
            "aiContentPercent": 0,
            "humanContentPercent": 100,
            "confidence": "N/A",
            "wordsAnalyzed": 0,
        },
    }


@pytest.mark.asyncio
async def test_analyze_page_with_elements(dispatcher):
    response = await dispatcher.dispatch(
        {
            "action": "analyzePage",
            "elements": [{"text": "A visible paragraph with enough words in it."}],
        }
    )
    assert response["success"] is True
    assert response["data"]["wordsAnalyzed"] == 8


@pytest.mark.asyncio
async def test_analyze_page_without_document(dispatcher):
    response = await dispatcher.dispatch({"action": "analyzePage"})
    assert response == {"success": False, "error": "No document content supplied"}


@pytest.mark.asyncio
async def test_record_scan_then_get_detection_data(dispatcher):
    recorded = await dispatcher.dispatch(
        {
            "action": "recordScan",
            "data": {
                "aiContentPercent": 45,
                "humanContentPercent": 55,
                "confidence": "Medium",
                "wordsAnalyzed": 150,
            },
        }
    )
    assert recorded["data"]["detectionData"]["riskLevel"] == "medium"
    assert recorded["data"]["securityAlerts"][0]["type"] == "warning"

    response = await dispatcher.dispatch({"action": "getDetectionData"})
    data = response["data"]
    assert data["detectionData"]["riskScore"] == 45
    assert data["securityAlerts"][0]["title"] == "Moderate AI Content Detected"
    assert data["blockchainData"]["status"] == "Not Verified"


@pytest.mark.asyncio
async def test_settings_round_trip(dispatcher):
    settings = {
        "detectionSensitivity": "high",
        "notificationsEnabled": False,
        "autoScan": True,
        "theme": "dark",
    }
    assert await dispatcher.dispatch({"action": "updateSettings", "settings": settings}) == {
        "success": True
    }
    assert await dispatcher.dispatch({"action": "getSettings"}) == {
        "success": True,
        "settings": settings,
    }


@pytest.mark.asyncio
async def test_update_detection_data_notifies_on_high_risk(dispatcher, notifier):
    data = {
        "aiContentPercent": 80,
        "humanContentPercent": 20,
        "confidence": "High",
        "wordsAnalyzed": 300,
        "riskLevel": "high",
        "riskScore": 80,
        "lastScan": None,
    }
    assert await dispatcher.dispatch({"action": "updateDetectionData", "data": data}) == {
        "success": True
    }
    assert notifier.sent[0][0] == "High AI Content Detected"
    assert "80%" in notifier.sent[0][1]


@pytest.mark.asyncio
async def test_invalid_payload_is_answered(dispatcher):
    response = await dispatcher.dispatch({"action": "addSecurityAlert", "alert": {"type": "bogus"}})
    assert response == {"success": False, "error": "Invalid request data"}


@pytest.mark.asyncio
async def test_add_alert_and_clear(dispatcher, repository):
    alert = {"type": "info", "title": "Manual", "message": "Added by hand"}
    assert (await dispatcher.dispatch({"action": "addSecurityAlert", "alert": alert}))["success"]
    assert len(await repository.get_security_alerts()) == 1

    assert await dispatcher.dispatch({"action": "clearData"}) == {"success": True}
    assert await repository.get_security_alerts() == []


@pytest.mark.asyncio
async def test_verify_and_export(dispatcher):
    verified = await dispatcher.dispatch({"action": "verifyContent"})
    assert verified["data"]["status"] == "Verified"

    exported = await dispatcher.dispatch({"action": "exportLogs"})
    assert exported["data"]["blockchainData"] == verified["data"]
    assert "exportDate" in exported["data"]


@pytest.mark.asyncio
async def test_storage_failure_is_reported(verification_service, notifier, clock):
    failing = DetectionRepository(FailingStore())

    dispatcher = MessageDispatcher(
        DetectionService(failing, notifier, clock),
        verification_service,
        failing,
    )
    assert await dispatcher.dispatch({"action": "getSettings"}) == {
        "success": False,
        "error": "store unavailable",
    }
    assert (await dispatcher.dispatch({"action": "clearData"}))["success"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize("data", [[1, 2], "abc", 5])
async def test_record_scan_rejects_non_object_data(dispatcher, repository, data):
    assert await dispatcher.dispatch({"action": "recordScan", "data": data}) == {
        "success": False,
        "error": "Invalid request data",
    }
    assert await repository.get_security_alerts() == []
