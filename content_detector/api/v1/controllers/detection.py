from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from content_detector.api.v1.schemas.detection import (
    AnalyzeRequest,
    ScanOutcomeResponse,
    ScanResponse,
)
from content_detector.services.detection_service import DetectionService
from content_detector.services.verification_service import VerificationService
from content_detector.storage.models import (
    AlertRecord,
    BlockchainRecord,
    DashboardRecord,
    DetectionRecord,
    ExportRecord,
)
from content_detector.storage.repository import DetectionRepository

router = APIRouter(
    route_class=DishkaRoute,
    prefix="/api/v1/detection",
    tags=["Detection"],
)


@router.post("/analyze", response_model=ScanResponse)
async def analyze_page(
    request: AnalyzeRequest,
    service: FromDishka[DetectionService],
) -> ScanResponse:
    """Score a document without deriving risk or storing anything."""
    result = await service.analyze_page(text=request.text, elements=request.element_dtos())
    return ScanResponse.from_dto(result)


@router.post("/scan", response_model=ScanOutcomeResponse)
async def scan_page(
    request: AnalyzeRequest,
    service: FromDishka[DetectionService],
) -> ScanOutcomeResponse:
    """Score a document, derive risk and alerts, and persist the result."""
    outcome = await service.scan(text=request.text, elements=request.element_dtos())
    return ScanOutcomeResponse(
        detection_data=DetectionRecord.from_dto(outcome.detection),
        security_alerts=[AlertRecord.from_dto(a) for a in outcome.alerts],
    )


@router.get("", response_model=DashboardRecord)
async def get_detection_data(repository: FromDishka[DetectionRepository]) -> DashboardRecord:
    return await repository.get_dashboard()


@router.put("", response_model=DetectionRecord)
async def update_detection_data(
    record: DetectionRecord,
    service: FromDishka[DetectionService],
) -> DetectionRecord:
    await service.update_detection(record)
    return record


@router.delete("", status_code=200)
async def clear_data(repository: FromDishka[DetectionRepository]) -> dict:
    await repository.clear()
    return {"cleared": True}


@router.post("/alerts", response_model=list[AlertRecord])
async def add_security_alert(
    alert: AlertRecord,
    repository: FromDishka[DetectionRepository],
) -> list[AlertRecord]:
    return await repository.add_security_alert(alert)


@router.post("/verify", response_model=BlockchainRecord)
async def verify_content(service: FromDishka[VerificationService]) -> BlockchainRecord:
    return await service.verify()


@router.get("/export", response_model=ExportRecord)
async def export_logs(service: FromDishka[DetectionService]) -> ExportRecord:
    return await service.export()
