from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from content_detector.storage.models import SettingsRecord
from content_detector.storage.repository import DetectionRepository

router = APIRouter(
    route_class=DishkaRoute,
    prefix="/api/v1/settings",
    tags=["Settings"],
)


@router.get("", response_model=SettingsRecord)
async def get_settings(repository: FromDishka[DetectionRepository]) -> SettingsRecord:
    return await repository.get_settings()


@router.put("", response_model=SettingsRecord)
async def update_settings(
    settings: SettingsRecord,
    repository: FromDishka[DetectionRepository],
) -> SettingsRecord:
    await repository.update_settings(settings)
    return settings
