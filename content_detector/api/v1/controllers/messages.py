from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from content_detector.api.v1.schemas.messages import MessageRequest
from content_detector.services.message_dispatcher import MessageDispatcher

router = APIRouter(
    route_class=DishkaRoute,
    prefix="/api/v1/messages",
    tags=["Messages"],
)


@router.post("")
async def handle_message(
    message: MessageRequest,
    dispatcher: FromDishka[MessageDispatcher],
) -> dict[str, Any]:
    """Relay an action message; the reply always carries `success`."""
    return await dispatcher.dispatch(message.model_dump())
