from pydantic import BaseModel, ConfigDict


class MessageRequest(BaseModel):
    """An action message; extra keys carry the action's payload."""

    model_config = ConfigDict(extra="allow")

    action: str | None = None
