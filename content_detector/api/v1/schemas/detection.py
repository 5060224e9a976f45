from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from content_detector.dtos.detection_dto import Confidence, PageElementDTO, ScanResultDTO
from content_detector.storage.models import AlertRecord, DetectionRecord


class CamelSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageElement(CamelSchema):
    text: str
    display: str = "block"
    visibility: str = "visible"
    opacity: str = "1"
    width: float = Field(default=1.0, ge=0)
    height: float = Field(default=1.0, ge=0)

    def to_dto(self) -> PageElementDTO:
        return PageElementDTO(**self.model_dump())


class AnalyzeRequest(CamelSchema):
    """Either raw text or the document's text-bearing elements."""

    text: str | None = None
    elements: list[PageElement] | None = None

    @model_validator(mode="after")
    def check_document(self) -> "AnalyzeRequest":
        if self.text is None and self.elements is None:
            raise ValueError("Either text or elements must be provided")
        return self

    def element_dtos(self) -> list[PageElementDTO] | None:
        if self.elements is None:
            return None
        return [e.to_dto() for e in self.elements]


class ScanResponse(CamelSchema):
    ai_content_percent: int
    human_content_percent: int
    confidence: Confidence
    words_analyzed: int

    @classmethod
    def from_dto(cls, dto: ScanResultDTO) -> "ScanResponse":
        return cls(
            ai_content_percent=dto.ai_content_percent,
            human_content_percent=dto.human_content_percent,
            confidence=dto.confidence,
            words_analyzed=dto.words_analyzed,
        )


class ScanOutcomeResponse(CamelSchema):
    detection_data: DetectionRecord
    security_alerts: list[AlertRecord]
