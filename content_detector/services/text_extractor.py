"""Turns document elements into the normalized string the indicators read."""
from collections.abc import Iterable

from content_detector.dtos.detection_dto import PageElementDTO, TextSample

_MIN_ELEMENT_LENGTH = 20


def is_element_visible(element: PageElementDTO) -> bool:
    return (
        element.display != "none"
        and element.visibility != "hidden"
        and element.opacity != "0"
        and element.width > 0
        and element.height > 0
    )


def extract_text(elements: Iterable[PageElementDTO]) -> str:
    """Join the trimmed text of visible elements longer than 20 characters.

    Hidden elements and short fragments (labels, buttons, bylines) are
    dropped. Returns an empty string when nothing qualifies.
    """
    parts = []
    for element in elements:
        if not is_element_visible(element):
            continue
        text = element.text.strip()
        if len(text) > _MIN_ELEMENT_LENGTH:
            parts.append(text)
    return " ".join(parts).strip()


def build_sample(text: str) -> TextSample:
    return TextSample(normalized_text=text, words=tuple(text.split()))
