"""Aggregates indicator contributions into the scan result."""
from content_detector.dtos.detection_dto import Confidence, ScanResultDTO, ScoreVector
from content_detector.services.indicators import compute_indicators
from content_detector.services.text_extractor import build_sample
from content_detector.utils.statistics import round_half_up

_LOW_CONFIDENCE_WORDS = 50
_MEDIUM_CONFIDENCE_WORDS = 200
_DECISIVE_HIGH = 0.7
_DECISIVE_LOW = 0.3


def aggregate_score(vector: ScoreVector) -> float:
    """Sum contributions in indicator order and clamp to [0, 1]."""
    total = 0.0
    for result in vector:
        total += result.contribution
    return min(max(total, 0.0), 1.0)


def to_percentages(score: float) -> tuple[int, int]:
    ai_percent = round_half_up(score * 100)
    return ai_percent, 100 - ai_percent


def estimate_confidence(word_count: int, score: float) -> Confidence:
    """More text and a decisive score give more confidence."""
    if word_count < _LOW_CONFIDENCE_WORDS:
        return Confidence.LOW
    if word_count < _MEDIUM_CONFIDENCE_WORDS:
        return Confidence.MEDIUM
    if score > _DECISIVE_HIGH or score < _DECISIVE_LOW:
        return Confidence.HIGH
    return Confidence.MEDIUM


def empty_scan() -> ScanResultDTO:
    return ScanResultDTO(
        ai_content_percent=0,
        human_content_percent=100,
        confidence=Confidence.NOT_AVAILABLE,
        words_analyzed=0,
    )


def analyze_text(text: str) -> ScanResultDTO:
    """Run the indicator pipeline over already-extracted text.

    Deterministic and side-effect free; text without words short-circuits to
    the N/A result without evaluating any indicator.
    """
    sample = build_sample(text)
    if not sample.words:
        return empty_scan()

    score = aggregate_score(compute_indicators(sample))
    ai_percent, human_percent = to_percentages(score)
    return ScanResultDTO(
        ai_content_percent=ai_percent,
        human_content_percent=human_percent,
        confidence=estimate_confidence(len(sample.words), score),
        words_analyzed=len(sample.words),
    )
