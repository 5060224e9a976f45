"""
Heuristic indicators of machine-generated prose.

Each indicator reads one TextSample and returns a fixed contribution when its
trigger condition holds, zero otherwise. Contributions are never scaled or
clamped afterwards, so an indicator's maximum is the constant it returns.
"""
import re
from collections.abc import Callable

from content_detector.dtos.detection_dto import (
    IndicatorName,
    IndicatorResult,
    ScoreVector,
    TextSample,
)
from content_detector.utils.statistics import mean, population_variance

SENTENCE_UNIFORMITY_WEIGHT = 0.15
AI_PHRASE_STEP = 0.05
AI_PHRASE_MAX = 0.2
FORMALITY_WEIGHT = 0.1
VOCABULARY_DIVERSITY_WEIGHT = 0.15
PARAGRAPH_UNIFORMITY_WEIGHT = 0.1

AI_PHRASES = (
    "it is important to note",
    "it is worth mentioning",
    "in conclusion",
    "to summarize",
    "overall",
    "furthermore",
    "moreover",
    "additionally",
    "in addition to",
    "as a result",
    "consequently",
)

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT = re.compile(r"\n\n+")
# ASCII \w, so accented letters never form a contraction
_CONTRACTION = re.compile(r"\b\w+'\w+\b", re.ASCII)

_MIN_SENTENCE_LENGTH = 10
_MIN_SENTENCES = 4
_SENTENCE_VARIANCE_LIMIT = 20

_MIN_PARAGRAPH_LENGTH = 50
_MIN_PARAGRAPHS = 3
_PARAGRAPH_RELATIVE_VARIANCE_LIMIT = 0.3

_CONTRACTION_RATIO_LIMIT = 0.01
_FORMALITY_MIN_WORDS = 100

_DIVERSITY_LOWER = 0.6
_DIVERSITY_UPPER = 0.8


def split_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT.split(text) if len(s.strip()) > _MIN_SENTENCE_LENGTH]


def split_paragraphs(text: str) -> list[str]:
    return [p for p in _PARAGRAPH_SPLIT.split(text) if len(p.strip()) > _MIN_PARAGRAPH_LENGTH]


def sentence_uniformity(sample: TextSample) -> IndicatorResult:
    """Uniform sentence lengths are typical of generated text."""
    sentences = split_sentences(sample.normalized_text)
    contribution = 0.0
    if len(sentences) >= _MIN_SENTENCES:
        variance = population_variance([len(s.split()) for s in sentences])
        if variance < _SENTENCE_VARIANCE_LIMIT:
            contribution = SENTENCE_UNIFORMITY_WEIGHT
    return IndicatorResult(IndicatorName.SENTENCE_UNIFORMITY, contribution)


def matched_ai_phrases(text: str) -> list[str]:
    lowered = text.lower()
    return [phrase for phrase in AI_PHRASES if phrase in lowered]


def ai_phrases(sample: TextSample) -> IndicatorResult:
    """Counts distinct stock transition phrases; repeats of one phrase count once."""
    matched = len(matched_ai_phrases(sample.normalized_text))
    contribution = 0.0
    if matched > 2:
        contribution = min(matched * AI_PHRASE_STEP, AI_PHRASE_MAX)
    return IndicatorResult(IndicatorName.AI_PHRASES, contribution)


def formality(sample: TextSample) -> IndicatorResult:
    """Long text with almost no contractions reads as formal, generated prose."""
    word_count = len(sample.words)
    contribution = 0.0
    if word_count > _FORMALITY_MIN_WORDS:
        contractions = _CONTRACTION.findall(sample.normalized_text)
        if len(contractions) / word_count < _CONTRACTION_RATIO_LIMIT:
            contribution = FORMALITY_WEIGHT
    return IndicatorResult(IndicatorName.FORMALITY, contribution)


def vocabulary_diversity(sample: TextSample) -> IndicatorResult:
    contribution = 0.0
    if sample.words:
        distinct = {word.lower() for word in sample.words}
        ratio = len(distinct) / len(sample.words)
        if _DIVERSITY_LOWER < ratio < _DIVERSITY_UPPER:
            contribution = VOCABULARY_DIVERSITY_WEIGHT
    return IndicatorResult(IndicatorName.VOCABULARY_DIVERSITY, contribution)


def paragraph_uniformity(sample: TextSample) -> IndicatorResult:
    paragraphs = split_paragraphs(sample.normalized_text)
    contribution = 0.0
    if len(paragraphs) >= _MIN_PARAGRAPHS:
        lengths = [len(p) for p in paragraphs]
        relative_variance = population_variance(lengths) / mean(lengths)
        if relative_variance < _PARAGRAPH_RELATIVE_VARIANCE_LIMIT:
            contribution = PARAGRAPH_UNIFORMITY_WEIGHT
    return IndicatorResult(IndicatorName.PARAGRAPH_UNIFORMITY, contribution)


INDICATORS: tuple[Callable[[TextSample], IndicatorResult], ...] = (
    sentence_uniformity,
    ai_phrases,
    formality,
    vocabulary_diversity,
    paragraph_uniformity,
)


def compute_indicators(sample: TextSample) -> ScoreVector:
    return tuple(indicator(sample) for indicator in INDICATORS)
