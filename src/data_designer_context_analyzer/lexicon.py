"""Reference word lists and tuning thresholds for the context analyzer.

Both are frozen dataclasses built once and shared read-only; swap in a
custom ``Lexicon`` or ``Thresholds`` when constructing a ``ContextAnalyzer``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

# ---------------------------------------------------------------------------
# Word lists
# ---------------------------------------------------------------------------

_FORMAL_INDICATORS = (
    "therefore", "furthermore", "consequently", "nevertheless", "moreover",
    "however", "thus", "accordingly",
)
_CASUAL_INDICATORS = (
    "that's", "it's", "don't", "can't", "won't", "you're", "we're", "they're",
    "yeah", "okay", "cool",
)
_ACADEMIC_INDICATORS = (
    "research", "study", "analysis", "methodology", "hypothesis", "findings",
    "conclusion", "literature", "evidence",
)
_TECHNICAL_INDICATORS = (
    "implementation", "configuration", "architecture", "algorithm", "framework",
    "protocol", "optimization", "deployment",
)
_VOCABULARY_COMPLEXITY = {
    "simple": frozenset({
        "good", "bad", "big", "small", "nice", "easy", "hard", "fast", "slow",
    }),
    "moderate": frozenset({
        "excellent", "problematic", "substantial", "minimal", "pleasant",
        "straightforward", "challenging", "rapid", "gradual",
    }),
    "complex": frozenset({
        "exemplary", "multifaceted", "comprehensive", "infinitesimal", "serendipitous",
        "paradigmatic", "intricate", "expeditious", "methodical",
    }),
}
# Declaration order breaks ties between purposes.
_PURPOSE_KEYWORDS = {
    "email": ("dear", "sincerely", "regards", "thank you", "follow up", "meeting", "schedule"),
    "essay": ("introduction", "conclusion", "argument", "thesis", "evidence", "paragraph"),
    "report": ("summary", "findings", "recommendations", "data", "results", "analysis"),
    "social": ("awesome", "amazing", "check out", "follow", "like", "share", "tag"),
    "creative": ("story", "character", "scene", "imagine", "once upon", "narrative"),
}


def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Lexicon:
    """Indicator phrases and vocabulary tiers the detectors score against."""

    formal_indicators: tuple[str, ...] = _FORMAL_INDICATORS
    casual_indicators: tuple[str, ...] = _CASUAL_INDICATORS
    academic_indicators: tuple[str, ...] = _ACADEMIC_INDICATORS
    technical_indicators: tuple[str, ...] = _TECHNICAL_INDICATORS
    vocabulary_complexity: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: _frozen(_VOCABULARY_COMPLEXITY), hash=False
    )
    purpose_keywords: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: _frozen(_PURPOSE_KEYWORDS), hash=False
    )

    def tier(self, name: str) -> frozenset[str]:
        return self.vocabulary_complexity.get(name, frozenset())


@dataclass(frozen=True)
class Thresholds:
    """Cut-offs used by the detectors, the suggestion generator and style mapping."""

    # Audience
    academic_score_above: int = 2
    technical_score_above: int = 2
    casual_score_above: int = 2

    # Tone
    exclamations_above: int = 2

    # Complexity
    complex_words_above: int = 2
    complex_avg_words_above: float = 25
    moderate_avg_words_above: float = 15
    long_sentence_words_above: int = 20

    # Length
    longer_below_words: int = 50
    shorter_above_words: int = 300

    # Confidence, as (exclusive upper word count, confidence) tiers
    confidence_tiers: tuple[tuple[int, float], ...] = ((10, 0.3), (50, 0.6), (100, 0.8))
    confidence_max: float = 0.9

    # Suggestions
    detail_below_words: int = 20
    casual_suggestion_above: int = 3
    concise_avg_words_above: float = 30

    # Style recommendations
    academic_mode_confidence: float = 0.8
    formal_mode_confidence: float = 0.7
    casual_mode_confidence: float = 0.6
    technical_mode_confidence: float = 0.8
    technical_mode_score_above: int = 2


DEFAULT_LEXICON = Lexicon()
DEFAULT_THRESHOLDS = Thresholds()


def phrase_score(text: str, phrases: Iterable[str]) -> int:
    """Count how often the phrases occur in ``text``.

    Matching is plain substring search, so an entry inside a longer word
    (``"like"`` in ``"likely"``) still counts.
    """
    return sum(text.count(phrase) for phrase in phrases)
