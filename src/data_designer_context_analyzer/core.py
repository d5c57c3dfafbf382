# Heuristic context and style analyzer for text rewriting.
#
# Infers audience, purpose, tone, complexity and a length recommendation from
# raw text using keyword scoring and a handful of sentence statistics, then maps
# the result to suggested rewriting modes. Pure functions over immutable
# reference data: no I/O, no state between calls, never raises.

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, TypedDict

from data_designer_context_analyzer.lexicon import (
    DEFAULT_LEXICON,
    DEFAULT_THRESHOLDS,
    Lexicon,
    Thresholds,
    phrase_score,
)

# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


class ContextSettings(TypedDict):
    audience: str
    purpose: str
    tone: str
    complexity: str
    length: str


class AnalysisResult(ContextSettings):
    confidence: float
    suggestions: list[dict[str, str]]


CONTEXT_FIELDS = ("audience", "purpose", "tone", "complexity", "length")


@dataclass(frozen=True)
class Suggestion:
    type: str
    message: str
    action: str

    def to_payload(self) -> dict[str, str]:
        return {"type": self.type, "message": self.message, "action": self.action}


@dataclass(frozen=True)
class StyleRecommendation:
    mode: str
    reason: str
    confidence: float

    def to_payload(self) -> dict[str, Any]:
        return {"mode": self.mode, "reason": self.reason, "confidence": self.confidence}


ADD_DETAIL = Suggestion(
    "length",
    "Consider adding more detail for better rewriting results",
    "Add more context or examples",
)
USE_FORMAL_MODE = Suggestion(
    "tone",
    "Text appears casual - consider formal mode for professional use",
    "Switch to formal mode",
)
USE_CONCISE_MODE = Suggestion(
    "complexity",
    "Long sentences detected - consider simplifying for readability",
    "Use concise mode",
)


def default_analysis() -> AnalysisResult:
    """Result returned for empty, blank or non-string input."""
    return {
        "audience": "general",
        "purpose": "other",
        "tone": "neutral",
        "complexity": "moderate",
        "length": "same",
        "confidence": 0,
        "suggestions": [],
    }


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_CONTRACTION_RE = re.compile(r"'[a-z]")


@dataclass(frozen=True)
class TextViews:
    """The derived views every detector reads, computed once per call."""

    normalized: str
    words: list[str]
    sentences: list[str]

    @classmethod
    def from_text(cls, text: str) -> TextViews:
        normalized = text.lower().strip()
        # Punctuation stays attached to its word.
        words = _WHITESPACE_RE.split(normalized)
        sentences = [s for s in _SENTENCE_END_RE.split(text) if s.strip()]
        return cls(normalized=normalized, words=words, sentences=sentences)

    @property
    def avg_words_per_sentence(self) -> float:
        return len(self.words) / max(len(self.sentences), 1)


# ---------------------------------------------------------------------------
# Decision tables: evaluated top to bottom, first match wins
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AudienceSignals:
    academic: int
    technical: int
    formal: int
    casual: int


@dataclass(frozen=True)
class ToneSignals:
    formal: int
    casual: int
    contractions: int
    exclamations: int


@dataclass(frozen=True)
class ComplexitySignals:
    complex_words: int
    moderate_words: int
    simple_words: int
    avg_words_per_sentence: float
    long_sentences: int


_Rule = tuple[Callable[[Any, Thresholds], bool], str]

AUDIENCE_RULES: tuple[_Rule, ...] = (
    (lambda s, t: s.academic > t.academic_score_above, "academic"),
    (lambda s, t: s.technical > t.technical_score_above, "professional"),
    (lambda s, t: s.formal > s.casual, "professional"),
    (lambda s, t: s.casual > t.casual_score_above, "casual"),
)

# A formal match outranks exclamation marks.
TONE_RULES: tuple[_Rule, ...] = (
    (lambda s, t: s.formal > s.casual + s.contractions, "formal"),
    (lambda s, t: s.exclamations > t.exclamations_above, "friendly"),
    (lambda s, t: s.casual + s.contractions > s.formal, "casual"),
)

COMPLEXITY_RULES: tuple[_Rule, ...] = (
    (
        lambda s, t: (
            s.complex_words > t.complex_words_above
            or s.avg_words_per_sentence > t.complex_avg_words_above
            or s.long_sentences > 0
        ),
        "complex",
    ),
    (
        lambda s, t: s.moderate_words > s.simple_words and s.avg_words_per_sentence > t.moderate_avg_words_above,
        "moderate",
    ),
)


def first_match(rules: tuple[_Rule, ...], signals: Any, thresholds: Thresholds, default: str) -> str:
    for predicate, label in rules:
        if predicate(signals, thresholds):
            return label
    return default


# ---------------------------------------------------------------------------
# Analyzer
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ContextAnalyzer:
    """Rule-based analyzer over a fixed lexicon.

    Instances are immutable and hold no per-call state, so a single one can be
    shared across threads.
    """

    lexicon: Lexicon = field(default_factory=lambda: DEFAULT_LEXICON)
    thresholds: Thresholds = field(default_factory=lambda: DEFAULT_THRESHOLDS)

    def analyze(self, text: Any) -> AnalysisResult:
        """Infer context settings, confidence and suggestions for ``text``.

        Args:
            text: The prose to analyze. Anything that is not a non-blank string
                yields ``default_analysis()``.

        Returns:
            Dict with keys: audience, purpose, tone, complexity, length,
            confidence, suggestions.
        """
        if not isinstance(text, str) or not text.strip():
            return default_analysis()

        views = TextViews.from_text(text)
        return {
            "audience": self.detect_audience(views),
            "purpose": self.detect_purpose(views),
            "tone": self.detect_tone(views),
            "complexity": self.detect_complexity(views),
            "length": self.suggest_length(len(views.words)),
            "confidence": self.estimate_confidence(len(views.words)),
            "suggestions": [s.to_payload() for s in self.generate_suggestions(views)],
        }

    def auto_configure_context(self, text: Any) -> ContextSettings:
        analysis = self.analyze(text)
        return {key: analysis[key] for key in CONTEXT_FIELDS}  # type: ignore[return-value]

    # -- detectors ---------------------------------------------------------

    def detect_audience(self, views: TextViews) -> str:
        lx = self.lexicon
        signals = AudienceSignals(
            academic=phrase_score(views.normalized, lx.academic_indicators),
            technical=phrase_score(views.normalized, lx.technical_indicators),
            formal=phrase_score(views.normalized, lx.formal_indicators),
            casual=phrase_score(views.normalized, lx.casual_indicators),
        )
        return first_match(AUDIENCE_RULES, signals, self.thresholds, "general")

    def detect_purpose(self, views: TextViews) -> str:
        best_score = 0
        best = "other"
        for purpose, keywords in self.lexicon.purpose_keywords.items():
            score = phrase_score(views.normalized, keywords)
            # Strict comparison keeps the earliest purpose on a tie.
            if score > best_score:
                best_score = score
                best = purpose
        return best

    def detect_tone(self, views: TextViews) -> str:
        signals = ToneSignals(
            formal=phrase_score(views.normalized, self.lexicon.formal_indicators),
            casual=phrase_score(views.normalized, self.lexicon.casual_indicators),
            contractions=len(_CONTRACTION_RE.findall(views.normalized)),
            exclamations=views.normalized.count("!"),
        )
        return first_match(TONE_RULES, signals, self.thresholds, "neutral")

    def detect_complexity(self, views: TextViews) -> str:
        lx = self.lexicon
        complex_tier, moderate_tier, simple_tier = lx.tier("complex"), lx.tier("moderate"), lx.tier("simple")
        signals = ComplexitySignals(
            complex_words=sum(1 for w in views.words if w in complex_tier),
            moderate_words=sum(1 for w in views.words if w in moderate_tier),
            simple_words=sum(1 for w in views.words if w in simple_tier),
            avg_words_per_sentence=views.avg_words_per_sentence,
            # Raw fragments keep their leading space, which counts as an empty token.
            long_sentences=sum(
                1 for s in views.sentences
                if len(_WHITESPACE_RE.split(s)) > self.thresholds.long_sentence_words_above
            ),
        )
        return first_match(COMPLEXITY_RULES, signals, self.thresholds, "simple")

    def suggest_length(self, word_count: int) -> str:
        if word_count < self.thresholds.longer_below_words:
            return "longer"
        if word_count > self.thresholds.shorter_above_words:
            return "shorter"
        return "same"

    def estimate_confidence(self, word_count: int) -> float:
        for upper, confidence in self.thresholds.confidence_tiers:
            if word_count < upper:
                return confidence
        return self.thresholds.confidence_max

    def generate_suggestions(self, views: TextViews) -> list[Suggestion]:
        """Advisory messages in fixed order: length, then tone, then complexity."""
        th = self.thresholds
        suggestions: list[Suggestion] = []
        if len(views.words) < th.detail_below_words:
            suggestions.append(ADD_DETAIL)
        if phrase_score(views.normalized, self.lexicon.casual_indicators) > th.casual_suggestion_above:
            suggestions.append(USE_FORMAL_MODE)
        if views.avg_words_per_sentence > th.concise_avg_words_above:
            suggestions.append(USE_CONCISE_MODE)
        return suggestions

    # -- style mapping -----------------------------------------------------

    def recommend_styles(self, analysis: Any, text: Any = None) -> list[dict[str, Any]]:
        """Map a previous analysis to rewriting modes, highest confidence first.

        Args:
            analysis: A result from ``analyze``.
            text: The text that analysis came from. The technical-mode rule
                scores this text, so it only fires when the text is given.

        Returns:
            List of ``{mode, reason, confidence}`` dicts sorted by descending
            confidence; equal confidences keep their insertion order.
        """
        th = self.thresholds
        if not isinstance(analysis, Mapping):
            analysis = {}

        recommendations: list[StyleRecommendation] = []
        if analysis.get("audience") == "academic":
            recommendations.append(
                StyleRecommendation("academic", "Academic audience detected", th.academic_mode_confidence)
            )
        elif analysis.get("audience") == "professional":
            recommendations.append(
                StyleRecommendation("formal", "Professional context detected", th.formal_mode_confidence)
            )
        elif analysis.get("tone") == "casual":
            recommendations.append(
                StyleRecommendation("casual", "Casual tone detected", th.casual_mode_confidence)
            )

        if isinstance(text, str):
            technical_score = phrase_score(text.lower(), self.lexicon.technical_indicators)
            if technical_score > th.technical_mode_score_above:
                recommendations.append(
                    StyleRecommendation("technical", "Technical content detected", th.technical_mode_confidence)
                )

        recommendations.sort(key=lambda r: r.confidence, reverse=True)
        return [r.to_payload() for r in recommendations]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

DEFAULT_ANALYZER = ContextAnalyzer()


def analyze_text(text: Any, analyzer: ContextAnalyzer | None = None) -> AnalysisResult:
    """Analyze ``text`` with ``analyzer`` or the shared default instance."""
    return (analyzer or DEFAULT_ANALYZER).analyze(text)


def auto_configure_context(text: Any, analyzer: ContextAnalyzer | None = None) -> ContextSettings:
    """Only the context settings of ``analyze_text`` (no confidence or suggestions)."""
    return (analyzer or DEFAULT_ANALYZER).auto_configure_context(text)


def recommend_styles(analysis: Any, text: Any = None, analyzer: ContextAnalyzer | None = None) -> list[dict[str, Any]]:
    return (analyzer or DEFAULT_ANALYZER).recommend_styles(analysis, text)
