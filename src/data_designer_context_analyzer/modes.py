"""Rewriting modes, allowed context values and prompt assembly for the rewrite backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from data_designer_context_analyzer.core import CONTEXT_FIELDS, ContextSettings


@dataclass(frozen=True)
class RewritingMode:
    id: str
    name: str
    description: str
    prompt: str
    instructions: str


REWRITING_MODES: tuple[RewritingMode, ...] = (
    RewritingMode(
        "formal", "Formal", "Professional and structured language", "formal and professional",
        "Rewrite the following text in a formal, professional tone. Use proper grammar, "
        "sophisticated vocabulary, and maintain a respectful, business-appropriate style.",
    ),
    RewritingMode(
        "casual", "Casual", "Relaxed and conversational tone", "casual and conversational",
        "Rewrite the following text in a casual, conversational tone. Use simple language, "
        "contractions, and a friendly, relaxed style as if talking to a friend.",
    ),
    RewritingMode(
        "technical", "Technical", "Precise and domain-specific language", "technical and precise",
        "Rewrite the following text in a technical style. Use precise technical terminology, "
        "maintain accuracy and clarity, and structure information logically.",
    ),
    RewritingMode(
        "creative", "Creative", "Engaging and expressive language", "creative and engaging",
        "Rewrite the following text in a creative, engaging manner. Use vivid language, "
        "interesting metaphors, and an imaginative approach while maintaining the core message.",
    ),
    RewritingMode(
        "academic", "Academic", "Scholarly and research-oriented", "academic and scholarly",
        "Rewrite the following text in an academic style. Use scholarly language, proper "
        "citations format, objective tone, and formal structure appropriate for academic papers.",
    ),
    RewritingMode(
        "concise", "Concise", "Shortened while maintaining meaning", "concise and brief",
        "Rewrite the following text to be more concise and direct. Remove unnecessary words, "
        "combine sentences where appropriate, and focus on clarity and brevity.",
    ),
    RewritingMode(
        "elaborate", "Elaborate", "Expanded with additional detail", "detailed and comprehensive",
        "Rewrite the following text with more detail and explanation. Expand on key points, "
        "add relevant examples, and provide comprehensive information while maintaining readability.",
    ),
)

_MODES_BY_ID = {mode.id: mode for mode in REWRITING_MODES}

CONTEXT_OPTIONS: Mapping[str, tuple[str, ...]] = {
    "audience": ("professional", "academic", "casual", "general"),
    "purpose": ("email", "essay", "report", "social", "creative", "other"),
    # "authoritative" is user-selectable but never detected.
    "tone": ("formal", "casual", "friendly", "authoritative", "neutral"),
    "complexity": ("simple", "moderate", "complex"),
    "length": ("shorter", "same", "longer"),
}

DEFAULT_CONTEXT: ContextSettings = {
    "audience": "general",
    "purpose": "other",
    "tone": "neutral",
    "complexity": "moderate",
    "length": "same",
}


def mode_ids() -> list[str]:
    return [mode.id for mode in REWRITING_MODES]


def get_rewriting_mode(mode_id: str) -> RewritingMode:
    try:
        return _MODES_BY_ID[mode_id]
    except KeyError:
        raise ValueError(f"Unknown rewriting mode {mode_id!r}; expected one of {mode_ids()}") from None


def validate_context(context: Mapping[str, str] | None) -> ContextSettings:
    """Fill missing fields from ``DEFAULT_CONTEXT`` and reject values outside ``CONTEXT_OPTIONS``."""
    merged = dict(DEFAULT_CONTEXT)
    for key, value in (context or {}).items():
        if key not in CONTEXT_OPTIONS:
            continue
        if value not in CONTEXT_OPTIONS[key]:
            raise ValueError(f"Invalid {key} {value!r}; expected one of {list(CONTEXT_OPTIONS[key])}")
        merged[key] = value
    return {key: merged[key] for key in CONTEXT_FIELDS}  # type: ignore[return-value]


def build_rewrite_prompt(text: str, mode: str, context: Mapping[str, str] | None = None) -> str:
    """Assemble the user prompt sent to the rewrite backend.

    Args:
        text: The original text.
        mode: A rewriting mode id from ``REWRITING_MODES``.
        context: Optional context settings. When given, missing fields take
            their defaults and a context block is added to the prompt.

    Raises:
        ValueError: If ``mode`` or a context value is unknown.
    """
    instructions = get_rewriting_mode(mode).instructions
    context_block = ""
    if context is not None:
        settings = validate_context(context)
        context_block = (
            "\n\nContext Information:\n"
            f"- Audience: {settings['audience']}\n"
            f"- Purpose: {settings['purpose']}\n"
            f"- Tone: {settings['tone']}\n"
            f"- Complexity: {settings['complexity']}\n"
            f"- Length preference: {settings['length']}"
        )
    return f'{instructions}{context_block}\n\nText to rewrite:\n"{text}"\n\nRewritten text:'
