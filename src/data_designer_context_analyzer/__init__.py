# SPDX-License-Identifier: Apache-2.0
"""Context analyzer plugin for NeMo Data Designer.

Adds a ``context-analyzer`` column type that infers the audience, purpose,
tone, complexity and length settings for rewriting a piece of text, using
fixed keyword lists and sentence statistics. No LLM calls, no API dependencies.

Usage::

    from data_designer_context_analyzer import ContextAnalyzerColumnConfig

    builder.add_column(ContextAnalyzerColumnConfig(
        name="rewrite_context",
        target_columns=["draft"],
        include_prompt=True,
    ))
"""

from data_designer_context_analyzer.config import ContextAnalyzerColumnConfig
from data_designer_context_analyzer.core import (
    ContextAnalyzer,
    analyze_text,
    auto_configure_context,
    recommend_styles,
)
from data_designer_context_analyzer.lexicon import Lexicon, Thresholds
from data_designer_context_analyzer.modes import REWRITING_MODES, build_rewrite_prompt

__all__ = [
    "ContextAnalyzerColumnConfig",
    "ContextAnalyzer",
    "Lexicon",
    "Thresholds",
    "analyze_text",
    "auto_configure_context",
    "recommend_styles",
    "REWRITING_MODES",
    "build_rewrite_prompt",
]
