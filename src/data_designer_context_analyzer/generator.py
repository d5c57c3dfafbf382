from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_context_analyzer.config import ContextAnalyzerColumnConfig
from data_designer_context_analyzer.core import CONTEXT_FIELDS, analyze_text, recommend_styles
from data_designer_context_analyzer.modes import build_rewrite_prompt

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def build_row_output(text: str, config: ContextAnalyzerColumnConfig) -> dict[str, Any]:
    """Analyze one row's text and shape the column value according to ``config``."""
    analysis = analyze_text(text)
    recommendations = recommend_styles(analysis, text)
    recommended_mode = recommendations[0]["mode"] if recommendations else config.fallback_mode
    context = {key: analysis[key] for key in CONTEXT_FIELDS}

    output: dict[str, Any] = {
        "is_valid": analysis["confidence"] >= config.min_confidence,
        **context,
        "confidence": analysis["confidence"],
        "recommended_mode": recommended_mode,
    }
    if config.include_suggestions:
        output["suggestions"] = analysis["suggestions"]
    if config.include_recommendations:
        output["recommendations"] = recommendations
    if config.include_prompt:
        output["rewrite_prompt"] = build_rewrite_prompt(text, recommended_mode, context)
    return output


class ContextAnalyzerColumnGenerator(ColumnGeneratorFullColumn[ContextAnalyzerColumnConfig]):
    """Column generator that infers rewriting context from text via keyword heuristics."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f9ed Analyzing rewriting context for column {self.config.name!r}")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   min_confidence: {self.config.min_confidence}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            results.append(build_row_output(text, self.config))

        data = data.copy()
        data[self.config.name] = results
        return data
