from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_context_analyzer.modes import get_rewriting_mode


class ContextAnalyzerColumnConfig(SingleColumnConfig):
    """Infer rewriting context (audience, purpose, tone, complexity, length) from text columns.

    Scores each row's text against fixed keyword lists and sentence statistics and
    produces the detected context, a confidence value, and a recommended rewriting mode.

    Attributes:
        target_columns: Columns whose text content will be concatenated and analyzed.
        min_confidence: Minimum analysis confidence (0-1) for ``is_valid=True``. Defaults
            to 0.0, so every row is valid.
        include_suggestions: Include advisory suggestions (length, tone, complexity) in output.
        include_recommendations: Include the full list of style recommendations.
        include_prompt: Include a rewrite prompt built for the recommended mode.
        fallback_mode: Mode used when no style recommendation fires.
    """

    target_columns: list[str]
    min_confidence: float = Field(default=0.0, ge=0.0, le=1.0, description="Minimum confidence for is_valid=True")
    include_suggestions: bool = Field(default=True, description="Include advisory suggestions in output")
    include_recommendations: bool = Field(default=False, description="Include all style recommendations in output")
    include_prompt: bool = Field(default=False, description="Include a rewrite prompt for the recommended mode")
    fallback_mode: str = Field(default="formal", description="Rewriting mode used when nothing is recommended")
    column_type: Literal["context-analyzer"] = "context-analyzer"

    @field_validator("fallback_mode")
    @classmethod
    def _known_mode(cls, value: str) -> str:
        get_rewriting_mode(value)
        return value

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f9ed"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
