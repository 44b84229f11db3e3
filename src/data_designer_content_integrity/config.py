from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_content_integrity.integrity import MIN_ANALYSIS_CHARS


class ContentIntegrityColumnConfig(SingleColumnConfig):
    """Check text columns for copied, repetitive or machine-like writing.

    Each row's text is compared against the row's reference sources, checked for
    repeated sentences and scored for AI likelihood. The row is valid when it is
    not flagged against its sources, its self-similarity stays under 25 and its
    AI probability stays under 0.6.

    Attributes:
        target_columns: Columns whose text content will be concatenated and checked.
        source_columns: Columns holding reference texts (a string or a list of
            strings per row) to compare against.
        min_characters: Rows with less text than this are reported as
            ``insufficient_text`` and ``is_valid=False`` without running the
            analyzers. Defaults to 100.
        include_advice: Include similarity and AI-detection advice strings in output.
        include_enhancements: Include rewrite suggestions in output.
        max_enhancements: Cap on the number of rewrite suggestions kept per row.
    """

    target_columns: list[str]
    source_columns: list[str] = Field(default_factory=list, description="Columns with reference texts")
    min_characters: int = Field(default=MIN_ANALYSIS_CHARS, ge=0, description="Minimum text length before analysis runs")
    include_advice: bool = Field(default=True, description="Include advice strings in output")
    include_enhancements: bool = Field(default=False, description="Include rewrite suggestions in output")
    max_enhancements: int = Field(default=10, ge=0, description="Maximum rewrite suggestions per row")
    column_type: Literal["content-integrity"] = "content-integrity"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f50e"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns + [c for c in self.source_columns if c not in self.target_columns]

    @property
    def side_effect_columns(self) -> list[str]:
        return []
