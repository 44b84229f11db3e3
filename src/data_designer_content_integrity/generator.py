from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_content_integrity.config import ContentIntegrityColumnConfig
from data_designer_content_integrity.integrity import check_integrity, has_enough_text

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def _collect_sources(values: list[object]) -> list[str]:
    sources: list[str] = []
    for value in values:
        if isinstance(value, str):
            candidates = [value]
        elif isinstance(value, (list, tuple)):
            candidates = [v for v in value if isinstance(v, str)]
        else:
            continue
        sources.extend(c for c in candidates if c.strip())
    return sources


def analyze_row(text: str, sources: list[str], config: ContentIntegrityColumnConfig) -> dict:
    if not has_enough_text(text, config.min_characters):
        return {"is_valid": False, "status": "insufficient_text", "character_count": len(text.strip())}

    report = check_integrity(text, sources)
    ai = report.ai_detection
    output: dict = {
        "is_valid": report.acceptable,
        "status": "analyzed",
        "similarity_score": round(report.similarity.overall_score_percent, 2),
        "similarity_flagged": report.similarity.is_flagged,
        "self_similarity_score": round(report.self_similarity.overall_score_percent, 2),
        "ai_probability": round(ai.ai_probability, 4),
        "ai_classification": ai.classification,
    }
    if config.include_advice:
        output["advice"] = list(report.similarity_suggestions) + list(ai.suggestions)
    if config.include_enhancements:
        output["enhancements"] = [e.to_payload() for e in report.enhancements[: config.max_enhancements]]
    return output


class ContentIntegrityColumnGenerator(ColumnGeneratorFullColumn[ContentIntegrityColumnConfig]):
    """Column generator that checks text for copying, repetition and AI likelihood."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f50e Checking column {self.config.name!r} for content integrity")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   source columns: {self.config.source_columns}")

        results = []
        for _, row in data[self.config.required_columns].iterrows():
            text = " ".join(str(row[c]) for c in self.config.target_columns if row[c] is not None)
            sources = _collect_sources([row[c] for c in self.config.source_columns])
            results.append(analyze_row(text, sources, self.config))

        valid = sum(1 for r in results if r["is_valid"])
        logger.info(f"   {valid} of {len(results)} rows acceptable")

        data = data.copy()
        data[self.config.name] = results
        return data
