# SPDX-License-Identifier: Apache-2.0
"""Content integrity plugin for NeMo Data Designer.

Adds a ``content-integrity`` column type that checks generated text for copying
from reference sources, repeated sentences and machine-like writing, using
deterministic string similarity and lexical statistics. No model calls, no
network access.

Usage::

    from data_designer_content_integrity import ContentIntegrityColumnConfig

    builder.add_column(ContentIntegrityColumnConfig(
        name="integrity",
        target_columns=["abstract"],
        source_columns=["reference_abstracts"],
    ))

The analyzers can also be called directly::

    from data_designer_content_integrity import analyze_ai, check_against_sources

    check_against_sources(draft, [reference]).is_flagged
"""

from data_designer_content_integrity.ai_detection import AIDetectionResult, DetectionParameters, Indicator, analyze_ai
from data_designer_content_integrity.config import ContentIntegrityColumnConfig
from data_designer_content_integrity.enhancer import (
    EnhancementSuggestion,
    EnhancerParameters,
    generate_enhancements,
    humanize_text,
    paraphrase_text,
)
from data_designer_content_integrity.errors import ContentIntegrityError, InvalidInputError
from data_designer_content_integrity.integrity import IntegrityReport, check_integrity, is_acceptable
from data_designer_content_integrity.similarity import (
    PatternReport,
    SimilarityMatch,
    SimilarityParameters,
    SimilarityResult,
    check_against_sources,
    check_self_similarity,
    detect_common_patterns,
    generate_similarity_suggestions,
)

__all__ = [
    "AIDetectionResult",
    "ContentIntegrityColumnConfig",
    "ContentIntegrityError",
    "DetectionParameters",
    "EnhancementSuggestion",
    "EnhancerParameters",
    "Indicator",
    "IntegrityReport",
    "InvalidInputError",
    "PatternReport",
    "SimilarityMatch",
    "SimilarityParameters",
    "SimilarityResult",
    "analyze_ai",
    "check_against_sources",
    "check_integrity",
    "check_self_similarity",
    "detect_common_patterns",
    "generate_enhancements",
    "generate_similarity_suggestions",
    "humanize_text",
    "is_acceptable",
    "paraphrase_text",
]

