from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from data_designer_content_integrity.ai_detection import AIDetectionResult, DetectionParameters, analyze_ai
from data_designer_content_integrity.enhancer import EnhancementSuggestion, EnhancerParameters, generate_enhancements
from data_designer_content_integrity.errors import require_sources, require_text
from data_designer_content_integrity.similarity import (
    PatternReport,
    SimilarityParameters,
    SimilarityResult,
    check_against_sources,
    check_self_similarity,
    detect_common_patterns,
    generate_similarity_suggestions,
)

logger = logging.getLogger(__name__)

# Texts shorter than this are "not enough to analyze yet" for interactive callers.
# The analyzers themselves accept any length.
MIN_ANALYSIS_CHARS = 100

SELF_SIMILARITY_LIMIT = 25.0
AI_PROBABILITY_LIMIT = 0.6


@dataclass(frozen=True)
class IntegrityReport:
    similarity: SimilarityResult
    self_similarity: SimilarityResult
    ai_detection: AIDetectionResult
    patterns: tuple[PatternReport, ...]
    similarity_suggestions: tuple[str, ...]
    enhancements: tuple[EnhancementSuggestion, ...]
    acceptable: bool

    def to_payload(self) -> dict[str, object]:
        return {
            "similarity": self.similarity.to_payload(),
            "self_similarity": self.self_similarity.to_payload(),
            "ai_detection": self.ai_detection.to_payload(),
            "patterns": [p.to_payload() for p in self.patterns],
            "similarity_suggestions": list(self.similarity_suggestions),
            "enhancements": [e.to_payload() for e in self.enhancements],
            "acceptable": self.acceptable,
        }


def is_acceptable(
    similarity: SimilarityResult,
    self_similarity: SimilarityResult,
    ai_detection: AIDetectionResult,
) -> bool:
    """Combined verdict: not flagged against sources, self-similarity under 25, AI probability under 0.6."""
    return (
        not similarity.is_flagged
        and self_similarity.overall_score_percent < SELF_SIMILARITY_LIMIT
        and ai_detection.ai_probability < AI_PROBABILITY_LIMIT
    )


def has_enough_text(candidate: str, min_chars: int = MIN_ANALYSIS_CHARS) -> bool:
    return len(require_text(candidate).strip()) >= min_chars


def check_integrity(
    candidate: str,
    sources: Iterable[str] = (),
    similarity_parameters: SimilarityParameters | None = None,
    detection_parameters: DetectionParameters | None = None,
    enhancer_parameters: EnhancerParameters | None = None,
) -> IntegrityReport:
    """Run every analyzer over ``candidate`` and combine their verdicts.

    Args:
        candidate: The text under evaluation.
        sources: Reference texts for the cross-source similarity check.
        similarity_parameters: Optional overrides for the similarity engine.
        detection_parameters: Optional overrides for the AI-likelihood engine.
        enhancer_parameters: Optional overrides for the enhancement advisor.

    Returns:
        IntegrityReport holding each analyzer's result and the ``acceptable``
        verdict from :func:`is_acceptable`.

    Raises:
        InvalidInputError: ``candidate`` is not a string or ``sources`` is not a
            sequence of strings.
    """
    candidate = require_text(candidate)
    source_texts = require_sources(sources)

    similarity = check_against_sources(candidate, source_texts, similarity_parameters)
    self_similarity = check_self_similarity(candidate, similarity_parameters)
    ai_detection = analyze_ai(candidate, detection_parameters)
    acceptable = is_acceptable(similarity, self_similarity, ai_detection)

    logger.debug(
        f"integrity check: similarity={similarity.overall_score_percent:.1f} "
        f"self_similarity={self_similarity.overall_score_percent:.1f} "
        f"ai_probability={ai_detection.ai_probability:.2f} acceptable={acceptable}"
    )

    return IntegrityReport(
        similarity=similarity,
        self_similarity=self_similarity,
        ai_detection=ai_detection,
        patterns=tuple(detect_common_patterns(candidate)),
        similarity_suggestions=tuple(generate_similarity_suggestions(similarity, similarity_parameters)),
        enhancements=tuple(generate_enhancements(candidate, enhancer_parameters)),
        acceptable=acceptable,
    )
