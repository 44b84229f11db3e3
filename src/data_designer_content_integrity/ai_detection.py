"""AI-likelihood engine.

Ten independent lexical and statistical indicators each produce a 0-100 score
where higher means more machine-like. Their weighted mean is the AI
probability, which is then classified into one of five bands.

Indicator tips (one per indicator, shown when its score exceeds 70):

==================== =========================================================
Indicator            Tip
==================== =========================================================
Perplexity           Add more variety in word choice and sentence structure.
Burstiness           Vary your sentence lengths - mix short and long sentences.
Vocabulary Diversity Let key terms recur naturally instead of rotating synonyms.
Sentence Structure   Start sentences in different ways.
Repetitive Patterns  Avoid repetitive phrasing and sentence structures.
Formal Transitions   Use more casual transitions and connectors.
AI Cliché Phrases    Replace common AI phrases with original expressions.
Paragraph Uniformity Let paragraph length follow the content.
Personal Pronouns    Add personal voice with "I", "we", or "you".
Emotional Language   Include more personal opinions and emotional expressions.
==================== =========================================================

The vocabulary diversity indicator treats *high* diversity as machine-like.
That direction is kept as-is; changing it would shift classifications.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Literal, Mapping

from data_designer_content_integrity.errors import require_text
from data_designer_content_integrity.text import (
    Span,
    clamp,
    first_word,
    split_paragraphs,
    split_sentences,
    split_words,
    variance,
    word_tokens,
)

Severity = Literal["low", "medium", "high"]
Classification = Literal["human", "likely-human", "uncertain", "likely-ai", "ai"]

PERPLEXITY = "Perplexity"
BURSTINESS = "Burstiness"
VOCABULARY_DIVERSITY = "Vocabulary Diversity"
SENTENCE_STRUCTURE = "Sentence Structure"
REPETITIVE_PATTERNS = "Repetitive Patterns"
FORMAL_TRANSITIONS = "Formal Transitions"
AI_CLICHES = "AI Cliché Phrases"
PARAGRAPH_UNIFORMITY = "Paragraph Uniformity"
PERSONAL_PRONOUNS = "Personal Pronouns"
EMOTIONAL_LANGUAGE = "Emotional Language"

INDICATOR_NAMES = (
    PERPLEXITY,
    BURSTINESS,
    VOCABULARY_DIVERSITY,
    SENTENCE_STRUCTURE,
    REPETITIVE_PATTERNS,
    FORMAL_TRANSITIONS,
    AI_CLICHES,
    PARAGRAPH_UNIFORMITY,
    PERSONAL_PRONOUNS,
    EMOTIONAL_LANGUAGE,
)

NEUTRAL_SCORE = 50.0

# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


def _default_weights() -> dict[str, float]:
    return {
        PERPLEXITY: 0.15,
        BURSTINESS: 0.15,
        VOCABULARY_DIVERSITY: 0.10,
        SENTENCE_STRUCTURE: 0.10,
        REPETITIVE_PATTERNS: 0.15,
        FORMAL_TRANSITIONS: 0.10,
        AI_CLICHES: 0.15,
        PARAGRAPH_UNIFORMITY: 0.05,
        PERSONAL_PRONOUNS: 0.03,
        EMOTIONAL_LANGUAGE: 0.02,
    }


@dataclass(frozen=True)
class DetectionParameters:
    """Scales, sample minimums, band cut points and weights for the AI indicators."""

    weights: Mapping[str, float] = field(default_factory=_default_weights, hash=False)
    default_weight: float = 0.05

    min_sentences: int = 3
    min_paragraphs: int = 3
    burstiness_min_sentence_chars: int = 10
    paragraph_min_chars: int = 20

    perplexity_variance_scale: float = 50.0
    burstiness_variance_scale: float = 200.0
    paragraph_variance_scale: float = 500.0
    diversity_floor: float = 0.6
    diversity_offset: float = 0.5
    repetitive_scale: float = 200.0
    transition_scale: float = 500.0
    cliche_scale: float = 300.0

    pronoun_low_ratio: float = 0.02
    pronoun_mid_ratio: float = 0.05
    emotion_low_ratio: float = 0.005
    emotion_mid_ratio: float = 0.01

    ai_min: float = 0.8
    likely_ai_min: float = 0.6
    uncertain_min: float = 0.4
    likely_human_min: float = 0.2

    headline_high: float = 0.7
    headline_moderate: float = 0.5
    headline_low: float = 0.3
    tip_score_min: float = 70.0

    def __post_init__(self) -> None:
        # Read-only copy; the default instance is shared between calls.
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))


DEFAULT_DETECTION_PARAMETERS = DetectionParameters()

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Indicator:
    name: str
    score_percent: float
    severity: Severity
    description: str

    def to_payload(self) -> dict[str, object]:
        return {
            "name": self.name,
            "score_percent": round(self.score_percent, 2),
            "severity": self.severity,
            "description": self.description,
        }


@dataclass(frozen=True)
class AIDetectionResult:
    ai_probability: float
    indicators: tuple[Indicator, ...]
    classification: Classification
    suggestions: tuple[str, ...]

    @property
    def human_probability(self) -> float:
        return 1 - self.ai_probability

    def to_payload(self) -> dict[str, object]:
        return {
            "ai_probability": round(self.ai_probability, 4),
            "human_probability": round(self.human_probability, 4),
            "indicators": [i.to_payload() for i in self.indicators],
            "classification": self.classification,
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class _TextView:
    text: str
    words: list[str]
    tokens: list[str]
    sentences: list[Span]
    hp: DetectionParameters


# ---------------------------------------------------------------------------
# Compiled patterns and word lists
# ---------------------------------------------------------------------------

_CONNECTIVE_RES = [
    re.compile(r"\b(furthermore|moreover|additionally|in addition)\b", re.IGNORECASE),
    re.compile(r"\b(however|nevertheless|nonetheless)\b", re.IGNORECASE),
    re.compile(r"\b(therefore|thus|hence|consequently)\b", re.IGNORECASE),
    re.compile(r"\b(it is important to note|it should be noted|it is worth mentioning)\b", re.IGNORECASE),
]

_FORMAL_TRANSITIONS = frozenset({
    "furthermore", "moreover", "nevertheless", "nonetheless", "accordingly",
    "consequently", "subsequently", "notwithstanding", "henceforth",
})

_AI_CLICHE_RES = [
    re.compile(r"in today's (digital|modern|fast-paced) (world|age|era)", re.IGNORECASE),
    re.compile(r"it is important to (note|understand|recognize|acknowledge)", re.IGNORECASE),
    re.compile(r"plays? a (crucial|vital|important|significant) role", re.IGNORECASE),
    re.compile(r"in conclusion,? it (can be|is) (said|noted|concluded)", re.IGNORECASE),
    re.compile(r"delve into|diving deep|explore the intricacies", re.IGNORECASE),
    re.compile(r"landscape of|realm of|sphere of", re.IGNORECASE),
    re.compile(r"cutting[- ]edge|state[- ]of[- ]the[- ]art", re.IGNORECASE),
]

_PERSONAL_PRONOUNS = frozenset({
    "i", "me", "my", "mine", "myself", "we", "us", "our", "ours", "ourselves",
    "you", "your", "yours", "yourself", "yourselves", "he", "him", "his", "himself",
    "she", "her", "hers", "herself", "it", "its", "itself", "they", "them", "their",
    "theirs", "themselves",
})
_PRONOUN_STRIP_RE = re.compile(r"^[^\w]+|(?:'\w*|[^\w])+$")

_EMOTIONAL_WORDS = frozenset({
    "amazing", "terrible", "wonderful", "horrible", "fantastic", "awful",
    "love", "hate", "excited", "disappointed", "thrilled", "frustrated",
    "happy", "sad", "angry", "joyful", "miserable", "delighted",
})

_TIPS = {
    PERPLEXITY: "Add more variety in word choice and sentence structure.",
    BURSTINESS: "Vary your sentence lengths - mix short and long sentences.",
    VOCABULARY_DIVERSITY: "Let key terms recur naturally instead of rotating synonyms.",
    SENTENCE_STRUCTURE: "Start sentences in different ways.",
    REPETITIVE_PATTERNS: "Avoid repetitive phrasing and sentence structures.",
    FORMAL_TRANSITIONS: "Use more casual transitions and connectors.",
    AI_CLICHES: "Replace common AI phrases with original expressions.",
    PARAGRAPH_UNIFORMITY: "Let paragraph length follow the content.",
    PERSONAL_PRONOUNS: 'Add personal voice with "I", "we", or "you" where appropriate.',
    EMOTIONAL_LANGUAGE: "Include more personal opinions and emotional expressions.",
}

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _band(value: float, high: float, medium: float) -> Severity:
    if value > high:
        return "high"
    if value > medium:
        return "medium"
    return "low"


def _neutral(name: str, description: str) -> Indicator:
    return Indicator(name, NEUTRAL_SCORE, "medium", description)


def _count_hits(patterns: list[re.Pattern[str]], text: str) -> int:
    return sum(len(p.findall(text)) for p in patterns)


# ---------------------------------------------------------------------------
# Indicators
# ---------------------------------------------------------------------------


def _perplexity(view: _TextView) -> Indicator:
    if not view.words:
        return _neutral(PERPLEXITY, "Insufficient text to analyze predictability")
    v = variance([len(w) for w in view.words])
    score = clamp(1 - v / view.hp.perplexity_variance_scale)
    return Indicator(
        PERPLEXITY,
        score * 100,
        _band(score, 0.7, 0.4),
        "Text is highly predictable (AI-like)" if score > 0.6 else "Text has good variety (human-like)",
    )


def _burstiness(view: _TextView) -> Indicator:
    hp = view.hp
    lengths = [len(s.text.split()) for s in view.sentences if len(s.text) > hp.burstiness_min_sentence_chars]
    if len(lengths) < hp.min_sentences:
        return _neutral(BURSTINESS, "Insufficient text to analyze burstiness")
    score = clamp(1 - variance(lengths) / hp.burstiness_variance_scale)
    return Indicator(
        BURSTINESS,
        score * 100,
        _band(score, 0.7, 0.4),
        "Sentences are too uniform in length (AI-like)" if score > 0.6 else "Good sentence length variation (human-like)",
    )


def _vocabulary_diversity(view: _TextView) -> Indicator:
    hp = view.hp
    if not view.tokens:
        return _neutral(VOCABULARY_DIVERSITY, "Insufficient text to analyze vocabulary")
    diversity = len(set(view.tokens)) / len(view.tokens)
    score = (diversity - hp.diversity_offset) * 2 if diversity > hp.diversity_floor else 0.0
    return Indicator(
        VOCABULARY_DIVERSITY,
        score * 100,
        _band(diversity, 0.7, 0.6),
        "Unusually high vocabulary diversity (AI-like)" if diversity > 0.7 else "Natural vocabulary repetition (human-like)",
    )


def _sentence_structure(view: _TextView) -> Indicator:
    if len(view.sentences) < view.hp.min_sentences:
        return _neutral(SENTENCE_STRUCTURE, "Insufficient sentences to analyze")
    starters = Counter(first_word(s.text) for s in view.sentences)
    ratio = max(starters.values()) / len(view.sentences)
    return Indicator(
        SENTENCE_STRUCTURE,
        ratio * 100,
        _band(ratio, 0.5, 0.3),
        "Repetitive sentence starters (AI-like)" if ratio > 0.4 else "Varied sentence structures (human-like)",
    )


def _repetitive_patterns(view: _TextView) -> Indicator:
    hits = _count_hits(_CONNECTIVE_RES, view.text)
    ratio = hits / len(view.sentences) if view.sentences else 0.0
    return Indicator(
        REPETITIVE_PATTERNS,
        min(100.0, ratio * view.hp.repetitive_scale),
        _band(ratio, 0.3, 0.15),
        "Excessive use of transition words (AI-like)" if ratio > 0.2 else "Natural use of transitions (human-like)",
    )


def _formal_transitions(view: _TextView) -> Indicator:
    if not view.tokens:
        return _neutral(FORMAL_TRANSITIONS, "Insufficient text to analyze transitions")
    ratio = sum(1 for t in view.tokens if t in _FORMAL_TRANSITIONS) / len(view.tokens)
    return Indicator(
        FORMAL_TRANSITIONS,
        min(100.0, ratio * view.hp.transition_scale),
        _band(ratio, 0.02, 0.01),
        "Overuse of formal transitions (AI-like)" if ratio > 0.015 else "Natural transition usage (human-like)",
    )


def _ai_cliches(view: _TextView) -> Indicator:
    hits = _count_hits(_AI_CLICHE_RES, view.text)
    ratio = hits / len(view.sentences) if view.sentences else 0.0
    return Indicator(
        AI_CLICHES,
        min(100.0, ratio * view.hp.cliche_scale),
        _band(ratio, 0.2, 0.1),
        "Contains common AI phrases (AI-like)" if ratio > 0.15 else "Original phrasing (human-like)",
    )


def _paragraph_uniformity(view: _TextView) -> Indicator:
    hp = view.hp
    paragraphs = split_paragraphs(view.text, hp.paragraph_min_chars)
    if len(paragraphs) < hp.min_paragraphs:
        return _neutral(PARAGRAPH_UNIFORMITY, "Insufficient paragraphs to analyze")
    score = clamp(1 - variance([len(p.split()) for p in paragraphs]) / hp.paragraph_variance_scale)
    return Indicator(
        PARAGRAPH_UNIFORMITY,
        score * 100,
        _band(score, 0.7, 0.4),
        "Paragraphs too uniform in length (AI-like)" if score > 0.6 else "Natural paragraph variation (human-like)",
    )


def _personal_pronouns(view: _TextView) -> Indicator:
    hp = view.hp
    if not view.words:
        return _neutral(PERSONAL_PRONOUNS, "Insufficient text to analyze pronouns")
    # "I've" and "it's" count as the pronoun they start with.
    pronouns = sum(1 for w in view.words if _PRONOUN_STRIP_RE.sub("", w).lower() in _PERSONAL_PRONOUNS)
    ratio = pronouns / len(view.words)
    if ratio < hp.pronoun_low_ratio:
        score = 80.0
    elif ratio < hp.pronoun_mid_ratio:
        score = 50.0
    else:
        score = 20.0
    return Indicator(
        PERSONAL_PRONOUNS,
        score,
        _band(score, 60, 40),
        "Very few personal pronouns (AI-like)" if ratio < hp.pronoun_low_ratio else "Natural pronoun usage (human-like)",
    )


def _emotional_language(view: _TextView) -> Indicator:
    hp = view.hp
    if not view.tokens:
        return _neutral(EMOTIONAL_LANGUAGE, "Insufficient text to analyze emotional language")
    ratio = sum(1 for t in view.tokens if t in _EMOTIONAL_WORDS) / len(view.tokens)
    if ratio < hp.emotion_low_ratio:
        score = 70.0
    elif ratio < hp.emotion_mid_ratio:
        score = 40.0
    else:
        score = 15.0
    return Indicator(
        EMOTIONAL_LANGUAGE,
        score,
        _band(score, 60, 35),
        "Lacks emotional language (AI-like)" if ratio < hp.emotion_low_ratio else "Contains emotional expressions (human-like)",
    )


_INDICATORS: list[Callable[[_TextView], Indicator]] = [
    _perplexity,
    _burstiness,
    _vocabulary_diversity,
    _sentence_structure,
    _repetitive_patterns,
    _formal_transitions,
    _ai_cliches,
    _paragraph_uniformity,
    _personal_pronouns,
    _emotional_language,
]

# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def combine_indicators(indicators: list[Indicator] | tuple[Indicator, ...], parameters: DetectionParameters | None = None) -> float:
    """Weighted mean of indicator scores as a probability in [0, 1].

    Names missing from the weight table fall back to ``default_weight``.
    """
    hp = parameters or DEFAULT_DETECTION_PARAMETERS
    weighted_sum = 0.0
    total_weight = 0.0
    for indicator in indicators:
        weight = hp.weights.get(indicator.name, hp.default_weight)
        weighted_sum += indicator.score_percent / 100 * weight
        total_weight += weight
    return weighted_sum / total_weight if total_weight > 0 else 0.0


def classify(ai_probability: float, parameters: DetectionParameters | None = None) -> Classification:
    hp = parameters or DEFAULT_DETECTION_PARAMETERS
    if ai_probability >= hp.ai_min:
        return "ai"
    if ai_probability >= hp.likely_ai_min:
        return "likely-ai"
    if ai_probability >= hp.uncertain_min:
        return "uncertain"
    if ai_probability >= hp.likely_human_min:
        return "likely-human"
    return "human"


def _suggestions(indicators: list[Indicator], ai_probability: float, hp: DetectionParameters) -> list[str]:
    if ai_probability > hp.headline_high:
        suggestions = ["High AI probability detected. Consider significant revisions."]
    elif ai_probability > hp.headline_moderate:
        suggestions = ["Moderate AI indicators. Review and personalize the content."]
    elif ai_probability > hp.headline_low:
        suggestions = ["Low AI indicators. Minor adjustments recommended."]
    else:
        suggestions = ["Appears human-written. Content looks authentic."]

    for indicator in indicators:
        if indicator.score_percent > hp.tip_score_min and indicator.name in _TIPS:
            suggestions.append(_TIPS[indicator.name])
    return suggestions


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_ai(candidate: str, parameters: DetectionParameters | None = None) -> AIDetectionResult:
    """Estimate how likely ``candidate`` is to be machine-generated.

    Args:
        candidate: The text under evaluation.
        parameters: Optional overrides for scales, cut points and weights.

    Returns:
        AIDetectionResult with the ten indicators in a fixed order. Indicators
        that need a minimum sample (sentences, paragraphs, words) report a
        neutral 50 with medium severity when the sample is too small.

    Raises:
        InvalidInputError: ``candidate`` is not a string.
    """
    hp = parameters or DEFAULT_DETECTION_PARAMETERS
    candidate = require_text(candidate)
    view = _TextView(
        text=candidate,
        words=split_words(candidate),
        tokens=word_tokens(candidate),
        sentences=split_sentences(candidate),
        hp=hp,
    )
    indicators = [indicator(view) for indicator in _INDICATORS]
    ai_probability = combine_indicators(indicators, hp)
    return AIDetectionResult(
        ai_probability=ai_probability,
        indicators=tuple(indicators),
        classification=classify(ai_probability, hp),
        suggestions=tuple(_suggestions(indicators, ai_probability, hp)),
    )

