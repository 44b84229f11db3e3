"""Rewrite suggestions for generated text.

``generate_enhancements`` locates stock phrases, overused words, monotonous
sentence structure and unsupported claims, and proposes concrete alternatives.
``paraphrase_text`` and ``humanize_text`` are fixed text transforms that callers
can apply directly.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Literal

from data_designer_content_integrity.errors import require_text
from data_designer_content_integrity.text import first_word, split_sentences, variance, word_tokens

SuggestionKind = Literal["paraphrase", "synonym", "structure", "citation", "variation"]

# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EnhancerParameters:
    """Thresholds for the enhancement passes."""

    repeated_word_min_length: int = 4
    repeated_word_min_count: int = 6
    repeated_starter_min_count: int = 4
    sentence_variance_min: float = 20.0
    citation_lookbehind_chars: int = 50
    citation_lookahead_chars: int = 100
    contraction_min_occurrences: int = 3
    contraction_every: int = 3


DEFAULT_ENHANCER_PARAMETERS = EnhancerParameters()

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EnhancementSuggestion:
    kind: SuggestionKind
    original_span: str
    alternatives: tuple[str, ...]
    rationale: str
    position: int

    def to_payload(self) -> dict[str, object]:
        return {
            "kind": self.kind,
            "original_span": self.original_span,
            "alternatives": list(self.alternatives),
            "rationale": self.rationale,
            "position": self.position,
        }


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

_CLICHE_REPLACEMENTS: list[tuple[re.Pattern[str], tuple[str, ...]]] = [
    (
        re.compile(r"in today's (digital|modern|fast-paced) (world|age|era)", re.IGNORECASE),
        ("currently", "nowadays", "in recent times", "at present"),
    ),
    (
        re.compile(r"it is important to (note|understand|recognize|acknowledge)", re.IGNORECASE),
        ("notably", "crucially", "worth noting", "significantly"),
    ),
    (
        re.compile(r"plays? a (crucial|vital|important|significant) role", re.IGNORECASE),
        ("matters significantly", "is essential", "proves critical", "holds importance"),
    ),
    (
        re.compile(r"delve into|diving deep|explore the intricacies", re.IGNORECASE),
        ("examine", "investigate", "study", "analyze"),
    ),
    (
        re.compile(r"(landscape|realm|sphere) of", re.IGNORECASE),
        ("field of", "area of", "domain of", "in"),
    ),
]
_CLICHE_RATIONALE = "This phrase is commonly used by AI. Consider a more natural alternative."

_STOPWORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "is", "are", "was", "were", "be", "been",
    "have", "has", "had", "this", "that", "these", "those", "it", "they",
})

SYNONYMS: dict[str, tuple[str, ...]] = {
    "important": ("significant", "crucial", "essential", "vital", "key"),
    "show": ("demonstrate", "illustrate", "reveal", "indicate", "display"),
    "use": ("utilize", "employ", "apply", "implement", "leverage"),
    "many": ("numerous", "several", "various", "multiple", "countless"),
    "good": ("beneficial", "positive", "favorable", "advantageous", "effective"),
    "bad": ("negative", "detrimental", "harmful", "adverse", "unfavorable"),
    "big": ("large", "substantial", "considerable", "significant", "extensive"),
    "small": ("minor", "limited", "modest", "minimal", "slight"),
    "different": ("various", "diverse", "distinct", "unique", "separate"),
    "study": ("research", "investigation", "analysis", "examination", "exploration"),
    "find": ("discover", "identify", "determine", "uncover", "locate"),
    "make": ("create", "produce", "generate", "develop", "construct"),
    "help": ("assist", "aid", "support", "facilitate", "enable"),
    "provide": ("offer", "supply", "furnish", "deliver", "present"),
    "increase": ("enhance", "boost", "elevate", "expand", "raise"),
    "decrease": ("reduce", "diminish", "lower", "decline", "lessen"),
    "change": ("modify", "alter", "transform", "adjust", "adapt"),
    "develop": ("evolve", "advance", "progress", "grow", "mature"),
    "analyze": ("examine", "evaluate", "assess", "study", "investigate"),
    "method": ("approach", "technique", "strategy", "procedure", "process"),
}

_GENERIC_STARTERS = frozenset({"the", "this"})
_STARTER_ALTERNATIVES = (
    "Vary your sentence starters",
    "Use different opening words",
    "Combine some sentences",
    "Start with different parts of speech",
)
_VARIATION_ALTERNATIVES = (
    "Mix short, punchy sentences with longer, more detailed ones",
    "Vary sentence complexity",
    "Use different sentence structures",
    "Combine or split sentences for rhythm",
)

_CLAIM_RES = [
    re.compile(r"\d+(\.\d+)?%"),
    re.compile(r"studies (show|indicate|suggest|reveal)", re.IGNORECASE),
    re.compile(r"research (shows|indicates|suggests|reveals)", re.IGNORECASE),
    re.compile(r"according to", re.IGNORECASE),
    re.compile(r"evidence (shows|indicates|suggests|reveals)", re.IGNORECASE),
    re.compile(r"data (shows|indicates|suggests|reveals)", re.IGNORECASE),
]
_CITATION_MARKER_RE = re.compile(r"\[\d+\]|\(\w+,?\s*\d{4}\)")
_CITATION_ALTERNATIVES = (
    "Add citation [1]",
    "Add source (Author, Year)",
    "Reference supporting research",
    "Cite data source",
)

_PARAPHRASE_RULES = [
    (re.compile(r"furthermore,", re.IGNORECASE), "Additionally,"),
    (re.compile(r"moreover,", re.IGNORECASE), "Also,"),
    (re.compile(r"in conclusion,", re.IGNORECASE), "To summarize,"),
    (re.compile(r"it is important to note that", re.IGNORECASE), "Notably,"),
    (re.compile(r"it should be noted that", re.IGNORECASE), "Note that"),
]

_CONTRACTIONS = [
    (re.compile(r"\bit is\b", re.IGNORECASE), "it's"),
    (re.compile(r"\bthat is\b", re.IGNORECASE), "that's"),
    (re.compile(r"\bthere is\b", re.IGNORECASE), "there's"),
    (re.compile(r"\bcannot\b", re.IGNORECASE), "can't"),
    (re.compile(r"\bwill not\b", re.IGNORECASE), "won't"),
]

# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------


def _cliche_suggestions(text: str) -> list[EnhancementSuggestion]:
    return [
        EnhancementSuggestion("paraphrase", m.group(0), alternatives, _CLICHE_RATIONALE, m.start())
        for pattern, alternatives in _CLICHE_REPLACEMENTS
        for m in pattern.finditer(text)
    ]


def _synonym_suggestions(text: str, hp: EnhancerParameters) -> list[EnhancementSuggestion]:
    counts = Counter(
        t for t in word_tokens(text) if t not in _STOPWORDS and len(t) >= hp.repeated_word_min_length
    )
    suggestions = []
    for word, count in counts.items():
        if count < hp.repeated_word_min_count or word not in SYNONYMS:
            continue
        first = re.search(rf"\b{re.escape(word)}\b", text, re.IGNORECASE)
        suggestions.append(EnhancementSuggestion(
            "synonym",
            word,
            SYNONYMS[word],
            f'The word "{word}" appears {count} times. Consider using synonyms for variety.',
            first.start() if first else 0,
        ))
    return suggestions


def _structure_suggestions(text: str, hp: EnhancerParameters) -> list[EnhancementSuggestion]:
    sentences = split_sentences(text)
    if not sentences:
        return []

    suggestions = []
    starters = Counter(first_word(s.text) for s in sentences)
    for word, count in starters.items():
        if count >= hp.repeated_starter_min_count and word not in _GENERIC_STARTERS:
            suggestions.append(EnhancementSuggestion(
                "structure",
                f'Multiple sentences starting with "{word}"',
                _STARTER_ALTERNATIVES,
                f'{count} sentences start with "{word}". This creates repetitive structure.',
                0,
            ))

    if variance([len(s.text.split()) for s in sentences]) < hp.sentence_variance_min:
        suggestions.append(EnhancementSuggestion(
            "variation",
            "Uniform sentence lengths",
            _VARIATION_ALTERNATIVES,
            "Sentences are too uniform in length. Human writing has more variation.",
            0,
        ))
    return suggestions


def _has_nearby_citation(text: str, position: int, hp: EnhancerParameters) -> bool:
    before = text[max(0, position - hp.citation_lookbehind_chars) : position]
    after = text[position : position + hp.citation_lookahead_chars]
    return _CITATION_MARKER_RE.search(before + after) is not None


def _citation_suggestions(text: str, hp: EnhancerParameters) -> list[EnhancementSuggestion]:
    return [
        EnhancementSuggestion(
            "citation",
            m.group(0),
            _CITATION_ALTERNATIVES,
            "This claim should be supported with a citation.",
            m.start(),
        )
        for pattern in _CLAIM_RES
        for m in pattern.finditer(text)
        if not _has_nearby_citation(text, m.start(), hp)
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_enhancements(candidate: str, parameters: EnhancerParameters | None = None) -> list[EnhancementSuggestion]:
    """Suggest rewrites that make ``candidate`` read less formulaic and better supported.

    Passes run in a fixed order: cliché replacement, repeated-word synonyms,
    sentence structure, citation gaps. Suggestions keep discovery order and may
    overlap.

    Raises:
        InvalidInputError: ``candidate`` is not a string.
    """
    hp = parameters or DEFAULT_ENHANCER_PARAMETERS
    candidate = require_text(candidate)
    return (
        _cliche_suggestions(candidate)
        + _synonym_suggestions(candidate, hp)
        + _structure_suggestions(candidate, hp)
        + _citation_suggestions(candidate, hp)
    )


def paraphrase_text(text: str) -> str:
    text = require_text(text, "text")
    for pattern, replacement in _PARAPHRASE_RULES:
        text = pattern.sub(replacement, text)
    return text


def humanize_text(text: str, parameters: EnhancerParameters | None = None) -> str:
    """Contract every third occurrence of common long forms ("it is" -> "it's").

    A long form is only touched when it occurs at least three times, so short
    texts are left alone. Replacement keeps the capitalization of the first
    letter.

    This differs from a plain case-insensitive substring replace: only whole
    words match, and "It is" becomes "It's" rather than "it's".
    """
    hp = parameters or DEFAULT_ENHANCER_PARAMETERS
    text = require_text(text, "text")
    for pattern, contracted in _CONTRACTIONS:
        if len(pattern.findall(text)) < hp.contraction_min_occurrences:
            continue
        seen = 0

        def _replace(m: re.Match[str]) -> str:
            nonlocal seen
            seen += 1
            if seen % hp.contraction_every:
                return m.group(0)
            return contracted[0].upper() + contracted[1:] if m.group(0)[0].isupper() else contracted

        text = pattern.sub(_replace, text)
    return text
