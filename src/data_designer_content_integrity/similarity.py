"""Similarity engine: copying from reference texts and repetition within a text.

Two passes catch copying from sources. Overlapping character chunks are compared
with a normalized bigram similarity, which finds paraphrases of whole passages.
Exact 5-word n-grams are then looked up in each source, which finds short
verbatim copies that a chunk comparison averages away or that are too short to
be chunked at all.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Literal

from data_designer_content_integrity.errors import require_sources, require_text
from data_designer_content_integrity.text import Span, mean, split_sentences, string_similarity, word_spans

Severity = Literal["low", "medium", "high"]

# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimilarityParameters:
    """Thresholds and sizes used by the similarity checks."""

    similarity_threshold: float = 0.70
    min_phrase_length: int = 50
    chunk_size: int = 200
    chunk_overlap: float = 0.30
    ngram_size: int = 5
    min_sentence_chars: int = 20

    source_flag_threshold: float = 15.0
    self_flag_threshold: float = 20.0

    critical_score: float = 30.0
    warning_score: float = 15.0
    minor_score: float = 5.0
    many_matches: int = 10

    @property
    def chunk_stride(self) -> int:
        return self.chunk_size - int(self.chunk_size * self.chunk_overlap)


DEFAULT_SIMILARITY_PARAMETERS = SimilarityParameters()

NGRAM_SIMILARITY = 100.0

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimilarityMatch:
    matched_text: str
    source_label: str
    similarity_percent: float
    start_index: int
    end_index: int

    def to_payload(self) -> dict[str, object]:
        return {
            "matched_text": self.matched_text,
            "source_label": self.source_label,
            "similarity_percent": round(self.similarity_percent, 2),
            "start_index": self.start_index,
            "end_index": self.end_index,
        }


@dataclass(frozen=True)
class SimilarityResult:
    overall_score_percent: float
    matches: tuple[SimilarityMatch, ...]
    is_flagged: bool

    @classmethod
    def empty(cls) -> SimilarityResult:
        return cls(overall_score_percent=0.0, matches=(), is_flagged=False)

    def to_payload(self) -> dict[str, object]:
        return {
            "overall_score_percent": round(self.overall_score_percent, 2),
            "matches": [m.to_payload() for m in self.matches],
            "is_flagged": self.is_flagged,
        }


@dataclass(frozen=True)
class PatternReport:
    pattern: str
    count: int
    severity: Severity

    def to_payload(self) -> dict[str, object]:
        return {"pattern": self.pattern, "count": self.count, "severity": self.severity}


# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

_COMMON_PATTERNS: list[tuple[str, re.Pattern[str], Severity]] = [
    ("vague attribution", re.compile(r"according to (research|studies|experts)", re.IGNORECASE), "medium"),
    ("unsupported claim", re.compile(r"it is (widely|generally|commonly) (known|accepted|believed)", re.IGNORECASE), "medium"),
    ("weak qualifiers", re.compile(r"\b(very|extremely|highly|quite|rather|somewhat)\b", re.IGNORECASE), "low"),
    ("duplicate conclusion", re.compile(r"\bin conclusion\b.*\bin conclusion\b", re.IGNORECASE | re.DOTALL), "high"),
    ("copy-paste indicators", re.compile(r"\b(copy|paste|duplicate)\b", re.IGNORECASE), "high"),
]

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _chunks(text: str, hp: SimilarityParameters) -> list[Span]:
    stride = max(1, hp.chunk_stride)
    chunks = []
    for start in range(0, len(text), stride):
        piece = text[start : start + hp.chunk_size]
        if len(piece) >= hp.min_phrase_length:
            chunks.append(Span(piece, start, start + len(piece)))
    return chunks


def _source_label(index: int) -> str:
    return f"Source {index + 1}"


def _chunk_matches(candidate: str, sources: tuple[str, ...], hp: SimilarityParameters) -> list[SimilarityMatch]:
    matches = []
    chunks = _chunks(candidate, hp)
    for k, source in enumerate(sources):
        source_chunks = _chunks(source, hp)
        for chunk in chunks:
            for source_chunk in source_chunks:
                similarity = string_similarity(chunk.text, source_chunk.text)
                if similarity >= hp.similarity_threshold:
                    matches.append(SimilarityMatch(chunk.text, _source_label(k), similarity * 100, chunk.start, chunk.end))
    return matches


def _ngram_matches(candidate: str, sources: tuple[str, ...], hp: SimilarityParameters) -> list[SimilarityMatch]:
    lowered_sources = [s.lower() for s in sources]
    n = hp.ngram_size
    matches = []
    for sentence in split_sentences(candidate, hp.min_sentence_chars):
        words = word_spans(sentence.text, sentence.start)
        for i in range(len(words) - n + 1):
            gram = " ".join(w.text for w in words[i : i + n])
            needle = gram.lower()
            for k, source in enumerate(lowered_sources):
                if needle in source:
                    matches.append(SimilarityMatch(gram, _source_label(k), NGRAM_SIMILARITY, words[i].start, words[i + n - 1].end))
    return matches


def _deduplicate(matches: Iterable[SimilarityMatch]) -> list[SimilarityMatch]:
    seen: set[tuple[str, float]] = set()
    out: list[SimilarityMatch] = []
    for match in matches:
        key = (match.matched_text, match.similarity_percent)
        if key not in seen:
            seen.add(key)
            out.append(match)
    return out


def _overall_score(matches: list[SimilarityMatch], total_length: int) -> float:
    if not matches or total_length <= 0:
        return 0.0
    matched_chars = sum(len(m.matched_text) for m in matches)
    coverage = matched_chars / total_length * 100
    return min(100.0, (coverage + mean([m.similarity_percent for m in matches])) / 2)


def _result(matches: list[SimilarityMatch], total_length: int, flag_threshold: float) -> SimilarityResult:
    score = _overall_score(matches, total_length)
    ordered = sorted(matches, key=lambda m: -m.similarity_percent)
    return SimilarityResult(overall_score_percent=score, matches=tuple(ordered), is_flagged=score > flag_threshold)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def check_against_sources(
    candidate: str,
    sources: Iterable[str] = (),
    parameters: SimilarityParameters | None = None,
) -> SimilarityResult:
    """Score how much of ``candidate`` is copied or closely paraphrased from ``sources``.

    Args:
        candidate: The text under evaluation.
        sources: Reference texts to compare against.
        parameters: Optional threshold overrides.

    Returns:
        SimilarityResult with matches sorted by descending similarity. Flagged
        when the overall score is strictly greater than
        ``source_flag_threshold`` (15).

    Raises:
        InvalidInputError: ``candidate`` is not a string or ``sources`` is not a
            sequence of strings.
    """
    hp = parameters or DEFAULT_SIMILARITY_PARAMETERS
    candidate = require_text(candidate)
    source_texts = require_sources(sources)
    if not candidate or not source_texts:
        return SimilarityResult.empty()

    matches = _chunk_matches(candidate, source_texts, hp) + _ngram_matches(candidate, source_texts, hp)
    return _result(_deduplicate(matches), len(candidate), hp.source_flag_threshold)


def check_self_similarity(candidate: str, parameters: SimilarityParameters | None = None) -> SimilarityResult:
    """Find near-duplicate sentences within ``candidate``.

    Every unordered pair of distinct sentences is compared once. A match's text
    is the earlier sentence and its label names the later one. Flagged above
    ``self_flag_threshold`` (20), which tolerates more than external copying
    because restating a topic sentence is sometimes legitimate.
    """
    hp = parameters or DEFAULT_SIMILARITY_PARAMETERS
    candidate = require_text(candidate)
    sentences = split_sentences(candidate, hp.min_sentence_chars)

    matches = []
    for i, first in enumerate(sentences):
        for j in range(i + 1, len(sentences)):
            similarity = string_similarity(first.text, sentences[j].text)
            if similarity >= hp.similarity_threshold:
                matches.append(SimilarityMatch(first.text, f"Sentence {j + 1}", similarity * 100, first.start, first.end))
    return _result(matches, len(candidate), hp.self_flag_threshold)


def detect_common_patterns(candidate: str) -> list[PatternReport]:
    """Count phrasing that commonly accompanies unattributed or pasted material."""
    candidate = require_text(candidate)
    reports = []
    for name, pattern, severity in _COMMON_PATTERNS:
        count = sum(1 for _ in pattern.finditer(candidate))
        if count > 0:
            reports.append(PatternReport(name, count, severity))
    return reports


def generate_similarity_suggestions(
    result: SimilarityResult,
    parameters: SimilarityParameters | None = None,
) -> list[str]:
    hp = parameters or DEFAULT_SIMILARITY_PARAMETERS
    suggestions = []
    if result.is_flagged:
        suggestions.append("High similarity detected. Consider paraphrasing the highlighted sections.")
    if len(result.matches) > hp.many_matches:
        suggestions.append("Multiple matches found. Review and rewrite similar passages in your own words.")

    score = result.overall_score_percent
    if score > hp.critical_score:
        suggestions.append(f"Critical: over {hp.critical_score:g}% similarity. Significant rewriting required.")
    elif score > hp.warning_score:
        suggestions.append(f"Warning: over {hp.warning_score:g}% similarity. Some rewriting recommended.")
    elif score > hp.minor_score:
        suggestions.append("Good: low similarity detected. Minor adjustments may help.")
    else:
        suggestions.append("Excellent: very low similarity. Content appears original.")
    return suggestions
