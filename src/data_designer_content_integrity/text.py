# Tokenization, normalization and small statistics shared by the analyzers.
#
# Everything here is a pure function over strings. Offsets are character
# offsets into the text that was passed in, so callers can point back at the
# original span.

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

_SENTENCE_BODY_RE = re.compile(r"[^.!?]+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\n+")
_PUNCTUATION_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_WORD_TOKEN_RE = re.compile(r"\b[a-z]+\b")
_NON_SPACE_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class Span:
    text: str
    start: int
    end: int


def split_sentences(text: str, min_chars: int = 0) -> list[Span]:
    """Split on runs of ``.``, ``!`` and ``?``.

    Each sentence is trimmed; sentences whose trimmed length is not greater
    than ``min_chars`` are dropped (``min_chars=0`` only drops empty ones).
    """
    sentences = []
    for m in _SENTENCE_BODY_RE.finditer(text):
        raw = m.group(0)
        stripped = raw.strip()
        if len(stripped) <= min_chars:
            continue
        start = m.start() + (len(raw) - len(raw.lstrip()))
        sentences.append(Span(stripped, start, start + len(stripped)))
    return sentences


def split_paragraphs(text: str, min_chars: int = 0) -> list[str]:
    return [p for p in _PARAGRAPH_SPLIT_RE.split(text) if len(p.strip()) > min_chars]


def split_words(text: str) -> list[str]:
    """Whitespace-delimited tokens, punctuation attached."""
    return text.split()


def word_spans(text: str, offset: int = 0) -> list[Span]:
    return [Span(m.group(0), offset + m.start(), offset + m.end()) for m in _NON_SPACE_RE.finditer(text)]


def word_tokens(text: str) -> list[str]:
    """Lower-cased alphabetic tokens. ``today's`` yields ``today`` and ``s``."""
    return _WORD_TOKEN_RE.findall(text.lower())


def first_word(sentence: str) -> str:
    parts = sentence.split()
    return parts[0].lower() if parts else ""


def normalize(text: str) -> str:
    """Case-fold, strip punctuation and collapse whitespace."""
    text = _PUNCTUATION_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def dice_coefficient(first: str, second: str) -> float:
    """Sørensen-Dice coefficient over character bigrams, whitespace ignored.

    Identical strings score 1.0, including two strings that are empty once
    whitespace is removed (so punctuation-only sentences compare as equal after
    :func:`normalize`). If either side has fewer than two characters
    the score is 0.0. Bigram multiplicity is respected, so ``"aaaa"`` against
    ``"aa"`` only shares one bigram.
    """
    first = _WHITESPACE_RE.sub("", first)
    second = _WHITESPACE_RE.sub("", second)
    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    first_bigrams = Counter(first[i : i + 2] for i in range(len(first) - 1))
    intersection = 0
    for i in range(len(second) - 1):
        bigram = second[i : i + 2]
        if first_bigrams[bigram] > 0:
            first_bigrams[bigram] -= 1
            intersection += 1
    return (2.0 * intersection) / (len(first) + len(second) - 2)


def string_similarity(first: str, second: str) -> float:
    return dice_coefficient(normalize(first), normalize(second))


def mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def variance(values: list[float]) -> float:
    """Population variance; 0.0 for an empty list."""
    if not values:
        return 0.0
    m = mean(values)
    return sum((v - m) ** 2 for v in values) / len(values)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))
