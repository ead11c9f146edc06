"""Transcript normalization for command detection.

Two passes, applied in order:
    1. strip_filler_words: lowercase, replace each filler word with a space
    2. collapse_whitespace: squeeze whitespace runs, trim
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from aura.voice.config_models import DEFAULT_FILLER_WORDS

_WHITESPACE_RUN = re.compile(r"\s{2,}")


@lru_cache(maxsize=32)
def _compile_filler_pattern(words: tuple[str, ...]) -> re.Pattern | None:
    if not words:
        return None
    # Longest first so "okay" is tried before "ok" and "can you" before "can"
    ordered = sorted(set(words), key=len, reverse=True)
    alternation = "|".join(r"\s+".join(re.escape(part) for part in w.split()) for w in ordered)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def build_filler_pattern(filler_words: Iterable[str]) -> re.Pattern | None:
    """Compile a word-boundary pattern matching any of the filler words."""
    words = tuple(w.strip().lower() for w in filler_words if w and w.strip())
    return _compile_filler_pattern(words)


def strip_filler_words(
    text: str,
    filler_words: Iterable[str] = DEFAULT_FILLER_WORDS,
) -> str:
    """Lowercase text and replace every filler word with a single space.

    Neighbouring words are never joined together; whitespace is left
    uncollapsed for the next pass.
    """
    lowered = text.lower()
    pattern = build_filler_pattern(filler_words)
    if pattern is None:
        return lowered
    return pattern.sub(" ", lowered)


def collapse_whitespace(text: str) -> str:
    """Squeeze runs of two or more whitespace characters and trim."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def normalize_transcript(
    text: str,
    filler_words: Iterable[str] = DEFAULT_FILLER_WORDS,
) -> str:
    return collapse_whitespace(strip_filler_words(text, filler_words))


def count_words(text: str) -> int:
    return len(text.split())
