"""Exact, case-insensitive word matching."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .masking import MaskedContent
from .tokenizer import Token, normalize_word

__all__ = [
    "contains_word",
    "count_hits",
    "count_total_hits",
    "is_exact_match",
    "normalize_word",
]


def is_exact_match(guess: str, target: str) -> bool:
    """True iff both sides normalize to the same non-empty word.

    "HELLO" matches "hello" and " hello! ", but "hell" never matches
    "hello": partial or substring matches do not count.
    """
    norm = normalize_word(guess)
    return bool(norm) and norm == normalize_word(target)


def count_hits(word: str, content: MaskedContent | Sequence[Token]) -> int:
    """Number of guessable occurrences of *word* in *content*."""
    norm = normalize_word(word)
    if not norm:
        return 0
    if isinstance(content, MaskedContent):
        return sum(1 for w in content.words if w.word == norm)
    return sum(
        1 for tok in content if tok.is_to_guess and normalize_word(tok.value) == norm
    )


def count_total_hits(word: str, sections: Iterable[MaskedContent]) -> int:
    return sum(count_hits(word, section) for section in sections)


def contains_word(word: str, sections: Iterable[MaskedContent]) -> bool:
    return any(
        is_exact_match(word, w.word) for section in sections for w in section.words
    )
