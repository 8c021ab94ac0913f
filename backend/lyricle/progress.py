"""Per-section and whole-game reveal progress."""

from __future__ import annotations

from collections.abc import Iterable

from . import policy
from .config import EngineConfig
from .masking import MaskedContent
from .models import GameProgress, SectionProgress
from .tokenizer import normalize_word


def _percent(found: int, total: int) -> int:
    # Round half up on exact integers: 1/8 -> 13, 1/200 -> 1.
    if total == 0:
        return 0
    return (found * 200 + total) // (2 * total)


def _normalized(found_words: Iterable[str]) -> set[str]:
    return {norm for norm in map(normalize_word, found_words) if norm}


def calculate_section_progress(
    found_words: Iterable[str], content: MaskedContent | None
) -> SectionProgress:
    """Count distinct words of *content* already found.

    A missing or word-less section reports ``{found: 0, total: 0, percent: 0}``.
    """
    if content is None:
        return SectionProgress()
    distinct = content.distinct_words()
    found = len(distinct & _normalized(found_words))
    total = len(distinct)
    return SectionProgress(found=found, total=total, percent=_percent(found, total))


def calculate_game_progress(
    found_words: Iterable[str],
    title: MaskedContent,
    artist: MaskedContent,
    lyrics: MaskedContent | None,
    config: EngineConfig | None = None,
) -> GameProgress:
    config = config or EngineConfig.from_env()
    found = _normalized(found_words)
    title_progress = calculate_section_progress(found, title)
    artist_progress = calculate_section_progress(found, artist)
    lyrics_progress = calculate_section_progress(found, lyrics)
    return GameProgress(
        title=title_progress,
        artist=artist_progress,
        lyrics=lyrics_progress,
        is_game_complete=policy.is_game_complete(
            title_progress,
            artist_progress,
            lyrics_progress,
            lyrics_threshold=config.lyrics_completion_threshold,
        ),
    )
