"""Completion and reveal rules.

Pure functions of the current section progress. Found-word sets only
grow, so every rule here is monotonic: once satisfied it stays satisfied.
"""

from __future__ import annotations

from .config import RevealThresholds
from .models import Reveals, SectionProgress


def is_game_complete(
    title: SectionProgress,
    artist: SectionProgress,
    lyrics: SectionProgress,
    lyrics_threshold: float = 0.8,
) -> bool:
    """Lyrics at or above the threshold, or title and artist fully found.

    Empty sections never count toward completion and are left out of the
    title/artist condition, which still needs at least one non-empty
    section to hold.
    """
    if not lyrics.is_empty and lyrics.percent / 100 >= lyrics_threshold:
        return True
    named = [s for s in (title, artist) if not s.is_empty]
    return bool(named) and all(s.percent == 100 for s in named)


def overall_progress(
    title: SectionProgress, artist: SectionProgress, lyrics: SectionProgress
) -> float:
    """max(title+artist combined, lyrics) as a fraction in [0, 1]."""
    named_total = title.total + artist.total
    named = (title.found + artist.found) / named_total if named_total else 0.0
    return max(named, lyrics.fraction)


def reveals(
    title: SectionProgress,
    artist: SectionProgress,
    lyrics: SectionProgress,
    thresholds: RevealThresholds,
) -> Reveals:
    progress = overall_progress(title, artist, lyrics)
    return Reveals(
        audio_preview=progress >= thresholds.spotify,
        full_lyrics=not lyrics.is_empty and progress >= thresholds.genius,
    )
