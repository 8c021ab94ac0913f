"""Masked renderings of song text.

A word is masked by replacing each of its letters/digits with ``_``;
every other character keeps its place, so a masked string always has the
same length as its source.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .models import Song
from .tokenizer import Word, extract_words, is_word_char, normalize_word

MASK_CHAR = "_"


@dataclass(frozen=True)
class MaskedContent:
    original: str
    masked_text: str
    words: list[Word] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.words

    def distinct_words(self) -> set[str]:
        return {w.word for w in self.words}


@dataclass(frozen=True)
class MaskedSong:
    title: MaskedContent
    artist: MaskedContent
    lyrics: MaskedContent

    def sections(self) -> tuple[MaskedContent, MaskedContent, MaskedContent]:
        return self.title, self.artist, self.lyrics


def mask(text: str, words: Iterable[Word]) -> str:
    chars = list(text)
    for w in sorted(words, key=lambda w: w.start_index, reverse=True):
        for i in range(w.start_index, min(w.end_index, len(chars) - 1) + 1):
            if is_word_char(chars[i]):
                chars[i] = MASK_CHAR
    return "".join(chars)


def create_masked_text(text: str | None) -> MaskedContent:
    if not text:
        return MaskedContent(original="", masked_text="", words=[])
    words = extract_words(text)
    return MaskedContent(original=text, masked_text=mask(text, words), words=words)


def update_masked_text(content: MaskedContent, revealed_words: Iterable[str]) -> str:
    """Render *content* with only *revealed_words* left visible.

    Always recomputed from the original text, so the result depends only
    on the reveal set and never on earlier calls.
    """
    revealed = {normalize_word(w) for w in revealed_words}
    hidden = [w for w in content.words if w.word not in revealed]
    return mask(content.original, hidden)


def mask_song(song: Song) -> MaskedSong:
    return MaskedSong(
        title=create_masked_text(song.title),
        artist=create_masked_text(song.artist),
        lyrics=create_masked_text(song.lyrics),
    )
