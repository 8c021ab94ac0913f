from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class Song(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    artist: str
    lyrics: str | None = None             # None for instrumental tracks
    preview_url: str | None = None
    album_cover: str | None = None


class Game(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    date: str                             # YYYY-MM-DD
    song: Song | None = None              # unset until a song is scheduled


class Guess(BaseModel):
    model_config = ConfigDict(frozen=True)

    game_id: str
    player_id: str
    word: str                             # trimmed, as submitted
    created_at: datetime
    valid: bool = True


class GuessRequest(BaseModel):
    game_id: NonEmptyStr
    player_id: NonEmptyStr
    word: NonEmptyStr


class PlayerGuessesRequest(BaseModel):
    game_id: NonEmptyStr
    player_id: NonEmptyStr


class SectionProgress(BaseModel):
    found: int = 0
    total: int = 0
    percent: int = 0                      # 0..100, 0 for an empty section

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @property
    def fraction(self) -> float:
        return self.found / self.total if self.total else 0.0


class GameProgress(BaseModel):
    title: SectionProgress
    artist: SectionProgress
    lyrics: SectionProgress
    is_game_complete: bool


class Reveals(BaseModel):
    audio_preview: bool = False
    full_lyrics: bool = False


class GuessHits(BaseModel):
    word: str
    valid: bool
    created_at: datetime
    hits: int                             # occurrences across title, artist and lyrics


class GameState(BaseModel):
    masked_title: str
    masked_artist: str
    masked_lyrics: str
    found_words: set[str] = Field(default_factory=set)
    progress: GameProgress
    is_complete: bool
    reveals: Reveals = Field(default_factory=Reveals)
    guesses: list[GuessHits] = Field(default_factory=list)  # newest first
    song: Song | None = None              # only once the game is complete
