"""Player-facing game state, projected from a song and a guess list.

Nothing here is stored: the state is rebuilt from the full list of
guesses on every read, so two reads of the same guesses always agree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from . import policy
from .config import EngineConfig
from .ledger import GuessLedger
from .masking import mask_song, update_masked_text
from .matching import count_total_hits, normalize_word
from .models import GameState, Guess, GuessHits, Song
from .progress import calculate_game_progress
from .repository import GuessRepository

logger = logging.getLogger(__name__)


def found_words(guesses: Iterable[Guess]) -> set[str]:
    """Normalized forms of every valid guess."""
    words = {normalize_word(g.word) for g in guesses if g.valid}
    words.discard("")
    return words


def compute_game_state(
    song: Song,
    guesses: list[Guess],
    config: EngineConfig | None = None,
) -> GameState:
    """Project *song* and a player's *guesses* (newest first) into a GameState."""
    config = config or EngineConfig.from_env()
    masked = mask_song(song)
    found = found_words(guesses)

    progress = calculate_game_progress(
        found, masked.title, masked.artist, masked.lyrics, config
    )
    gates = policy.reveals(
        progress.title, progress.artist, progress.lyrics, config.reveal_thresholds
    )
    hits = [
        GuessHits(
            word=g.word,
            valid=g.valid,
            created_at=g.created_at,
            hits=count_total_hits(g.word, masked.sections()),
        )
        for g in guesses
    ]
    logger.debug(
        "[state] %d found words, complete=%s", len(found), progress.is_game_complete
    )
    return GameState(
        masked_title=update_masked_text(masked.title, found),
        masked_artist=update_masked_text(masked.artist, found),
        masked_lyrics=update_masked_text(masked.lyrics, found),
        found_words=found,
        progress=progress,
        is_complete=progress.is_game_complete,
        reveals=gates,
        guesses=hits,
        song=song if progress.is_game_complete else None,
    )


class GameStateService:
    def __init__(
        self, repository: GuessRepository, config: EngineConfig | None = None
    ) -> None:
        self._ledger = GuessLedger(repository)
        self._config = config or EngineConfig.from_env()

    def get_game_state(self, game_id: str, player_id: str) -> GameState:
        game, guesses = self._ledger.load_player_guesses(game_id, player_id)
        return compute_game_state(game.song, guesses, self._config)
