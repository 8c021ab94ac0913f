"""Guess acceptance and lookup.

The ledger owns the business rules around a guess; storage and its
atomicity belong to the injected repository.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError

from .errors import DuplicateGuessError, GameNotFoundError, InvalidWordError, ValidationError
from .masking import mask_song
from .matching import contains_word, normalize_word
from .models import Game, Guess, GuessRequest, PlayerGuessesRequest
from .repository import DuplicateKeyError, GuessRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate(model, **data):
    """Parse *data* with a pydantic *model*, raising our ValidationError."""
    try:
        return model(**data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(p) for p in first["loc"])
        raise ValidationError(f"{field}: {first['msg']}") from exc


class GuessLedger:
    def __init__(
        self,
        repository: GuessRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def get_game(self, game_id: str) -> Game:
        game = self._repository.find_game(game_id)
        if game is None or game.song is None:
            raise GameNotFoundError(game_id)
        return game

    def submit_guess(self, game_id: str, player_id: str, raw_word: str) -> Guess:
        """Accept *raw_word* as a guess of *player_id* for *game_id*.

        Raises ValidationError, GameNotFoundError, InvalidWordError or
        DuplicateGuessError, in that order of checking. A uniqueness
        violation reported by the store on insert is the same outcome as
        the duplicate pre-check failing.
        """
        req = validate(GuessRequest, game_id=game_id, player_id=player_id, word=raw_word)
        game = self.get_game(req.game_id)

        if not contains_word(req.word, mask_song(game.song).sections()):
            raise InvalidWordError(req.word)

        norm = normalize_word(req.word)
        if self._repository.find_guess(req.game_id, req.player_id, norm) is not None:
            raise DuplicateGuessError(req.word)

        guess = Guess(
            game_id=req.game_id,
            player_id=req.player_id,
            word=req.word,
            created_at=self._clock(),
            valid=True,
        )
        try:
            stored = self._repository.insert_guess(guess, norm)
        except DuplicateKeyError as exc:
            logger.info(
                "[ledger] Concurrent duplicate for %s/%s: %r",
                req.game_id,
                req.player_id,
                norm,
            )
            raise DuplicateGuessError(req.word) from exc

        logger.info("[ledger] Accepted %r for %s/%s", norm, req.game_id, req.player_id)
        return stored

    def load_player_guesses(
        self, game_id: str, player_id: str
    ) -> tuple[Game, list[Guess]]:
        """Return the game and the player's guesses for it, newest first."""
        req = validate(PlayerGuessesRequest, game_id=game_id, player_id=player_id)
        game = self.get_game(req.game_id)
        return game, list(self._repository.list_guesses(req.game_id, req.player_id))

    def get_player_guesses(self, game_id: str, player_id: str) -> list[Guess]:
        _, guesses = self.load_player_guesses(game_id, player_id)
        return guesses
