"""Persistence boundary for games and guesses.

The engine never talks to a database itself. Callers inject any object
satisfying ``GuessRepository``; the backing store must enforce uniqueness
of ``(game_id, player_id, normalized word)`` and signal a violation with
``DuplicateKeyError``.
"""

from __future__ import annotations

import threading
from typing import Protocol

from .models import Game, Guess


class DuplicateKeyError(Exception):
    """Raised by a store when an insert violates the guess unique key."""


GuessKey = tuple[str, str, str]


class GuessRepository(Protocol):
    """Protocol for guess storage backends."""

    def find_game(self, game_id: str) -> Game | None:
        ...

    def find_guess(self, game_id: str, player_id: str, word: str) -> Guess | None:
        """Look up a guess by its normalized *word*."""
        ...

    def insert_guess(self, guess: Guess, normalized_word: str) -> Guess:
        """Store *guess* atomically; raise DuplicateKeyError on a key clash."""
        ...

    def list_guesses(self, game_id: str, player_id: str) -> list[Guess]:
        """All guesses of a player for a game, newest first."""
        ...


class InMemoryGuessRepository:
    """Thread-safe in-process store, used for tests and embedding."""

    def __init__(self, games: list[Game] | None = None) -> None:
        self._lock = threading.Lock()
        self._games: dict[str, Game] = {g.id: g for g in games or []}
        self._guesses: dict[GuessKey, Guess] = {}
        self._order: list[GuessKey] = []

    def add_game(self, game: Game) -> None:
        with self._lock:
            self._games[game.id] = game

    def find_game(self, game_id: str) -> Game | None:
        return self._games.get(game_id)

    def find_guess(self, game_id: str, player_id: str, word: str) -> Guess | None:
        return self._guesses.get((game_id, player_id, word))

    def insert_guess(self, guess: Guess, normalized_word: str) -> Guess:
        key = (guess.game_id, guess.player_id, normalized_word)
        with self._lock:
            if key in self._guesses:
                raise DuplicateKeyError(key)
            self._guesses[key] = guess
            self._order.append(key)
        return guess

    def list_guesses(self, game_id: str, player_id: str) -> list[Guess]:
        with self._lock:
            keys = [k for k in self._order if k[0] == game_id and k[1] == player_id]
            return [self._guesses[k] for k in reversed(keys)]
