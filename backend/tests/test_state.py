"""Tests for the game state projection."""

from datetime import datetime, timezone

import pytest
from lyricle.config import EngineConfig
from lyricle.errors import GameNotFoundError, ValidationError
from lyricle.models import Guess
from lyricle.repository import InMemoryGuessRepository
from lyricle.state import GameStateService, compute_game_state, found_words

from conftest import HELLO, INSTRUMENTAL


class CountingRepository(InMemoryGuessRepository):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.game_lookups = 0

    def find_game(self, game_id):
        self.game_lookups += 1
        return super().find_game(game_id)


CONFIG = EngineConfig()


def _guesses(*words, valid=True):
    at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        Guess(game_id="g1", player_id="p1", word=w, created_at=at, valid=valid)
        for w in words
    ]


class TestFoundWords:
    def test_normalizes(self):
        assert found_words(_guesses("Hello", " WORLD ")) == {"hello", "world"}

    def test_ignores_invalid(self):
        assert found_words(_guesses("hello", valid=False)) == set()


class TestComputeGameState:
    def test_no_guesses(self):
        state = compute_game_state(HELLO, [], CONFIG)
        assert state.masked_title == "_____ _____"
        assert state.masked_artist == "_____"
        assert state.masked_lyrics == "_____, __'_ __\n_ ___ _________ __ _____ ___ _____ _____"
        assert state.found_words == set()
        assert not state.is_complete
        assert state.song is None
        assert state.guesses == []

    def test_partial_reveal(self):
        state = compute_game_state(HELLO, _guesses("hello"), CONFIG)
        assert state.masked_title == "Hello _____"
        assert state.masked_lyrics.startswith("Hello, __'_ __\n")
        assert state.found_words == {"hello"}
        assert state.progress.title.percent == 50
        assert not state.reveals.audio_preview

    def test_hit_counts(self):
        state = compute_game_state(HELLO, _guesses("hello", "adele"), CONFIG)
        assert [(g.word, g.hits) for g in state.guesses] == [("hello", 2), ("adele", 1)]

    def test_complete_via_title_and_artist(self):
        state = compute_game_state(HELLO, _guesses("hello", "world", "adele"), CONFIG)
        assert state.is_complete
        assert state.progress.is_game_complete
        assert state.song == HELLO
        assert state.reveals.audio_preview

    def test_invalid_guesses_reveal_nothing(self):
        state = compute_game_state(HELLO, _guesses("hello", valid=False), CONFIG)
        assert state.masked_title == "_____ _____"

    def test_instrumental(self):
        state = compute_game_state(INSTRUMENTAL, _guesses("flight"), CONFIG)
        assert state.masked_lyrics == ""
        assert (state.progress.lyrics.total, state.progress.lyrics.percent) == (0, 0)
        assert not state.reveals.full_lyrics

    def test_projection_is_repeatable(self):
        guesses = _guesses("me", "years", "adele")
        assert compute_game_state(HELLO, guesses, CONFIG) == compute_game_state(
            HELLO, guesses, CONFIG
        )


class TestGameStateService:
    def test_reflects_ledger(self, ledger, repository):
        ledger.submit_guess("g1", "p1", "hello")
        ledger.submit_guess("g1", "p1", "world")
        state = GameStateService(repository, CONFIG).get_game_state("g1", "p1")
        assert state.masked_title == "Hello World"
        assert [g.word for g in state.guesses] == ["world", "hello"]

    def test_other_players_do_not_leak(self, ledger, repository):
        ledger.submit_guess("g1", "p2", "hello")
        state = GameStateService(repository, CONFIG).get_game_state("g1", "p1")
        assert state.masked_title == "_____ _____"

    def test_single_game_lookup(self, repository):
        counting = CountingRepository(games=[repository.find_game("g1")])
        GameStateService(counting, CONFIG).get_game_state(" g1 ", "p1")
        assert counting.game_lookups == 1

    def test_unknown_game(self, repository):
        with pytest.raises(GameNotFoundError):
            GameStateService(repository, CONFIG).get_game_state("missing", "p1")

    def test_validation(self, repository):
        with pytest.raises(ValidationError):
            GameStateService(repository, CONFIG).get_game_state("g1", " ")
