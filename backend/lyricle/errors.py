"""Business-rule errors raised by the engine.

Every error is deterministic and non-retryable. ``status`` is a hint for
the API layer that maps these to responses; the engine itself never
looks at it.
"""

from __future__ import annotations


class LyricleError(Exception):
    code: str = "INTERNAL_ERROR"
    status: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.code, "message": self.message}


class ValidationError(LyricleError):
    """Malformed or missing input (empty ids, empty word)."""

    code = "VALIDATION_ERROR"
    status = 400
    default_message = "Validation error"


class NotFoundError(LyricleError):
    code = "NOT_FOUND"
    status = 404
    default_message = "Not found"


class GameNotFoundError(NotFoundError):
    code = "GAME_NOT_FOUND"

    def __init__(self, game_id: str) -> None:
        self.game_id = game_id
        super().__init__(f"Game or song not found: {game_id}")


class InvalidWordError(LyricleError):
    code = "INVALID_WORD"
    status = 400
    default_message = "Word not found in lyrics"

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__()


class DuplicateGuessError(LyricleError):
    code = "DUPLICATE_GUESS"
    status = 400
    default_message = "Player has already submitted this word as a guess for this game"

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__()
