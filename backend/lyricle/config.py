"""Centralised engine configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field

LYRICS_COMPLETION_THRESHOLD: float = float(
    os.getenv("LYRICS_COMPLETION_THRESHOLD", "0.80")
)
REVEAL_SPOTIFY_THRESHOLD: float = float(os.getenv("REVEAL_SPOTIFY_THRESHOLD", "0.50"))
REVEAL_GENIUS_THRESHOLD: float = float(os.getenv("REVEAL_GENIUS_THRESHOLD", "0.75"))


class RevealThresholds(BaseModel):
    """Overall-progress fractions at which auxiliary content unlocks."""

    spotify: float = Field(default=0.5, ge=0.0, le=1.0)  # audio preview
    genius: float = Field(default=0.75, ge=0.0, le=1.0)  # full lyrics


class EngineConfig(BaseModel):
    lyrics_completion_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    reveal_thresholds: RevealThresholds = Field(default_factory=RevealThresholds)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        return cls(
            lyrics_completion_threshold=LYRICS_COMPLETION_THRESHOLD,
            reveal_thresholds=RevealThresholds(
                spotify=REVEAL_SPOTIFY_THRESHOLD,
                genius=REVEAL_GENIUS_THRESHOLD,
            ),
        )
