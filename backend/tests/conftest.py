import itertools
from datetime import datetime, timedelta, timezone

import pytest
from lyricle.ledger import GuessLedger
from lyricle.models import Game, Song
from lyricle.repository import InMemoryGuessRepository

HELLO = Song(
    title="Hello World",
    artist="Adele",
    lyrics="Hello, it's me\nI was wondering if after all these years",
    preview_url="https://p.scdn.co/mp3-preview/hello",
)

INSTRUMENTAL = Song(title="Flight of the Bumblebee", artist="Rimsky Korsakov", lyrics=None)


@pytest.fixture()
def clock():
    """Deterministic clock advancing one second per call."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    ticks = itertools.count()
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture()
def repository():
    return InMemoryGuessRepository(
        games=[
            Game(id="g1", date="2024-01-01", song=HELLO),
            Game(id="g2", date="2024-01-02", song=INSTRUMENTAL),
            Game(id="g-empty", date="2024-01-03", song=None),
        ]
    )


@pytest.fixture()
def ledger(repository, clock):
    return GuessLedger(repository, clock=clock)
