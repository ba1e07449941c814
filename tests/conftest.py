import os
import random

import pytest

# 창이나 사운드 장치 없이도 pygame을 쓸 수 있도록 더미 드라이버를 사용한다.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from best_score import BestScoreStore  # noqa: E402


class FakeTimer:
    """Records arm/cancel calls instead of scheduling pygame events."""

    def __init__(self):
        self.interval_ms = None
        self.calls = []

    @property
    def armed(self):
        return self.interval_ms is not None

    def arm(self, interval_ms):
        self.calls.append(("arm", interval_ms))
        self.interval_ms = interval_ms

    def cancel(self):
        self.calls.append(("cancel", None))
        self.interval_ms = None


@pytest.fixture
def fake_timer():
    return FakeTimer()


@pytest.fixture
def score_file(tmp_path):
    return tmp_path / ".snake_best_score"


@pytest.fixture
def store(score_file):
    return BestScoreStore(score_file)


@pytest.fixture
def frames():
    return []


@pytest.fixture
def game(store, fake_timer, frames):
    from snake_game import SnakeGame

    return SnakeGame(
        width=20,
        height=20,
        best_score=store,
        timer=fake_timer,
        rng=random.Random(1234),
        render=frames.append,
    )
