import os

# pygame без окна и звука
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from engine import GameEngine
from grid import GridModel
from timer import ManualTimer


class Recorder:
    """Собирает все события движка"""

    def __init__(self):
        self.frames = []
        self.scores = []
        self.phases = []
        self.game_overs = []

    def kwargs(self):
        return dict(
            on_frame=lambda snake, food: self.frames.append((snake, food)),
            on_score_changed=lambda score, level: self.scores.append((score, level)),
            on_phase_changed=self.phases.append,
            on_game_over=self.game_overs.append,
        )


@pytest.fixture
def timer():
    return ManualTimer()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def engine(timer, recorder):
    return GameEngine(timer, grid=GridModel(seed=1), **recorder.kwargs())
