import logging
import os
import sys

import pytest

# Ensure src/ (containing the game packages) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
SRC_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from game_system import SequenceLayout, SessionConfig, SessionEngine, TimerScheduler, LayoutConfig
from game_system.sequence_generator import SequenceGenerator
from render_system import MockRenderer
from score_system import MemoryScoreStorage, ScoreLedger
from utils import HybridLogger


class FakeClock:
    """Manually advanced time source, in seconds like time.time"""

    def __init__(self, start_ms: int = 1000000):
        # Whole milliseconds, so deadlines compare exactly
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms / 1000.0

    def advance(self, ms: int) -> None:
        self.now_ms += ms


class FixedGenerator(SequenceGenerator):
    """Generator returning a preset sequence, cycling through it if asked for more"""

    def __init__(self, letters):
        super().__init__(letters)
        self.letters = list(letters)

    def generate(self, length):
        return [self.letters[i % len(self.letters)] for i in range(length)]


@pytest.fixture()
def hybrid_logger(tmp_path_factory):
    main_logger = HybridLogger("LetterRushTest", log_dir=str(tmp_path_factory.mktemp("logs")), console=False)
    yield main_logger
    main_logger.cleanup()


@pytest.fixture()
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def scheduler(clock):
    return TimerScheduler(clock=clock)


@pytest.fixture()
def renderer():
    return MockRenderer()


@pytest.fixture()
def storage():
    return MemoryScoreStorage()


@pytest.fixture()
def ledger(storage, logger):
    return ScoreLedger(storage, logger)


@pytest.fixture()
def make_engine(ledger, renderer, scheduler, logger):
    """Factory building a SessionEngine with a fixed letter sequence"""

    def _make(letters=("x", "y", "x"), **config_overrides):
        config_values = dict(
            sequence_length=len(letters),
            advance_limit=len(letters),
            alphabet=sorted(set(letters)),
        )
        config_values.update(config_overrides)
        config = SessionConfig(**config_values)
        config.validate()
        return SessionEngine(
            config=config,
            ledger=ledger,
            renderer=renderer,
            scheduler=scheduler,
            layout=SequenceLayout(LayoutConfig()),
            logger=logger,
            generator=FixedGenerator(letters),
        )

    return _make
