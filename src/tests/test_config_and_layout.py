import random

import pytest

from game_system import (GameConfig, LayoutConfig, SequenceGenerator, SequenceLayout, SessionConfig,
                         UYGHUR_LETTERS, get_letter_image_path)
from utils import OnceInMs


def test_defaults_are_valid():
    config = GameConfig()
    config.validate()

    assert config.session.sequence_length == 7
    assert config.session.advance_limit == 7
    assert config.session.warning_delay_ms == 7000
    assert config.session.expiry_delay_ms == 10000
    assert config.session.points_per_match == 10
    assert config.target_fps == 50.0


@pytest.mark.parametrize("overrides", [
    {"sequence_length": 0, "advance_limit": 0},
    {"advance_limit": 0},
    {"advance_limit": 8},
    {"warning_delay_ms": 0},
    {"warning_delay_ms": 10000},
    {"expiry_delay_ms": 5000},
    {"warning_blink_ms": 0},
    {"points_per_match": -1},
    {"alphabet": []},
])
def test_invalid_session_config_is_rejected(overrides):
    with pytest.raises(ValueError):
        SessionConfig(**overrides).validate()


@pytest.mark.parametrize("overrides", [
    {"spacing_px": 0},
    {"item_width_px": -5},
    {"area_width_px": 0},
])
def test_invalid_layout_config_is_rejected(overrides):
    with pytest.raises(ValueError):
        LayoutConfig(**overrides).validate()


def test_invalid_game_config_is_rejected():
    with pytest.raises(ValueError):
        GameConfig(renderer="curses").validate()
    with pytest.raises(ValueError):
        GameConfig(frame_duration_ms=0).validate()
    with pytest.raises(ValueError):
        GameConfig(session=SessionConfig(advance_limit=9)).validate()


def test_alphabet_excludes_ae_and_has_30_letters():
    assert len(UYGHUR_LETTERS) == 30
    assert len(set(UYGHUR_LETTERS)) == 30
    assert "ە" not in UYGHUR_LETTERS


def test_letter_image_path(tmp_path):
    assert get_letter_image_path("ب", str(tmp_path)) == str(tmp_path / "ب.png")
    assert get_letter_image_path("?", str(tmp_path)) is None


def test_positions_are_centred_and_evenly_spaced():
    layout = SequenceLayout(LayoutConfig(spacing_px=160, item_width_px=128, area_width_px=1280))
    positions = layout.initial_positions(7)

    assert len(positions) == 7
    assert {b - a for a, b in zip(positions, positions[1:])} == {160}
    left_margin = positions[0]
    right_margin = 1280 - (positions[-1] + 128)
    assert left_margin == right_margin
    assert layout.row_width(7) == 6 * 160 + 128
    assert layout.row_width(0) == 0.0


def test_shift_moves_only_letters_from_the_cursor_on():
    layout = SequenceLayout(LayoutConfig(spacing_px=100))
    assert layout.shifted([0.0, 100.0, 200.0], 1) == [0.0, 0.0, 100.0]


def test_generator_draws_from_alphabet_with_repeats():
    generator = SequenceGenerator(["x"], rng=random.Random(3))
    assert generator.generate(4) == ["x", "x", "x", "x"]

    generator = SequenceGenerator(UYGHUR_LETTERS, rng=random.Random(3))
    sequence = generator.generate(50)
    assert len(sequence) == 50
    assert set(sequence) <= set(UYGHUR_LETTERS)


def test_generator_is_reproducible_with_a_seed():
    first = SequenceGenerator(UYGHUR_LETTERS, rng=random.Random(42)).generate(7)
    second = SequenceGenerator(UYGHUR_LETTERS, rng=random.Random(42)).generate(7)
    assert first == second


def test_generator_rejects_empty_alphabet():
    with pytest.raises(ValueError):
        SequenceGenerator([])


def test_once_in_ms_throttles(clock):
    throttle = OnceInMs(60000, clock=clock)

    assert throttle.should_execute()
    assert not throttle.should_execute()

    clock.advance(59999)
    assert not throttle.should_execute()
    clock.advance(1)
    assert throttle.should_execute()

    throttle.reset()
    assert throttle.should_execute()
