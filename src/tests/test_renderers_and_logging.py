import logging

import pytest

from game_system import LayoutConfig
from render_system import ConsoleRenderer, MockRenderer
from utils import HybridLogger


class RecordingLogger:
    def __init__(self):
        self.lines = []

    def debug(self, message):
        self.lines.append(("debug", message))

    def info(self, message):
        self.lines.append(("info", message))

    def warning(self, message):
        self.lines.append(("warning", message))


def test_console_renderer_marks_consumed_missed_and_warning():
    logger = RecordingLogger()
    renderer = ConsoleRenderer(logger)

    renderer.render_sequence(["ب", "پ", "ت"], [0.0, 160.0, 320.0])
    assert logger.lines[-1] == ("info", "Sequence: [ب] [پ] [ت]")

    renderer.request_consumed_effect(0)
    renderer.request_shift(1)
    assert logger.lines[-1] == ("info", "+ [پ] [ت]")

    renderer.request_warning(1, True)
    renderer.request_warning(1, False)
    warnings = [message for level, message in logger.lines if level == "warning"]
    assert warnings == ["Hurry! + !پ! [ت]"]

    renderer.request_missed_effect(1)
    renderer.request_shift(2)
    assert logger.lines[-1] == ("info", "+ - [ت]")


def test_mock_renderer_tracks_screen_and_frames():
    renderer = MockRenderer()
    renderer.show_help()
    renderer.present()
    renderer.present()

    assert renderer.screen == "help"
    assert renderer.frames_presented == 2
    assert renderer.calls_named("show_help") == [()]


def test_class_loggers_write_to_the_log_file(tmp_path):
    main_logger = HybridLogger("LetterRushFileTest", log_dir=str(tmp_path), console=False)
    engine_logger = main_logger.get_class_logger("SessionEngine", logging.INFO)
    state_logger = engine_logger.create_class_logger("PlayingState")

    engine_logger.debug("hidden")
    engine_logger.info("Session started")
    state_logger.warning("Back to home")
    try:
        raise ValueError("boom")
    except ValueError as e:
        engine_logger.error("Failure", exception=e)
    main_logger.cleanup()

    content = main_logger.log_file.read_text(encoding="utf-8")
    assert "hidden" not in content
    assert "[SessionEngine] Session started" in content
    assert "[PlayingState] Back to home" in content
    assert "Type: ValueError" in content


def test_pygame_renderer_places_and_shifts_letters(logger, monkeypatch, tmp_path):
    pytest.importorskip("pygame")
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    from render_system.pygame_renderer import PygameRenderer

    renderer = PygameRenderer(LayoutConfig(), logger, images_dir=str(tmp_path),
                              fonts_dir=str(tmp_path), clock=lambda: 100.0)
    renderer.setup()
    try:
        renderer.render_sequence(["ب", "پ", "ت"], [416.0, 576.0, 736.0])
        renderer.request_shift(1)

        assert [sprite.target_x for sprite in renderer.sprites] == [416.0, 416.0, 576.0]
        assert all(sprite.y == 720 / 2 - 128 / 2 for sprite in renderer.sprites)

        renderer.show_game()
        renderer.request_consumed_effect(0)
        renderer.present()
        assert len(renderer.particles) == 10
    finally:
        renderer.cleanup()
