from typing import List

import pytest

from game_system import GameManager, SessionPhase
from input_system import ENTER, ESCAPE, HELP, QUIT, SPACE, IKeySource, KeyEvent, events_from_text


class ScriptedKeySource(IKeySource):
    """Key source fed by the test, one batch of events per frame"""

    def __init__(self):
        self.pending: List[KeyEvent] = []
        self.cleaned_up = False

    def press(self, *events: KeyEvent) -> None:
        self.pending.extend(events)

    def setup(self) -> None:
        pass

    def poll(self) -> List[KeyEvent]:
        events, self.pending = self.pending, []
        return events

    def cleanup(self) -> None:
        self.cleaned_up = True


def control(name):
    return KeyEvent(key="", name=name)


@pytest.fixture()
def keys():
    return ScriptedKeySource()


@pytest.fixture()
def manager(keys, renderer, make_engine, ledger, scheduler, logger):
    engine = make_engine(("x", "y"))
    return GameManager(
        key_source=keys,
        renderer=renderer,
        engine=engine,
        ledger=ledger,
        scheduler=scheduler,
        logger=logger,
    )


def frame(manager, keys, *events):
    keys.press(*events)
    manager.update()


def test_starts_on_home_screen(manager, renderer):
    assert manager.get_current_state_name() == "HomeState"
    assert renderer.screen == "home"
    assert renderer.calls_named("show_home") == [(0,)]


def test_full_round_home_help_play_end_home(manager, keys, renderer, ledger, storage):
    frame(manager, keys, control(ENTER))
    assert manager.get_current_state_name() == "HelpState"
    assert renderer.screen == "help"

    frame(manager, keys, control(ENTER))
    assert manager.get_current_state_name() == "PlayingState"
    assert renderer.screen == "game"
    assert manager.engine.phase is SessionPhase.ACTIVE

    frame(manager, keys, KeyEvent("x"), KeyEvent("q"))
    assert manager.engine.cursor == 1

    frame(manager, keys, KeyEvent("y"))
    assert manager.get_current_state_name() == "EndScreenState"
    assert renderer.screen == "end"
    assert renderer.calls_named("show_end_screen") == [(20, 20)]
    assert manager.games_played == 1
    assert storage.value == 20

    # Score display followed every change
    assert renderer.calls_named("update_score")[-2:] == [(10, 10, True), (20, 20, True)]

    frame(manager, keys, control(SPACE))
    assert manager.get_current_state_name() == "HomeState"
    assert renderer.calls_named("show_home")[-1] == (20,)
    assert manager.engine.phase is SessionPhase.IDLE


def test_game_over_from_expiry_reaches_end_screen(manager, keys, renderer, clock):
    frame(manager, keys, control(HELP))
    frame(manager, keys, control(ENTER))

    clock.advance(10000)
    frame(manager, keys)
    assert manager.get_current_state_name() == "PlayingState"

    clock.advance(10000)
    frame(manager, keys)
    assert manager.get_current_state_name() == "EndScreenState"
    assert renderer.calls_named("show_end_screen") == [(0, 0)]


def test_escape_while_playing_returns_home_without_game_over(manager, keys, renderer, scheduler, storage):
    frame(manager, keys, control(ENTER))
    frame(manager, keys, control(ENTER))
    frame(manager, keys, KeyEvent("x"))

    frame(manager, keys, control(ESCAPE))

    assert manager.get_current_state_name() == "HomeState"
    assert manager.games_played == 0
    assert renderer.calls_named("show_end_screen") == []
    assert manager.engine.phase is SessionPhase.IDLE
    assert scheduler.pending_count() == 0
    assert storage.value == 10


def test_new_game_starts_with_zero_session_score(manager, keys, ledger):
    for _ in range(2):
        frame(manager, keys, control(ENTER))
    frame(manager, keys, KeyEvent("x"), KeyEvent("y"))
    frame(manager, keys, control(ENTER))

    frame(manager, keys, control(ENTER))
    frame(manager, keys, control(ENTER))

    assert manager.get_current_state_name() == "PlayingState"
    assert ledger.get_session_score() == 0
    assert ledger.get_cumulative_score() == 20


def test_escape_on_help_closes_without_starting(manager, keys):
    frame(manager, keys, control(ENTER))
    frame(manager, keys, control(ESCAPE))

    assert manager.get_current_state_name() == "HomeState"
    assert manager.engine.phase is SessionPhase.IDLE


def test_escape_on_home_stops_the_loop(manager, keys):
    frame(manager, keys, control(ESCAPE))
    assert not manager.running


def test_quit_event_stops_and_cleanup_releases_resources(manager, keys, renderer):
    frame(manager, keys, control(QUIT))
    assert not manager.running

    manager.run_game_loop()

    assert keys.cleaned_up
    assert renderer.calls_named("cleanup") == [()]


def test_key_typed_just_before_expiry_is_matched(manager, keys, renderer, ledger, clock):
    frame(manager, keys, control(ENTER))
    frame(manager, keys, control(ENTER))

    clock.advance(9995)
    frame(manager, keys)
    keys.press(KeyEvent("x"))
    # Next frame starts after the expiry deadline
    clock.advance(15)
    manager.update()

    assert ledger.get_session_score() == 10
    assert manager.engine.cursor == 1
    assert renderer.calls_named("request_consumed_effect") == [(0,)]
    assert renderer.calls_named("request_missed_effect") == []


def test_expiry_in_a_frame_without_keys_still_reaches_end_screen(manager, keys, clock):
    frame(manager, keys, control(ENTER))
    frame(manager, keys, control(ENTER))
    frame(manager, keys, KeyEvent("x"))

    clock.advance(10000)
    frame(manager, keys)

    assert manager.get_current_state_name() == "EndScreenState"


def test_arrow_key_in_terminal_does_not_leave_the_game(manager, keys):
    frame(manager, keys, control(ENTER))
    frame(manager, keys, control(ENTER))

    frame(manager, keys, *events_from_text("\x1b[A"))

    assert manager.get_current_state_name() == "PlayingState"
    assert manager.engine.phase is SessionPhase.ACTIVE
