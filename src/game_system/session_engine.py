"""
Session engine - sequence, cursor and countdown of one play session
"""

import enum
from typing import Callable, List, Optional, Tuple, TYPE_CHECKING

from .layout import SequenceLayout
from .sequence_generator import SequenceGenerator
from .timers import TimerPair, TimerScheduler

if TYPE_CHECKING:
    from render_system.interfaces import IRenderer
    from score_system.score_ledger import ScoreLedger
    from utils.hybrid_logger import ClassLogger
    from .config import SessionConfig

GameOverCallback = Callable[[int], None]


class SessionPhase(enum.Enum):
    IDLE = "idle"        # No session
    ACTIVE = "active"    # Sequence shown, countdown running for the cursor letter
    ENDED = "ended"      # Game over fired, no timers pending


class SessionEngine:
    """
    Drives one play session.

    A session shows a random sequence of letters. The letter at the cursor
    has a countdown: after the warning delay it starts blinking, after the
    expiry delay it falls off as missed. Typing it first consumes it and
    awards points. Either way the cursor advances; reaching the advance
    limit ends the session and fires the game-over callbacks once.

    All timing runs on the TimerScheduler ticked by the frame loop, so match
    and expiry of one letter can never both take effect: whichever runs first
    cancels the other.

    Transitions:
    - start(): IDLE/ACTIVE/ENDED → ACTIVE
    - advance() at the limit: ACTIVE → ENDED
    - reset(): any → IDLE
    """

    def __init__(self,
                 config: 'SessionConfig',
                 ledger: 'ScoreLedger',
                 renderer: 'IRenderer',
                 scheduler: TimerScheduler,
                 layout: SequenceLayout,
                 logger: 'ClassLogger',
                 generator: Optional[SequenceGenerator] = None):
        """
        Args:
            config: Session rules (lengths, delays, points)
            ledger: Shared score ledger, credited on every match
            renderer: Receives visual requests
            scheduler: Timer scheduler ticked by the frame loop
            layout: Initial letter positions
            logger: ClassLogger instance for logging
            generator: Sequence source, defaults to uniform draws from config.alphabet
        """
        self.config = config
        self.ledger = ledger
        self.renderer = renderer
        self.scheduler = scheduler
        self.layout = layout
        self.logger = logger
        self.generator = generator or SequenceGenerator(config.alphabet)

        self._phase = SessionPhase.IDLE
        self._sequence: List[str] = []
        self._cursor = 0
        self._timers: Optional[TimerPair] = None
        self._game_over_callbacks: List[GameOverCallback] = []

    # --- Read-only state ---

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def sequence(self) -> Tuple[str, ...]:
        return tuple(self._sequence)

    @property
    def current_symbol(self) -> Optional[str]:
        """Letter awaiting input, None outside an active session"""
        if self._phase is not SessionPhase.ACTIVE or self._cursor >= len(self._sequence):
            return None
        return self._sequence[self._cursor]

    @property
    def has_pending_timers(self) -> bool:
        return self._timers is not None

    def on_game_over(self, callback: GameOverCallback) -> None:
        """Register callback(final_session_score), called once per session when it ends"""
        self._game_over_callbacks.append(callback)

    # --- Transitions ---

    def start(self) -> None:
        """Start a new session, superseding any running one"""
        if self._phase is SessionPhase.ACTIVE:
            self.logger.info("Session restarted while active")

        self._cancel_timers()
        self._cursor = 0
        self._sequence = self.generator.generate(self.config.sequence_length)
        self._phase = SessionPhase.ACTIVE

        self.logger.info(f"Session started: {' '.join(self._sequence)}")
        self.renderer.render_sequence(
            list(self._sequence),
            self.layout.initial_positions(len(self._sequence))
        )
        self._arm_timers()

    def reset(self) -> None:
        """Abandon the session (safe to call in any state, any number of times)"""
        self._cancel_timers()
        if self._phase is not SessionPhase.IDLE:
            self.logger.info(f"Session reset from {self._phase.name}")
        self._phase = SessionPhase.IDLE
        self._sequence = []
        self._cursor = 0

    def handle_input(self, key: str) -> bool:
        """
        Compare a key press with the current letter.

        Non-matching keys and keys outside an active session are ignored.

        Returns:
            True if the key consumed the current letter
        """
        expected = self.current_symbol
        if expected is None or key != expected:
            return False

        position = self._cursor
        self._cancel_timers()
        self.logger.debug(f"Matched '{key}' at position {position}")

        self.renderer.request_consumed_effect(position)
        self.ledger.increment(self.config.points_per_match)
        self.advance()
        return True

    def advance(self) -> None:
        """Move the cursor past the current letter, ending the session at the advance limit"""
        if self._phase is not SessionPhase.ACTIVE:
            return

        self._cursor += 1

        if self._cursor >= self.config.advance_limit:
            self._end()
            return

        self.renderer.request_shift(self._cursor)
        self._arm_timers()

    def _end(self) -> None:
        self._phase = SessionPhase.ENDED
        self._cancel_timers()

        final_score = self.ledger.get_session_score()
        self.logger.info(f"Session ended: score {final_score}")

        for callback in list(self._game_over_callbacks):
            callback(final_score)

    # --- Timers ---

    def _arm_timers(self) -> None:
        """Start the countdown of the letter at the cursor"""
        self._cancel_timers()
        position = self._cursor

        warning = self.scheduler.call_later(
            self.config.warning_delay_ms,
            lambda: self._on_warning(position),
            name=f"warning-{position}"
        )
        expiry = self.scheduler.call_later(
            self.config.expiry_delay_ms,
            lambda: self._on_expiry(position),
            name=f"expiry-{position}"
        )
        self._timers = TimerPair(position, warning, expiry)

    def _cancel_timers(self) -> None:
        if self._timers is not None:
            self._timers.cancel()
            self._timers = None

    def _owns_countdown(self, position: int) -> bool:
        """True if a timer callback for `position` still belongs to the live countdown"""
        return (
            self._phase is SessionPhase.ACTIVE
            and self._timers is not None
            and self._timers.position == position == self._cursor
        )

    def _on_warning(self, position: int) -> None:
        if not self._owns_countdown(position):
            self.logger.debug(f"Stale warning for position {position} ignored")
            return

        self.logger.debug(f"Warning for position {position}")
        blink_state = {"on": False}

        def toggle() -> None:
            blink_state["on"] = not blink_state["on"]
            self.renderer.request_warning(position, blink_state["on"])

        toggle()
        self._timers.blink = self.scheduler.call_every(
            self.config.warning_blink_ms, toggle, name=f"blink-{position}"
        )

    def _on_expiry(self, position: int) -> None:
        if not self._owns_countdown(position):
            self.logger.debug(f"Stale expiry for position {position} ignored")
            return

        self._cancel_timers()  # stops the warning blink
        self.logger.debug(f"Letter at position {position} missed")

        self.renderer.request_missed_effect(position)
        self.advance()

    def __str__(self) -> str:
        return (
            f"SessionEngine(phase={self._phase.name}, cursor={self._cursor}/"
            f"{self.config.advance_limit}, sequence='{''.join(self._sequence)}')"
        )
