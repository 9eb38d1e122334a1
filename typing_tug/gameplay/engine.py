"""
Match engine - owns all match state and advances it tick by tick.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Deque, List, Optional, Sequence, Tuple

from .constants import (
    ROPE_MIN, ROPE_MAX, ROPE_START, STEP_HIT, STEP_MISS, POWER_GRIP_MULTIPLIER,
    MATCH_DURATION_MS, TICK_MS, ENEMY_BASE, ENEMY_GROW, ENEMY_GROW_SCALE_MS,
    ANCHOR_PULL_FACTOR, SCORE_BASE, SCORE_PER_COMBO
)
from .effects import ActiveEffects, Clock, EffectKind
from .words import WORD_POOL, pick_word, validate_pool

logger = logging.getLogger(__name__)

# Undrained events beyond this are dropped oldest first
MAX_QUEUED_EVENTS = 256


class MatchPhase(Enum):
    """Where the match is in its lifecycle."""
    NOT_STARTED = auto()
    RUNNING = auto()
    FINISHED = auto()


class Outcome(Enum):
    """Result of a single tick."""
    CONTINUING = auto()
    WIN = auto()            # rope reached the win line
    LOSS = auto()           # rope reached the loss line
    TIME_UP_WIN = auto()    # clock ran out with the rope on the player's side
    TIME_UP_LOSS = auto()
    DRAW = auto()           # clock ran out with the rope dead center

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.CONTINUING

    @property
    def is_time_up(self) -> bool:
        return self in (Outcome.TIME_UP_WIN, Outcome.TIME_UP_LOSS, Outcome.DRAW)

    @property
    def player_won(self) -> bool:
        return self in (Outcome.WIN, Outcome.TIME_UP_WIN)

    @property
    def player_lost(self) -> bool:
        return self in (Outcome.LOSS, Outcome.TIME_UP_LOSS)


class AnswerResult(Enum):
    """Verdict on a submitted word."""
    CORRECT = auto()
    INCORRECT = auto()
    NOT_RUNNING = auto()    # rejected: no match in progress
    EMPTY = auto()          # rejected: nothing but whitespace

    @property
    def rejected(self) -> bool:
        return self in (AnswerResult.NOT_RUNNING, AnswerResult.EMPTY)


@dataclass
class GameEvent:
    """Something the presentation layer may want to react to."""
    pass


@dataclass
class MatchStartedEvent(GameEvent):
    first_word: str


@dataclass
class AnswerEvent(GameEvent):
    """A submission was judged. push is the signed rope displacement."""
    result: AnswerResult
    push: float


@dataclass
class EffectActivatedEvent(GameEvent):
    kind: EffectKind
    expires_at_ms: int


@dataclass
class MatchEndedEvent(GameEvent):
    outcome: Outcome


@dataclass(frozen=True)
class MatchSnapshot:
    """Read-only copy of everything the UI needs for one frame."""
    rope_position: float
    score: int
    combo: int
    remaining_time_ms: int
    current_word: str
    running: bool
    phase: MatchPhase
    outcome: Optional[Outcome]
    active_effects: Tuple[EffectKind, ...]
    word_hidden: bool
    effects_text: str


def clamp_position(pos: float) -> float:
    return max(ROPE_MIN, min(ROPE_MAX, pos))


def enemy_pull(elapsed_seconds: float, delta_ms: int = TICK_MS) -> float:
    """
    Opposing pull for one tick.
    Both terms scale linearly with delta_ms; at TICK_MS the base is ENEMY_BASE.
    """
    base = ENEMY_BASE * (delta_ms / TICK_MS)
    growth = ENEMY_GROW * elapsed_seconds * (delta_ms / ENEMY_GROW_SCALE_MS)
    return base + growth


class TugOfWarEngine:
    """
    Single-player typing tug of war.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as read-only properties and accepts commands as
    method calls.

    Usage:
        engine = TugOfWarEngine()
        engine.start()
        while engine.running:
            outcome = engine.tick(100)
            # UI reads engine.snapshot() and renders
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        word_pool: Sequence[str] = WORD_POOL,
        match_duration_ms: int = MATCH_DURATION_MS,
    ):
        if match_duration_ms <= 0:
            raise ValueError(f"match_duration_ms must be positive, got {match_duration_ms}")

        self._rng = rng if rng is not None else random.Random()
        self._word_pool = validate_pool(word_pool)
        self._match_duration_ms = match_duration_ms

        # Power-up timers
        self._effects = ActiveEffects(clock)

        # Match state
        self._position = ROPE_START
        self._score = 0
        self._combo = 0
        self._remaining_ms = match_duration_ms
        self._running = False
        self._outcome: Optional[Outcome] = None
        self._current_word = self._next_word()

        # Event queue for UI notifications
        self._events: Deque[GameEvent] = deque(maxlen=MAX_QUEUED_EVENTS)

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    @property
    def rope_position(self) -> float:
        return self._position

    @property
    def score(self) -> int:
        return self._score

    @property
    def combo(self) -> int:
        return self._combo

    @property
    def remaining_time_ms(self) -> int:
        return self._remaining_ms

    @property
    def elapsed_ms(self) -> int:
        return self._match_duration_ms - self._remaining_ms

    @property
    def match_duration_ms(self) -> int:
        return self._match_duration_ms

    @property
    def current_word(self) -> str:
        return self._current_word

    @property
    def running(self) -> bool:
        return self._running

    @property
    def outcome(self) -> Optional[Outcome]:
        """Terminal outcome of the last match, or None while one is running."""
        return self._outcome

    @property
    def phase(self) -> MatchPhase:
        if self._running:
            return MatchPhase.RUNNING
        if self._outcome is not None:
            return MatchPhase.FINISHED
        return MatchPhase.NOT_STARTED

    @property
    def effects(self) -> ActiveEffects:
        return self._effects

    def is_effect_active(self, kind: EffectKind) -> bool:
        return self._effects.is_active(kind)

    @property
    def is_word_hidden(self) -> bool:
        return self._effects.is_active(EffectKind.BLIND)

    def describe_effects(self) -> List[str]:
        return self._effects.describe()

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot(
            rope_position=self._position,
            score=self._score,
            combo=self._combo,
            remaining_time_ms=self._remaining_ms,
            current_word=self._current_word,
            running=self._running,
            phase=self.phase,
            outcome=self._outcome,
            active_effects=tuple(self._effects.active_kinds()),
            word_hidden=self.is_word_hidden,
            effects_text=self._effects.describe_text(),
        )

    def pop_events(self) -> List[GameEvent]:
        """
        Return queued events and clear the queue.
        Only the newest MAX_QUEUED_EVENTS are kept between drains.
        """
        events = list(self._events)
        self._events.clear()
        return events

    # =========================================================================
    # GAME FLOW COMMANDS
    # =========================================================================

    def start(self) -> None:
        """
        Begin a fresh match.
        Always allowed; a match in progress is discarded.
        """
        self._position = ROPE_START
        self._score = 0
        self._combo = 0
        self._remaining_ms = self._match_duration_ms
        self._outcome = None
        self._effects.clear_all()
        self._running = True
        self._current_word = self._next_word()

        self._events.append(MatchStartedEvent(self._current_word))
        logger.info(f"Match started (duration: {self._match_duration_ms}ms, first word: {self._current_word!r})")

    def tick(self, delta_ms: int = TICK_MS) -> Outcome:
        """
        Advance time and rope physics by delta_ms.
        Returns a terminal outcome exactly once per match, CONTINUING otherwise.
        """
        if delta_ms < 0:
            raise ValueError(f"delta_ms must not be negative, got {delta_ms}")
        if not self._running:
            return Outcome.CONTINUING

        self._remaining_ms = max(0, self._remaining_ms - delta_ms)

        # A submission may have put the rope on a line since the last tick;
        # that settles the match before the opponent pulls again.
        if ROPE_MIN < self._position < ROPE_MAX:
            elapsed_seconds = self.elapsed_ms / 1000.0
            pull = enemy_pull(elapsed_seconds, delta_ms)
            if self._effects.is_active(EffectKind.ANCHOR):
                pull *= ANCHOR_PULL_FACTOR

            self._position = clamp_position(self._position - pull)

        outcome = self._check_terminal()
        if outcome.is_terminal:
            self._finish(outcome)
        return outcome

    def _check_terminal(self) -> Outcome:
        """Win/loss lines first, then the clock."""
        if self._position >= ROPE_MAX:
            return Outcome.WIN
        if self._position <= ROPE_MIN:
            return Outcome.LOSS
        if self._remaining_ms == 0:
            if self._position > 0:
                return Outcome.TIME_UP_WIN
            if self._position < 0:
                return Outcome.TIME_UP_LOSS
            return Outcome.DRAW
        return Outcome.CONTINUING

    def _finish(self, outcome: Outcome) -> None:
        self._running = False
        self._outcome = outcome
        self._events.append(MatchEndedEvent(outcome))
        logger.info(
            f"Match ended: {outcome.name} (position: {self._position:.2f}, "
            f"score: {self._score}, remaining: {self._remaining_ms}ms)"
        )

    # =========================================================================
    # PLAYER COMMANDS
    # =========================================================================

    def submit_answer(self, typed: Optional[str]) -> AnswerResult:
        """
        Judge a typed word against the current target.
        Matching is case-insensitive and exact. Never ends the match.
        """
        if not self._running:
            return AnswerResult.NOT_RUNNING

        text = (typed or "").strip()
        if not text:
            return AnswerResult.EMPTY

        if text.casefold() == self._current_word.casefold():
            self._combo += 1
            self._score += SCORE_BASE + self._combo * SCORE_PER_COMBO

            push = STEP_HIT
            if self._effects.is_active(EffectKind.POWER_GRIP):
                push *= POWER_GRIP_MULTIPLIER
            self._position = clamp_position(self._position + push)

            logger.debug(f"Correct answer {text!r} (combo: {self._combo}, score: {self._score})")
            self._current_word = self._next_word()
            result = AnswerResult.CORRECT
        else:
            self._combo = 0
            push = -STEP_MISS
            self._position = clamp_position(self._position + push)

            logger.debug(f"Wrong answer {text!r}, expected {self._current_word!r}")
            result = AnswerResult.INCORRECT

        self._events.append(AnswerEvent(result, push))
        return result

    def activate_effect(self, kind: EffectKind) -> bool:
        """
        Trigger a power-up.
        Returns False (and does nothing) if no match is running.
        """
        if not self._running:
            return False

        expires_at = self._effects.activate(kind, kind.duration_ms)
        self._events.append(EffectActivatedEvent(kind, expires_at))
        logger.debug(f"Effect {kind.name} active until {expires_at}ms")
        return True

    def _next_word(self) -> str:
        return pick_word(self._rng, self.elapsed_ms, self._word_pool)

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, duration_ms: int, delta_ms: int = TICK_MS) -> Outcome:
        """
        Tick repeatedly for duration_ms or until the match ends.
        Returns the last outcome.
        """
        if delta_ms <= 0:
            raise ValueError(f"delta_ms must be positive, got {delta_ms}")

        outcome = Outcome.CONTINUING
        elapsed = 0
        while elapsed < duration_ms and self._running:
            outcome = self.tick(delta_ms)
            elapsed += delta_ms
        return outcome
