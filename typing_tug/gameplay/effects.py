"""
Power-up effect timers.
NO UI DEPENDENCIES.

Each effect kind has one slot holding an expiry timestamp in milliseconds.
A slot is active while the clock reads earlier than its expiry.
"""
import time
from enum import Enum
from typing import Callable, Dict, List, Optional

from .constants import (
    POWER_GRIP_DURATION_MS, ANCHOR_DURATION_MS, BLIND_DURATION_MS
)


Clock = Callable[[], int]

NO_EFFECTS = "none"


class EffectKind(Enum):
    """Power-ups the player can trigger, in HUD priority order."""
    POWER_GRIP = "Power Grip"  # doubles the push of correct answers
    ANCHOR = "Anchor"          # opposing pull drops to a tenth
    BLIND = "Blind"            # target word is masked

    @property
    def label(self) -> str:
        return self.value

    @property
    def duration_ms(self) -> int:
        return EFFECT_DURATIONS_MS[self]


EFFECT_DURATIONS_MS: Dict[EffectKind, int] = {
    EffectKind.POWER_GRIP: POWER_GRIP_DURATION_MS,
    EffectKind.ANCHOR: ANCHOR_DURATION_MS,
    EffectKind.BLIND: BLIND_DURATION_MS,
}


class SystemClock:
    """Monotonic wall clock in milliseconds."""

    def __call__(self) -> int:
        return int(time.monotonic() * 1000)


class ManualClock:
    """
    Clock that only moves when told to.
    Lets tests expire effects without sleeping.
    """

    def __init__(self, start_ms: int = 0):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> int:
        self.now_ms += ms
        return self.now_ms


class ActiveEffects:
    """
    Expiry registry for the three power-up slots.

    Activation refreshes rather than stacks: the new expiry is the later of
    the current expiry and now + duration.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._expiry: Dict[EffectKind, int] = {kind: 0 for kind in EffectKind}

    def now(self) -> int:
        return self._clock()

    def is_active(self, kind: EffectKind) -> bool:
        return self._clock() < self._expiry[kind]

    def activate(self, kind: EffectKind, duration_ms: Optional[int] = None,
                 now: Optional[int] = None) -> int:
        """
        Start or refresh an effect.
        Returns the resulting expiry timestamp.
        """
        if duration_ms is None:
            duration_ms = kind.duration_ms
        if now is None:
            now = self._clock()
        self._expiry[kind] = max(self._expiry[kind], now + duration_ms)
        return self._expiry[kind]

    def expires_at(self, kind: EffectKind) -> int:
        return self._expiry[kind]

    def remaining_ms(self, kind: EffectKind) -> int:
        return max(0, self._expiry[kind] - self._clock())

    def clear_all(self) -> None:
        for kind in self._expiry:
            self._expiry[kind] = 0

    def active_kinds(self) -> List[EffectKind]:
        now = self._clock()
        return [kind for kind in EffectKind if now < self._expiry[kind]]

    def describe(self) -> List[str]:
        """Labels of active effects, or [NO_EFFECTS] when none are active."""
        labels = [kind.label for kind in self.active_kinds()]
        return labels if labels else [NO_EFFECTS]

    def describe_text(self) -> str:
        """HUD line, e.g. 'Effects: [Power Grip] [Anchor]'."""
        active = self.active_kinds()
        if not active:
            return f"Effects: {NO_EFFECTS}"
        return "Effects: " + " ".join(f"[{kind.label}]" for kind in active)
