"""
Typing tug of war gameplay - the headless simulation core.
"""
from .effects import ActiveEffects, EffectKind, ManualClock, SystemClock, NO_EFFECTS
from .engine import (
    TugOfWarEngine, Outcome, AnswerResult, MatchPhase, MatchSnapshot,
    GameEvent, MatchStartedEvent, AnswerEvent, EffectActivatedEvent, MatchEndedEvent,
)
from .words import WORD_POOL, pick_word, length_bounds

__all__ = [
    "ActiveEffects",
    "EffectKind",
    "ManualClock",
    "SystemClock",
    "NO_EFFECTS",
    "TugOfWarEngine",
    "Outcome",
    "AnswerResult",
    "MatchPhase",
    "MatchSnapshot",
    "GameEvent",
    "MatchStartedEvent",
    "AnswerEvent",
    "EffectActivatedEvent",
    "MatchEndedEvent",
    "WORD_POOL",
    "pick_word",
    "length_bounds",
]
