"""
Target word pool and difficulty-scaled selection.
NO UI DEPENDENCIES.
"""
import random
from typing import Sequence, Tuple

from .constants import (
    WORD_MIN_LENGTH, WORD_LENGTH_STEP_MS, WORD_LENGTH_MAX_STEPS,
    WORD_MAX_LENGTH, WORD_DRAW_ATTEMPTS
)


# Placeholder dictionary
WORD_POOL: Tuple[str, ...] = (
    "apple", "note", "river", "korea", "typing", "banana", "window", "socket", "orange", "system",
    "thread", "packet", "object", "combo", "vector", "method", "class", "random", "matrix", "buffer",
    "friend", "music", "guitar", "soccer", "player", "winner", "castle", "dragon", "danger", "shield",
    "future", "simple", "mobile", "attack", "defense", "victory", "balance", "energy", "memory", "rocket",
    "coffee", "school", "winter", "summer", "spring", "autumn", "family", "forest", "desert", "thunder",
)


def length_bounds(elapsed_ms: int) -> Tuple[int, int]:
    """
    Word length window for the given match time.
    Minimum grows from 4 to 7 over the first 45 seconds, then holds.
    """
    steps = min(max(0, elapsed_ms) // WORD_LENGTH_STEP_MS, WORD_LENGTH_MAX_STEPS)
    min_len = WORD_MIN_LENGTH + steps
    max_len = min(min_len + 1, WORD_MAX_LENGTH)
    return min_len, max_len


def validate_pool(pool: Sequence[str]) -> Tuple[str, ...]:
    """Return the pool as a tuple, or raise ValueError if it cannot supply words."""
    words = tuple(pool)
    if not words:
        raise ValueError("word pool is empty")
    if any(not w or not w.strip() for w in words):
        raise ValueError("word pool contains an empty word")
    return words


def pick_word(rng: random.Random, elapsed_ms: int,
              pool: Sequence[str] = WORD_POOL) -> str:
    """
    Draw a word whose length suits the elapsed time.
    Falls back to any pool word if no candidate fits after repeated draws.
    """
    min_len, max_len = length_bounds(elapsed_ms)

    for _ in range(WORD_DRAW_ATTEMPTS):
        word = rng.choice(pool)
        if min_len <= len(word) <= max_len:
            return word

    return rng.choice(pool)
