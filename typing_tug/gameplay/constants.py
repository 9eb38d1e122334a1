"""
Game constants - all balance numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# ROPE
# =============================================================================
ROPE_MIN = -100.0             # loss line
ROPE_MAX = 100.0              # win line
ROPE_START = 0.0

STEP_HIT = 12.0               # push toward the win line on a correct answer
STEP_MISS = 8.0               # push toward the loss line on a wrong answer
POWER_GRIP_MULTIPLIER = 2.0

# =============================================================================
# TIMING (all in milliseconds)
# =============================================================================
MATCH_DURATION_MS = 60_000
TICK_MS = 100                 # reference cadence the balance values are tuned for

# =============================================================================
# OPPOSING FORCE
# =============================================================================
ENEMY_BASE = 0.08             # pull per reference tick
ENEMY_GROW = 0.00015          # extra pull per elapsed second
ENEMY_GROW_SCALE_MS = 10      # growth term is scaled by delta_ms / this
ANCHOR_PULL_FACTOR = 0.1

# =============================================================================
# SCORING
# =============================================================================
SCORE_BASE = 10
SCORE_PER_COMBO = 2

# =============================================================================
# POWER-UPS
# =============================================================================
POWER_GRIP_DURATION_MS = 5_000
ANCHOR_DURATION_MS = 3_000
BLIND_DURATION_MS = 3_000

# =============================================================================
# WORDS
# =============================================================================
WORD_MIN_LENGTH = 4
WORD_LENGTH_STEP_MS = 15_000  # minimum length grows by one every step
WORD_LENGTH_MAX_STEPS = 3
WORD_MAX_LENGTH = 8
WORD_DRAW_ATTEMPTS = 100
