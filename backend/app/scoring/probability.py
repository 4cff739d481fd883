"""Synthetic upward-move scores from a three-state random walk. Illustrative only."""

from __future__ import annotations

import random
from itertools import accumulate
from typing import Any, Sequence

from app.schemas.provider import PriceQuote

STATES: tuple[str, ...] = ("BULLISH", "BEARISH", "NEUTRAL")

# Row i holds P(next state | STATES[i]); every row sums to 1.
TRANSITION_MATRIX: tuple[tuple[float, ...], ...] = (
    (0.6, 0.3, 0.1),
    (0.2, 0.5, 0.3),
    (0.3, 0.2, 0.5),
)

WALK_STEPS = 100

# Half-open [low, high) band sampled for each final state.
STATE_BANDS: dict[str, tuple[float, float]] = {
    "BULLISH": (65.0, 85.0),
    "BEARISH": (20.0, 40.0),
    "NEUTRAL": (45.0, 55.0),
}

STRONG_SYMBOLS = frozenset({"RELIANCE", "TCS", "HDFCBANK"})
STRONG_SYMBOL_BONUS = 5.0

MIN_PROBABILITY = 20.0
MAX_PROBABILITY = 85.0


def clamp(value: float, low: float = MIN_PROBABILITY, high: float = MAX_PROBABILITY) -> float:
    return max(low, min(high, value))


def step(state: int, rng: random.Random) -> int:
    """Move one step along the chain using the cumulative row distribution."""
    draw = rng.random()
    row = TRANSITION_MATRIX[state]
    for index, cumulative in enumerate(accumulate(row)):
        if draw <= cumulative:
            return index
    # Float round-off can leave the last cumulative value a hair below 1.0.
    return len(row) - 1


def run_chain(rng: random.Random, steps: int = WALK_STEPS) -> str:
    state = rng.randrange(len(STATES))
    for _ in range(steps):
        state = step(state, rng)
    return STATES[state]


def score_probability(
    symbol: str,
    price: PriceQuote | None = None,
    news: Sequence[dict[str, Any]] | None = None,
    rng: random.Random | None = None,
) -> float:
    """Return a score in [20, 85] for ``symbol``.

    ``price`` and ``news`` are accepted so callers can pass everything they
    fetched; neither affects the score today.
    """
    rng = rng or random.Random()
    final_state = run_chain(rng)
    low, high = STATE_BANDS[final_state]
    probability = low + rng.random() * (high - low)
    if symbol in STRONG_SYMBOLS:
        probability += STRONG_SYMBOL_BONUS
    return clamp(probability)
