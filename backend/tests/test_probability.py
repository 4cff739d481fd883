import random

from app.scoring import probability
from app.scoring.probability import (
    MAX_PROBABILITY,
    MIN_PROBABILITY,
    STATES,
    TRANSITION_MATRIX,
    run_chain,
    score_probability,
    step,
)


class ScriptedRandom(random.Random):
    """Replays fixed ``random()`` draws and ``randrange`` picks."""

    def __init__(self, draws: list[float], start: int = 0) -> None:
        super().__init__(0)
        self.draws = list(draws)
        self.start = start

    def random(self) -> float:
        return self.draws.pop(0)

    def randrange(self, *args, **kwargs) -> int:
        return self.start


def test_transition_rows_sum_to_one() -> None:
    for row in TRANSITION_MATRIX:
        assert abs(sum(row) - 1.0) < 1e-9
    assert len(TRANSITION_MATRIX) == len(STATES)


def test_step_walks_cumulative_row() -> None:
    # Bullish row: [0.6, 0.3, 0.1]
    assert step(0, ScriptedRandom([0.0])) == 0
    assert step(0, ScriptedRandom([0.6])) == 0
    assert step(0, ScriptedRandom([0.61])) == 1
    assert step(0, ScriptedRandom([0.95])) == 2
    assert step(0, ScriptedRandom([0.9999999999999999])) == 2


def test_run_chain_uses_final_state_after_fixed_steps() -> None:
    draws = [0.1] * probability.WALK_STEPS
    assert run_chain(ScriptedRandom(draws, start=1)) == "BULLISH"


def test_score_maps_final_state_to_band() -> None:
    # 100 draws of 0.99 keep a neutral start neutral, then 0.5 picks mid band.
    draws = [0.99] * probability.WALK_STEPS + [0.5]
    score = score_probability("INFY", rng=ScriptedRandom(draws, start=2))
    assert score == 50.0


def test_strong_symbol_bonus_applies() -> None:
    draws = [0.99] * probability.WALK_STEPS + [0.5]
    assert score_probability("TCS", rng=ScriptedRandom(draws, start=2)) == 55.0


def test_strong_symbol_bonus_is_clamped() -> None:
    # Bullish start, stays bullish on 0.1 draws, top of band plus bonus.
    draws = [0.1] * probability.WALK_STEPS + [0.999]
    assert score_probability("RELIANCE", rng=ScriptedRandom(draws, start=0)) == MAX_PROBABILITY


def test_score_ignores_price_and_news() -> None:
    first = score_probability("INFY", rng=random.Random(7))
    second = score_probability(
        "INFY", price=None, news=[{"title": "anything"}], rng=random.Random(7)
    )
    assert first == second


def test_score_always_within_bounds() -> None:
    rng = random.Random(42)
    for index in range(10_000):
        symbol = "RELIANCE" if index % 2 else "UNKNOWNTICKER"
        score = score_probability(symbol, rng=rng)
        assert MIN_PROBABILITY <= score <= MAX_PROBABILITY
