import random

import pytest

from app.scoring.recommendation import (
    TIME_FRAME,
    build_recommendation,
    rationale_for,
    risk_level_for,
    signal_for,
)


def test_concrete_bullish_recommendation() -> None:
    rec = build_recommendation(72, 1000, rng=random.Random(1))

    assert rec.probability == 72
    assert rec.signal == "BUY"
    assert rec.risk_level == "LOW"
    assert rec.entry_price == pytest.approx(995.00)
    assert rec.stop_loss == pytest.approx(980.00)
    assert rec.target_price == pytest.approx(1025.00)
    assert rec.confidence == pytest.approx(0.44)
    assert rec.time_frame == TIME_FRAME
    assert rec.rationale == "Strong technical setup with favorable risk/reward"


def test_bearish_branch_flips_price_levels() -> None:
    rec = build_recommendation(30, 2000, rng=random.Random(1))

    assert rec.signal == "SELL"
    assert rec.risk_level == "HIGH"
    assert rec.entry_price == pytest.approx(2010.00)
    assert rec.stop_loss == pytest.approx(2040.00)
    assert rec.target_price == pytest.approx(1950.00)
    assert rec.entry_price > 2000
    assert rec.stop_loss > 2000


@pytest.mark.parametrize(
    ("probability", "signal"),
    [(55.0001, "BUY"), (55, "HOLD"), (50, "HOLD"), (45, "HOLD"), (44.999, "SELL")],
)
def test_signal_thresholds_are_strict(probability, signal) -> None:
    assert signal_for(probability) == signal


@pytest.mark.parametrize(
    ("probability", "risk"),
    [(70.01, "LOW"), (70, "MEDIUM"), (55.5, "MEDIUM"), (55, "HIGH"), (20, "HIGH")],
)
def test_risk_thresholds_are_strict(probability, risk) -> None:
    assert risk_level_for(probability) == risk


def test_exactly_fifty_five_holds_with_bearish_levels() -> None:
    rec = build_recommendation(55, 100, rng=random.Random(3))
    assert rec.signal == "HOLD"
    assert rec.risk_level == "HIGH"
    assert rec.entry_price == pytest.approx(100.5)


def test_rationale_buckets() -> None:
    assert rationale_for(71) == "Strong technical setup with favorable risk/reward"
    assert rationale_for(65) == "Good probability setup, watch for entry"
    assert rationale_for(55) == "Moderate chance, consider small position"
    assert rationale_for(45) == "Low confidence, wait for better setup"
    assert rationale_for(40) == "Avoid this setup, high risk"


def test_jitter_fields_stay_in_range() -> None:
    rng = random.Random(99)
    for _ in range(500):
        rec = build_recommendation(rng.uniform(20, 85), 1500, rng=rng)
        assert 20 <= rec.probability <= 85
        assert 0.0 <= rec.confidence <= 1.0
        assert 40 <= rec.technicals.rsi < 70
        assert -0.05 <= rec.technicals.macd < 0.05
        assert -0.075 <= rec.technicals.momentum < 0.075
        value = float(rec.expected_return_pct.rstrip("%"))
        assert 1.5 <= value <= 4.0
        assert rec.expected_return_pct.endswith("%")


def test_probability_rounds_half_up() -> None:
    assert build_recommendation(62.5, 100, rng=random.Random(0)).probability == 63
    assert build_recommendation(62.49, 100, rng=random.Random(0)).probability == 62


def test_seeded_rng_makes_output_reproducible() -> None:
    first = build_recommendation(60, 500, rng=random.Random(5))
    second = build_recommendation(60, 500, rng=random.Random(5))
    assert first.technicals == second.technicals
    assert first.expected_return_pct == second.expected_return_pct
