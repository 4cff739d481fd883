from __future__ import annotations

import random

from app.schemas.recommendation import Recommendation, RiskLevel, Signal, Technicals

BUY_THRESHOLD = 55.0
SELL_THRESHOLD = 45.0
LOW_RISK_THRESHOLD = 70.0

TIME_FRAME = "1-3 days"

# (entry, stop, target) multipliers applied to the current price.
BULLISH_MULTIPLIERS = (0.995, 0.98, 1.025)
BEARISH_MULTIPLIERS = (1.005, 1.02, 0.975)

VOLATILITY_RANGE = (0.015, 0.04)


def signal_for(probability: float) -> Signal:
    if probability > BUY_THRESHOLD:
        return "BUY"
    if probability < SELL_THRESHOLD:
        return "SELL"
    return "HOLD"


def risk_level_for(probability: float) -> RiskLevel:
    if probability > LOW_RISK_THRESHOLD:
        return "LOW"
    if probability > BUY_THRESHOLD:
        return "MEDIUM"
    return "HIGH"


def rationale_for(probability: float) -> str:
    if probability > 70:
        return "Strong technical setup with favorable risk/reward"
    if probability > 60:
        return "Good probability setup, watch for entry"
    if probability > 50:
        return "Moderate chance, consider small position"
    if probability > 40:
        return "Low confidence, wait for better setup"
    return "Avoid this setup, high risk"


def round_half_up(value: float) -> int:
    return int(value + 0.5)


def build_recommendation(
    probability: float, current_price: float, rng: random.Random | None = None
) -> Recommendation:
    rng = rng or random.Random()
    bullish = probability > BUY_THRESHOLD
    entry_mult, stop_mult, target_mult = (
        BULLISH_MULTIPLIERS if bullish else BEARISH_MULTIPLIERS
    )
    low, high = VOLATILITY_RANGE
    volatility = rng.uniform(low, high)

    technicals = Technicals(
        rsi=40 + rng.random() * 30,
        macd=rng.random() * 0.1 - 0.05,
        momentum=rng.random() * 0.15 - 0.075,
    )

    return Recommendation(
        probability=round_half_up(probability),
        signal=signal_for(probability),
        confidence=abs(probability - 50) / 50,
        entry_price=round(current_price * entry_mult, 2),
        stop_loss=round(current_price * stop_mult, 2),
        target_price=round(current_price * target_mult, 2),
        risk_level=risk_level_for(probability),
        expected_return_pct=f"{volatility * 100:.1f}%",
        time_frame=TIME_FRAME,
        technicals=technicals,
        rationale=rationale_for(probability),
    )
