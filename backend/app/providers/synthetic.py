from __future__ import annotations

import random

from app.reference.symbols import base_price
from app.schemas.provider import PriceQuote, SnapshotStatus

NOISE_RANGE = 20.0
MIN_PRICE = 0.01


def synthetic_price(
    symbol: str,
    rng: random.Random | None = None,
    fallback_reason: SnapshotStatus | None = None,
) -> PriceQuote:
    """Perturb the symbol's base price with uniform noise in +/-NOISE_RANGE."""
    rng = rng or random.Random()
    noise = rng.uniform(-NOISE_RANGE, NOISE_RANGE)
    price = max(base_price(symbol) + noise, MIN_PRICE)
    return PriceQuote(
        price=price,
        source="synthetic",
        provider="synthetic",
        fallback_reason=fallback_reason,
    )
