from __future__ import annotations

import logging
import random

from app.config.settings import ProviderSettings
from app.providers import twelvedata
from app.providers.synthetic import synthetic_price
from app.schemas.provider import PriceQuote

logger = logging.getLogger(__name__)


def fetch_price(
    symbol: str, settings: ProviderSettings, rng: random.Random | None = None
) -> PriceQuote:
    """One live attempt, then a one-shot synthetic fallback. Never raises for upstream failures."""
    snapshot = twelvedata.fetch_snapshot(symbol, settings)
    if snapshot.status == "ok":
        price = twelvedata.parse_price(snapshot.payload)
        if price is not None:
            return PriceQuote(price=price, source="live", provider=snapshot.provider)

    if snapshot.status != "missing_key":
        logger.warning(
            "Quote API failed for %s (%s), using simulation", symbol, snapshot.status
        )
    reason = "empty" if snapshot.status == "ok" else snapshot.status
    return synthetic_price(symbol, rng, fallback_reason=reason)
