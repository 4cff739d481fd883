from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, Iterable, Sequence

from app.config.settings import Settings
from app.providers.newsdata import fetch_news
from app.providers.selector import fetch_price
from app.providers.synthetic import synthetic_price
from app.reference.symbols import display_name
from app.schemas.provider import PriceQuote
from app.schemas.scan import DataSource, ScanOutcome, ScanResult, StockAnalysis
from app.scoring.probability import score_probability
from app.scoring.recommendation import build_recommendation

logger = logging.getLogger(__name__)

SIMULATION_MESSAGE = "Using advanced AI simulation"

SleepFn = Callable[[float], Awaitable[Any]]


def normalize_symbols(
    symbols: Iterable[Any] | None, default: Sequence[str], limit: int
) -> list[str]:
    if symbols is None:
        return list(default)[:limit]
    cleaned: list[str] = []
    for symbol in symbols:
        if not isinstance(symbol, str):
            continue
        symbol = symbol.strip()
        if symbol:
            cleaned.append(symbol)
    return cleaned[:limit]


def rank_results(results: list[ScanResult]) -> list[ScanResult]:
    return sorted(results, key=lambda result: result.recommendation.probability, reverse=True)


class Scanner:
    def __init__(
        self,
        settings: Settings,
        rng: random.Random | None = None,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self.settings = settings
        self.rng = rng or random.Random()
        self._sleep = sleep

    def spawn_rng(self) -> random.Random:
        # Each call works on its own generator; only the seed draw touches self.rng.
        return random.Random(self.rng.getrandbits(64))

    def _build_result(
        self,
        symbol: str,
        quote: PriceQuote,
        news: Sequence[dict[str, Any]],
        data_source: DataSource,
        rng: random.Random,
    ) -> ScanResult:
        probability = score_probability(symbol, quote, news, rng=rng)
        recommendation = build_recommendation(probability, quote.price, rng=rng)
        return ScanResult(
            symbol=symbol,
            display_name=display_name(symbol),
            current_price=quote.price,
            change=rng.uniform(-10.0, 10.0),
            change_percent=rng.uniform(-1.0, 1.0),
            recommendation=recommendation,
            data_source=data_source,
        )

    async def _scan_symbol(self, symbol: str, rng: random.Random) -> ScanResult:
        providers = self.settings.providers
        quote = await asyncio.to_thread(fetch_price, symbol, providers, rng)
        news = await asyncio.to_thread(fetch_news, symbol, providers)
        return self._build_result(symbol, quote, news, quote.source, rng)

    async def scan(self, symbols: Sequence[Any] | None = None) -> ScanOutcome:
        scan_settings = self.settings.scan
        selected = normalize_symbols(
            symbols, scan_settings.default_symbols, scan_settings.max_symbols
        )
        rng = self.spawn_rng()
        try:
            results: list[ScanResult] = []
            for symbol in selected:
                results.append(await self._scan_symbol(symbol, rng))
                await self._sleep(scan_settings.symbol_delay_seconds)
        except Exception:
            logger.exception("Scan failed for %s, returning simulated batch", selected)
            return ScanOutcome(
                results=self.simulate_batch(rng), simulated=True, message=SIMULATION_MESSAGE
            )

        live = sum(1 for result in results if result.data_source == "live")
        logger.info("Scanned %d symbols (%d live quotes)", len(results), live)
        return ScanOutcome(results=rank_results(results))

    def simulate_batch(self, rng: random.Random | None = None) -> list[ScanResult]:
        rng = rng or self.spawn_rng()
        scan_settings = self.settings.scan
        results = [
            self._build_result(symbol, synthetic_price(symbol, rng), [], "simulated", rng)
            for symbol in scan_settings.default_symbols[: scan_settings.max_symbols]
        ]
        return rank_results(results)

    def simulate_stock(self, symbol: str, rng: random.Random | None = None) -> StockAnalysis:
        rng = rng or self.spawn_rng()
        quote = synthetic_price(symbol, rng)
        probability = score_probability(symbol, quote, [], rng=rng)
        return StockAnalysis(
            symbol=symbol,
            name=display_name(symbol),
            price=quote.price,
            recommendation=build_recommendation(probability, quote.price, rng=rng),
        )

    async def analyze(self, symbol: str) -> StockAnalysis:
        rng = self.spawn_rng()
        try:
            quote = await asyncio.to_thread(fetch_price, symbol, self.settings.providers, rng)
            probability = score_probability(symbol, quote, [], rng=rng)
            return StockAnalysis(
                symbol=symbol,
                name=display_name(symbol),
                price=quote.price,
                recommendation=build_recommendation(probability, quote.price, rng=rng),
            )
        except Exception:
            logger.exception("Analysis failed for %s, returning simulated analysis", symbol)
            return self.simulate_stock(symbol, rng)
