from __future__ import annotations

import http.client
import json
import math
from urllib.error import HTTPError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from app.config.settings import ProviderSettings
from app.schemas.provider import ProviderSnapshot


_PRICE_PATH = "/price"


def _build_url(base_url: str, params: dict[str, str]) -> str:
    return f"{base_url.rstrip('/')}{_PRICE_PATH}?{urlencode(params)}"


def parse_price(payload: object) -> float | None:
    if not isinstance(payload, dict):
        return None
    raw = payload.get("price")
    if raw is None or isinstance(raw, bool):
        return None
    try:
        price = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(price) or price <= 0:
        return None
    return price


def fetch_snapshot(symbol: str, settings: ProviderSettings) -> ProviderSnapshot:
    api_key = settings.twelvedata_api_key
    if not api_key:
        return ProviderSnapshot(provider="twelvedata", symbol=symbol, status="missing_key")

    url = _build_url(
        settings.twelvedata_base_url,
        {"symbol": f"{symbol}{settings.exchange_suffix}", "apikey": api_key},
    )
    request = Request(url)
    try:
        with urlopen(request, timeout=settings.request_timeout_seconds) as response:
            body = response.read().decode("utf-8")
        payload = json.loads(body)
    except HTTPError as exc:
        status = "rate_limited" if exc.code == 429 else "error"
        return ProviderSnapshot(provider="twelvedata", symbol=symbol, status=status)
    except (OSError, http.client.HTTPException, json.JSONDecodeError, UnicodeDecodeError):
        return ProviderSnapshot(provider="twelvedata", symbol=symbol, status="error")

    if not isinstance(payload, dict):
        return ProviderSnapshot(provider="twelvedata", symbol=symbol, status="error")

    if parse_price(payload) is None:
        return ProviderSnapshot(
            provider="twelvedata", symbol=symbol, payload=payload, status="empty"
        )

    return ProviderSnapshot(
        provider="twelvedata", symbol=symbol, payload=payload, status="ok"
    )
