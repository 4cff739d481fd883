from __future__ import annotations

import http.client
import json
import logging
from typing import Any
from urllib.error import HTTPError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from app.config.settings import ProviderSettings

logger = logging.getLogger(__name__)

_LATEST_PATH = "/api/1/latest"


def _build_url(base_url: str, params: dict[str, str]) -> str:
    return f"{base_url.rstrip('/')}{_LATEST_PATH}?{urlencode(params)}"


def fetch_news(symbol: str, settings: ProviderSettings) -> list[dict[str, Any]]:
    """Return the provider's latest articles for ``symbol``, or ``[]`` on any failure."""
    api_key = settings.newsdata_api_key
    if not api_key:
        return []

    url = _build_url(
        settings.newsdata_base_url,
        {
            "apikey": api_key,
            "q": symbol,
            "country": settings.news_country,
            "language": settings.news_language,
        },
    )
    request = Request(url)
    try:
        with urlopen(request, timeout=settings.request_timeout_seconds) as response:
            body = response.read().decode("utf-8")
        payload = json.loads(body)
    except HTTPError as exc:
        logger.debug("News request for %s failed with HTTP %s", symbol, exc.code)
        return []
    except (OSError, http.client.HTTPException, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.debug("News request for %s failed: %s", symbol, exc)
        return []

    if not isinstance(payload, dict):
        return []
    results = payload.get("results")
    if not isinstance(results, list):
        return []
    return [item for item in results if isinstance(item, dict)]
