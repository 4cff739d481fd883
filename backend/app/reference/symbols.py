from __future__ import annotations

DEFAULT_BASE_PRICE = 1500.0

BASE_PRICES: dict[str, float] = {
    "RELIANCE": 2850.0,
    "TCS": 3845.0,
    "HDFCBANK": 1645.0,
    "INFY": 1520.0,
    "ICICIBANK": 1085.0,
    "HINDUNILVR": 2500.0,
    "ITC": 425.0,
    "SBIN": 620.0,
    "BHARTIARTL": 1150.0,
    "BAJFINANCE": 7245.0,
}

DISPLAY_NAMES: dict[str, str] = {
    "RELIANCE": "Reliance Industries Ltd.",
    "TCS": "Tata Consultancy Services Ltd.",
    "HDFCBANK": "HDFC Bank Ltd.",
    "INFY": "Infosys Ltd.",
    "ICICIBANK": "ICICI Bank Ltd.",
    "HINDUNILVR": "Hindustan Unilever Ltd.",
    "ITC": "ITC Ltd.",
    "SBIN": "State Bank of India",
    "BHARTIARTL": "Bharti Airtel Ltd.",
    "BAJFINANCE": "Bajaj Finance Ltd.",
}


def base_price(symbol: str) -> float:
    return BASE_PRICES.get(symbol, DEFAULT_BASE_PRICE)


def display_name(symbol: str) -> str:
    return DISPLAY_NAMES.get(symbol, f"{symbol} Limited")
