from __future__ import annotations

import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.provider import utcnow

Signal = Literal["BUY", "SELL", "HOLD"]
RiskLevel = Literal["LOW", "MEDIUM", "HIGH"]


class Technicals(CamelModel):
    rsi: float
    macd: float
    momentum: float


class Recommendation(CamelModel):
    probability: int = Field(ge=20, le=85)
    signal: Signal
    confidence: float = Field(ge=0.0, le=1.0)
    entry_price: float
    stop_loss: float
    target_price: float
    risk_level: RiskLevel
    expected_return_pct: str
    time_frame: str
    technicals: Technicals
    rationale: str
    generated_at: datetime.datetime = Field(default_factory=utcnow)
