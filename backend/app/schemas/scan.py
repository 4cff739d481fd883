from __future__ import annotations

import datetime
from typing import Any, Literal, Optional

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.provider import utcnow
from app.schemas.recommendation import Recommendation

DataSource = Literal["live", "synthetic", "simulated"]


class ScanRequest(CamelModel):
    symbols: Optional[list[Any]] = None


class ScanResult(CamelModel):
    symbol: str
    display_name: str
    current_price: float
    # Independent random placeholders, not derived from a prior observed price.
    change: float
    change_percent: float
    recommendation: Recommendation
    data_source: DataSource
    updated_at: datetime.datetime = Field(default_factory=utcnow)


class ScanOutcome(CamelModel):
    results: list[ScanResult] = Field(default_factory=list)
    simulated: bool = False
    message: Optional[str] = None


class ScanResponse(CamelModel):
    success: bool = True
    results: list[ScanResult] = Field(default_factory=list)
    server_tag: str
    message: Optional[str] = None
    timestamp: datetime.datetime = Field(default_factory=utcnow)


class StockAnalysis(CamelModel):
    symbol: str
    name: str
    price: float
    recommendation: Recommendation
    updated_at: datetime.datetime = Field(default_factory=utcnow)


class HealthResponse(CamelModel):
    status: str = "healthy"
    server_tag: str
    version: str
    uptime_seconds: float
    timestamp: datetime.datetime = Field(default_factory=utcnow)
