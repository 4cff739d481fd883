from __future__ import annotations

import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SnapshotStatus = Literal["ok", "missing_key", "rate_limited", "error", "empty"]
PriceSource = Literal["live", "synthetic"]


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC)


class ProviderSnapshot(BaseModel):
    provider: str
    symbol: str
    payload: dict[str, Any] = Field(default_factory=dict)
    status: SnapshotStatus = "error"


class PriceQuote(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: float = Field(gt=0)
    source: PriceSource
    provider: str
    observed_at: datetime.datetime = Field(default_factory=utcnow)
    # Snapshot status of the live attempt that was replaced by synthetic data.
    fallback_reason: SnapshotStatus | None = None

    @property
    def is_live(self) -> bool:
        return self.source == "live"
