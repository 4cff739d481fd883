import random

import pytest

from app.config.settings import ProviderSettings, ScanSettings, Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        scan=ScanSettings(symbol_delay_seconds=0.0),
        providers=ProviderSettings(twelvedata_api_key=None, newsdata_api_key=None),
    )


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
