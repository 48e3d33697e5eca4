"""
Test Configuration — Fixtures for delay triggers and a clean settings cache.

Settings are cached with lru_cache, so every test starts and ends with an
empty cache; tests that change env vars via monkeypatch never leak config.
"""

from datetime import date

import pytest

from core import config as config_module
from supply_chain.mitigation import DelayMitigationEngine
from supply_chain.models import AlternateSupplier, DelayTrigger


@pytest.fixture(autouse=True)
def _fresh_settings():
    config_module.get_settings.cache_clear()
    yield
    config_module.get_settings.cache_clear()


@pytest.fixture
def make_trigger():
    """Factory for DelayTrigger with sensible defaults; override any field by keyword."""

    def _make(**overrides) -> DelayTrigger:
        fields = {
            "sku": "ECU-101",
            "supplier_name": "AlphaElectronics",
            "original_eta": date(2024, 2, 15),
            "delay_days": 7,
            "reason": "Port congestion",
            "inventory_days_remaining": 2,
        }
        fields.update(overrides)
        return DelayTrigger(**fields)

    return _make


@pytest.fixture
def make_supplier():
    def _make(name: str, lead_time: float, reliability: float = 85) -> AlternateSupplier:
        return AlternateSupplier(name=name, lead_time=lead_time, reliability=reliability)

    return _make


@pytest.fixture
def engine():
    return DelayMitigationEngine()
