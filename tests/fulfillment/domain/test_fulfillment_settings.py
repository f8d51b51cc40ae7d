"""Tests for FulfillmentSettings and its environment overrides."""

import pytest
from storefront.config import FulfillmentSettings


@pytest.fixture()
def clean_env(monkeypatch):
    for name in (
        "STOREFRONT_LOW_STOCK_THRESHOLD",
        "STOREFRONT_PAYMENT_TIMEOUT",
        "STOREFRONT_DEFAULT_CANCELLATION_REASON",
        "STOREFRONT_CURRENCY",
        "STOREFRONT_SEED_CATALOGUE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:
    def test_defaults(self, clean_env):
        settings = FulfillmentSettings.from_env()
        assert settings.low_stock_threshold == 10
        assert settings.payment_timeout == 5.0
        assert settings.default_cancellation_reason == "No reason provided"
        assert settings.currency == "USD"
        assert settings.seed_catalogue is True


class TestOverrides:
    def test_threshold(self, clean_env):
        clean_env.setenv("STOREFRONT_LOW_STOCK_THRESHOLD", "3")
        assert FulfillmentSettings.from_env().low_stock_threshold == 3

    def test_negative_threshold_is_rejected(self, clean_env):
        clean_env.setenv("STOREFRONT_LOW_STOCK_THRESHOLD", "-1")
        with pytest.raises(ValueError):
            FulfillmentSettings.from_env()

    @pytest.mark.parametrize("raw", ["", "none", "None"])
    def test_payment_timeout_can_be_disabled(self, clean_env, raw):
        clean_env.setenv("STOREFRONT_PAYMENT_TIMEOUT", raw)
        assert FulfillmentSettings.from_env().payment_timeout is None

    def test_payment_timeout_must_be_positive(self, clean_env):
        clean_env.setenv("STOREFRONT_PAYMENT_TIMEOUT", "0")
        with pytest.raises(ValueError):
            FulfillmentSettings.from_env()

    def test_blank_cancellation_reason_falls_back(self, clean_env):
        clean_env.setenv("STOREFRONT_DEFAULT_CANCELLATION_REASON", "   ")
        assert FulfillmentSettings.from_env().default_cancellation_reason == "No reason provided"

    @pytest.mark.parametrize("raw, expected", [("false", False), ("0", False), ("off", False), ("yes", True)])
    def test_seed_catalogue_flag(self, clean_env, raw, expected):
        clean_env.setenv("STOREFRONT_SEED_CATALOGUE", raw)
        assert FulfillmentSettings.from_env().seed_catalogue is expected
