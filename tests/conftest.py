"""Shared test fixtures for the FTX Derivatives client."""

import pytest

from ftx_derivatives.config import ApiSettings
from ftx_derivatives.convert import RecordConverter
from ftx_derivatives.precision import CurrencyPrecisionTable


@pytest.fixture
def api_settings() -> ApiSettings:
    """ApiSettings with a dummy key and a fake base URL."""
    return ApiSettings(
        api_key="test-api-key",  # type: ignore[arg-type]
        base_url="https://api.test.invalid",
        page_size=100,
    )


@pytest.fixture
def precision_table() -> CurrencyPrecisionTable:
    """Default table: USD=2, CBTC=8, ETH=9."""
    return CurrencyPrecisionTable()


@pytest.fixture
def converter(precision_table: CurrencyPrecisionTable) -> RecordConverter:
    return RecordConverter(precision_table)


@pytest.fixture
def transaction_payload() -> dict:
    """A raw USD deposit as returned by /funds/transactions (integer cents)."""
    return {
        "id": 1001,
        "created": "2021-06-01T12:00:00Z",
        "last_updated": "2021-06-01T12:00:05Z",
        "poly": "deposit_transaction",
        "amount": 100000,
        "debit_account_field_name": "available_balance",
        "credit_account_field_name": "available_balance",
        "settlement_id": None,
        "state": "executed",
        "deposit_notice_id": 7,
        "trade_id": None,
        "group_id": None,
        "asset": "USD",
        "debit_pre_balance": None,
        "debit_post_balance": None,
        "credit_pre_balance": 0,
        "credit_post_balance": 100000,
        "debit_participant_name": None,
        "credit_participant_name": "Test Participant",
        "net_change": 100000,
    }


@pytest.fixture
def option_payload() -> dict:
    """A BTC mini call option contract; strike in integer cents."""
    return {
        "derivative_type": "options_contract",
        "id": 22212774,
        "name": None,
        "is_call": True,
        "strike_price": 4000000,
        "min_increment": 100,
        "date_live": "2021-06-01T20:00:00Z",
        "date_expires": "2021-06-25T21:00:00Z",
        "date_exercise": "2021-06-25T21:00:00Z",
        "open_interest": 12,
        "multiplier": 100,
        "label": "BTC-Mini-25JUN2021-40000-Call",
        "active": True,
        "underlying_asset": "CBTC",
        "collateral_asset": "CBTC",
        "type": "call",
    }


@pytest.fixture
def swap_payload() -> dict:
    """A next-day BTC swap contract (no monetary fields)."""
    return {
        "derivative_type": "day_ahead_swap",
        "id": 22210648,
        "name": None,
        "min_increment": 100,
        "date_live": "2021-06-01T20:00:00Z",
        "date_expires": "2021-06-02T20:00:00Z",
        "date_exercise": "2021-06-02T20:00:00Z",
        "open_interest": 3,
        "multiplier": 100,
        "label": "BTC-Mini-02JUN2021-NextDay",
        "active": True,
        "is_next_day": True,
        "underlying_asset": "CBTC",
        "collateral_asset": "CBTC",
    }


@pytest.fixture
def ticker_payload() -> dict:
    return {
        "ask": "1520.5",
        "bid": "1490",
        "volume_24h": 42,
        "last_trade": {
            "id": 555,
            "price": "1500.00",
            "size": 2,
            "time": "2021-06-01T13:00:00Z",
        },
        "time": "2021-06-01T13:05:00Z",
    }


@pytest.fixture
def trade_payload() -> dict:
    return {
        "id": 9001,
        "contract_id": "22212774",
        "contract_label": "BTC-Mini-25JUN2021-40000-Call",
        "filled_price": 150000,
        "filled_size": 2,
        "fee": 30,
        "rebate": 0,
        "premium": 3000,
        "created": "2021-06-01T13:00:00Z",
        "order_type": "customer_limit_order",
        "order_id": "a1b2c3",
        "state": None,
        "status_type": "filled",
        "side": "bid",
        "execution_time": "2021-06-01T13:00:00Z",
    }
