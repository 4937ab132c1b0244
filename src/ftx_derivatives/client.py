"""FTX Derivatives (LedgerX) API client over httpx.

Every request carries the `Authorization: JWT <key>` header. List
endpoints return a `{meta, data}` envelope; only `data` is surfaced and
only the first page (`limit` = ApiSettings.page_size) is fetched.
Records are normalized by RecordConverter before they are returned.
"""

import json
from decimal import Decimal
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from ftx_derivatives.balances import aggregate_balances
from ftx_derivatives.batch import fetch_many, fetch_many_settled
from ftx_derivatives.config import ApiSettings, AppSettings
from ftx_derivatives.convert import RecordConverter
from ftx_derivatives.exceptions import (
    DeserializationError,
    FTXDerivativesError,
    TransportError,
)
from ftx_derivatives.logging import get_logger
from ftx_derivatives.models import (
    ContractTicker,
    DataEnvelope,
    ListEnvelope,
    Position,
    Trade,
    Transaction,
)
from ftx_derivatives.precision import CurrencyPrecisionTable

logger = get_logger(__name__)

T = TypeVar("T")

POSITIONS_PATH = "/trading/positions"
TRANSACTIONS_PATH = "/funds/transactions"
TRADES_PATH = "/trading/trades"
CONTRACT_TICKER_PATH = "/trading/contracts/{contract_id}/ticker"


class FTXDerivativesClient:
    """Async client for the FTX Derivatives REST API.

    Use as an async context manager, or call close() when done:

        async with FTXDerivativesClient(settings) as client:
            balances = await client.get_balances()

    Args:
        settings: API connection settings (key, base URL, page size).
        precision_table: Currency precision table; defaults to the built-in one.
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
    """

    def __init__(
        self,
        settings: ApiSettings,
        precision_table: CurrencyPrecisionTable | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._converter = RecordConverter(precision_table)
        self._http = httpx.AsyncClient(
            base_url=settings.base_url,
            headers={"Authorization": f"JWT {settings.api_key.get_secret_value()}"},
            timeout=httpx.Timeout(settings.timeout_seconds),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "FTXDerivativesClient":
        """Build a client whose precision table comes from settings.precision."""
        return cls(
            settings.api,
            precision_table=CurrencyPrecisionTable.from_settings(settings.precision),
            transport=transport,
        )

    async def __aenter__(self) -> "FTXDerivativesClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self._http.aclose()

    @property
    def precision_table(self) -> CurrencyPrecisionTable:
        return self._converter.table

    # ──────────────────────────────────────────────
    # Public endpoints
    # ──────────────────────────────────────────────

    async def get_positions(self) -> list[Position]:
        """Return positions with each owned contract normalized."""
        positions = await self._get_list(POSITIONS_PATH, Position)
        return [self._converter.convert_position(p) for p in positions]

    async def get_transactions(self) -> list[Transaction]:
        """Return ledger transactions normalized to each asset's precision."""
        transactions = await self._get_list(TRANSACTIONS_PATH, Transaction)
        return [self._converter.convert_transaction(t) for t in transactions]

    async def get_trades(self) -> list[Trade]:
        trades = await self._get_list(TRADES_PATH, Trade)
        return [self._converter.convert_trade(t) for t in trades]

    async def get_contract_ticker(self, contract_id: int) -> ContractTicker:
        """Return the normalized ticker for a single contract."""
        path = CONTRACT_TICKER_PATH.format(contract_id=contract_id)
        body = await self._get(path)
        envelope = self._decode(path, body, DataEnvelope[ContractTicker])
        return self._converter.convert_ticker(envelope.data)

    async def get_contracts_ticker(self, contract_ids: list[int]) -> dict[int, ContractTicker]:
        """Fetch tickers for many contracts concurrently.

        All-or-nothing: if any single fetch fails the whole call raises that
        error, without saying which contract failed.
        """
        return await fetch_many(contract_ids, self.get_contract_ticker)

    async def get_contracts_ticker_settled(
        self, contract_ids: list[int]
    ) -> dict[int, ContractTicker | FTXDerivativesError]:
        """Fetch tickers for many contracts, keeping each contract's error."""
        return await fetch_many_settled(contract_ids, self.get_contract_ticker)

    async def get_balances(self) -> dict[str, Decimal]:
        """Return per-asset balances summed from transaction history.

        Only the first page of transactions is available, so balances cover
        at most ApiSettings.page_size transactions.
        """
        transactions = await self.get_transactions()
        return aggregate_balances(transactions, self._converter.table)

    # ──────────────────────────────────────────────
    # Transport and decoding
    # ──────────────────────────────────────────────

    async def _get_list(self, path: str, record_type: type[T]) -> list[T]:
        # TODO: follow meta.next once the venue's offset paging is supported
        body = await self._get(path, params={"limit": self._settings.page_size})
        envelope = self._decode(path, body, ListEnvelope[record_type])  # type: ignore[valid-type]

        if envelope.meta.total_count > len(envelope.data):
            logger.warning(
                "list_truncated",
                path=path,
                returned=len(envelope.data),
                total_count=envelope.meta.total_count,
            )
        logger.info("list_fetched", path=path, count=len(envelope.data))
        return envelope.data

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> str:
        logger.debug("request_sent", path=path, params=params)
        try:
            response = await self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.error("request_failed", path=path, error=str(exc))
            raise TransportError(f"GET {path} failed: {exc}") from exc

        if response.is_error:
            logger.error("request_rejected", path=path, status_code=response.status_code)
            raise TransportError(
                f"GET {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response.text

    def _decode(self, path: str, body: str, model: type[T]) -> T:
        try:
            payload = json.loads(body, parse_float=Decimal)
            return model.model_validate(payload)  # type: ignore[attr-defined]
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.error("response_decode_failed", path=path, body=body, error=str(exc))
            raise DeserializationError(f"unexpected response from {path}", body=body) from exc
