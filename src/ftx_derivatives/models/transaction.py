"""Ledger transaction records.

Monetary fields are denominated in `asset`; their scale comes from the
precision table entry for that asset.
"""

from enum import Enum

from pydantic import AwareDatetime, Field

from ftx_derivatives.models.base import RawAmount, Record


class TransactionType(str, Enum):
    FEE = "fee_transaction"
    POSITION_LOCK = "position_lock_transaction"
    RELEASE_POSITION_LOCK = "release_position_lock_transaction"
    PREMIUM = "premium_transaction"
    DEPOSIT = "deposit_transaction"


class TransactionState(str, Enum):
    PENDING = "pending"
    CACHED = "cached"
    EXECUTED = "executed"
    FAILED = "failed"


class Transaction(Record):
    id: int
    created: AwareDatetime
    last_updated: AwareDatetime
    transaction_type: TransactionType = Field(alias="poly")
    amount: RawAmount
    debit_account_field_name: str
    credit_account_field_name: str
    settlement_id: int | None = None
    state: TransactionState
    deposit_notice_id: int | None = None
    trade_id: int | None = None
    group_id: str | None = None
    asset: str
    debit_pre_balance: RawAmount | None = None
    debit_post_balance: RawAmount | None = None
    credit_pre_balance: RawAmount | None = None
    credit_post_balance: RawAmount | None = None
    debit_participant_name: str | None = None
    credit_participant_name: str | None = None
    net_change: RawAmount  # signed; kept exactly as delivered
