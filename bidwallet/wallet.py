"""Wallet domain model: money, balances, transactions, holds and payment records."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum

NIL_UUID = uuid.UUID(int=0)


@dataclass(frozen=True, order=True)
class Money:
    """Monetary value stored as whole rupiah; immutable and never negative."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("money value must be an integer")
        if self.value < 0:
            raise ValueError("money value cannot be negative")

    @classmethod
    def from_rupiah(cls, value: int) -> Money:
        return cls(value)

    @classmethod
    def from_cents(cls, value: int) -> Money:
        return cls.from_rupiah(value)

    @classmethod
    def zero(cls) -> Money:
        return cls(0)

    def rupiah(self) -> int:
        return self.value

    def cents(self) -> int:
        return self.rupiah()

    def is_zero(self) -> bool:
        return self.value == 0

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.value + other.value)

    def __sub__(self, other: object) -> Money:
        """Subtract; raises ValueError on underflow, so callers validate first."""
        if not isinstance(other, Money):
            return NotImplemented
        if other.value > self.value:
            raise ValueError("Money subtraction underflow")
        return Money(self.value - other.value)

    def __str__(self) -> str:
        return str(self.value)


class TransactionType(Enum):
    """Kinds of wallet mutation, valued by their wire-format names."""

    TOP_UP = "TOP_UP"
    WITHDRAW = "WITHDRAW"
    HOLD = "HOLD"
    RELEASE = "RELEASE"
    CONVERT = "CONVERT"
    PAYOUT = "PAYOUT"
    SELLER_ESCROW = "SELLER_ESCROW"
    SELLER_ESCROW_SETTLE = "SELLER_ESCROW_SETTLE"
    BID = "BID"
    CANCEL_BID = "CANCEL_BID"
    TOP_UP_FAILED = "TOP_UP_FAILED"
    TOP_UP_EXPIRED = "TOP_UP_EXPIRED"
    WITHDRAW_FAILED = "WITHDRAW_FAILED"
    WITHDRAW_EXPIRED = "WITHDRAW_EXPIRED"

    @classmethod
    def from_wire_value(cls, value: str) -> TransactionType:
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown transaction type: {value}") from None

    def __str__(self) -> str:
        return self.value


class WalletError(Exception):
    """Base class for domain-level wallet failures."""


class InvalidAmountError(WalletError):
    def __init__(self) -> None:
        super().__init__("amount must be greater than zero")


class InsufficientActiveBalanceError(WalletError):
    def __init__(self) -> None:
        super().__init__("insufficient active balance")


class InsufficientHeldBalanceError(WalletError):
    def __init__(self) -> None:
        super().__init__("insufficient held balance")


@dataclass
class WalletTransaction:
    """Record of a single wallet mutation."""

    user_id: str
    role: str
    transaction_type: TransactionType
    amount: Money
    id: uuid.UUID = NIL_UUID
    created_at: str | None = None
    correlation_id: str | None = None
    source_service: str | None = None

    @classmethod
    def builder(
        cls,
        user_id: str,
        role: str,
        transaction_type: TransactionType,
        amount: Money,
    ) -> WalletTransactionBuilder:
        return WalletTransactionBuilder(user_id, role, transaction_type, amount)


@dataclass
class WalletTransactionBuilder:
    """Builds a WalletTransaction, setting optional fields by chaining."""

    user_id: str
    role: str
    transaction_type: TransactionType
    amount: Money
    correlation_id: str | None = None
    source_service: str | None = None

    def with_correlation_id(self, correlation_id: str) -> WalletTransactionBuilder:
        """Associate the transaction with an external id, such as a payment id."""
        self.correlation_id = correlation_id
        return self

    def with_source_service(self, source_service: str) -> WalletTransactionBuilder:
        """Tag the service the transaction originated from."""
        self.source_service = source_service
        return self

    def build(self) -> WalletTransaction:
        return WalletTransaction(
            user_id=self.user_id,
            role=self.role,
            transaction_type=self.transaction_type,
            amount=self.amount,
            correlation_id=self.correlation_id,
            source_service=self.source_service,
        )


def _new_wallet_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Wallet:
    """A user's wallet holding active and held balances.

    Each mutating method returns a WalletTransaction receipt on success and
    raises a WalletError, leaving the balances untouched, on failure.
    """

    user_id: str
    role: str
    id: str = field(default_factory=_new_wallet_id)
    active_balance: Money = Money(0)
    held_balance: Money = Money(0)
    version: int = 0

    def top_up(self, amount: Money) -> WalletTransaction:
        self._validate_positive(amount)
        self.active_balance = self.active_balance + amount
        return self._record(TransactionType.TOP_UP, amount)

    def withdraw(self, amount: Money) -> WalletTransaction:
        self._validate_positive(amount)
        self._require_active_balance(amount)
        self.active_balance = self.active_balance - amount
        return self._record(TransactionType.WITHDRAW, amount)

    def hold(self, amount: Money) -> WalletTransaction:
        self._validate_positive(amount)
        self._require_active_balance(amount)
        self.active_balance = self.active_balance - amount
        self.held_balance = self.held_balance + amount
        return self._record(TransactionType.HOLD, amount)

    def release(self, amount: Money) -> WalletTransaction:
        self._validate_positive(amount)
        self._require_held_balance(amount)
        self.held_balance = self.held_balance - amount
        self.active_balance = self.active_balance + amount
        return self._record(TransactionType.RELEASE, amount)

    def convert(self, amount: Money) -> WalletTransaction:
        self._validate_positive(amount)
        self._require_held_balance(amount)
        self.held_balance = self.held_balance - amount
        return self._record(TransactionType.CONVERT, amount)

    def payout(self, amount: Money) -> WalletTransaction:
        self._validate_positive(amount)
        self.active_balance = self.active_balance + amount
        return self._record(TransactionType.PAYOUT, amount)

    def credit_seller_escrow(self, amount: Money) -> WalletTransaction:
        """Credit pending sale proceeds to the held balance."""
        self._validate_positive(amount)
        self.held_balance = self.held_balance + amount
        return self._record(TransactionType.SELLER_ESCROW, amount)

    def settle_seller_escrow(self, amount: Money) -> WalletTransaction:
        """Move escrowed sale proceeds from held to active."""
        self._validate_positive(amount)
        self._require_held_balance(amount)
        self.held_balance = self.held_balance - amount
        self.active_balance = self.active_balance + amount
        return self._record(TransactionType.SELLER_ESCROW_SETTLE, amount)

    def bid(self, amount: Money) -> WalletTransaction:
        self._validate_positive(amount)
        self._require_active_balance(amount)
        self.active_balance = self.active_balance - amount
        self.held_balance = self.held_balance + amount
        return self._record(TransactionType.BID, amount)

    @staticmethod
    def _validate_positive(amount: Money) -> None:
        if amount.is_zero():
            raise InvalidAmountError()

    def _require_active_balance(self, amount: Money) -> None:
        if self.active_balance < amount:
            raise InsufficientActiveBalanceError()

    def _require_held_balance(self, amount: Money) -> None:
        if self.held_balance < amount:
            raise InsufficientHeldBalanceError()

    def _record(self, transaction_type: TransactionType, amount: Money) -> WalletTransaction:
        return WalletTransaction(self.user_id, self.role, transaction_type, amount)


class HoldStatus(Enum):
    ACTIVE = "ACTIVE"
    RELEASED = "RELEASED"
    CONVERTED = "CONVERTED"

    @classmethod
    def parse(cls, value: str) -> HoldStatus:
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown hold status: {value}") from None

    def __str__(self) -> str:
        return self.value


@dataclass
class Hold:
    id: str
    wallet_id: str
    auction_id: str
    bid_id: str
    amount: int
    status: HoldStatus
    expires_at: str
    created_at: str
    updated_at: str


@dataclass
class PaymentIntent:
    id: str
    user_id: str
    role: str
    amount: int
    status: str
    redirect_url: str
    va_number: str | None
    payment_channel: str | None
    created_at: str
    updated_at: str


@dataclass
class WalletWithdrawal:
    id: str
    user_id: str
    role: str
    amount: int
    bank_account: str
    bank_code: str | None
    account_number: str | None
    account_name: str | None
    payout_reference: str | None
    failure_reason: str | None
    status: str
    created_at: str
    updated_at: str