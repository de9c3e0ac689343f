"""Chains of validation links run before wallet commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from bidwallet.errors import (
    DomainError,
    ForbiddenAccessError,
    HoldFailedError,
    InvalidPaymentStatusError,
)
from bidwallet.payment_status import PaymentStatusStrategy
from bidwallet.wallet import InvalidAmountError, Money


@dataclass(frozen=True)
class WalletCommandContext:
    """What a wallet command carries, as seen by the validation links."""

    user_id: str = ""
    role: str = ""
    amount: Money | None = None
    correlation_id: str | None = None
    status: str | None = None


class WalletValidationLink(ABC):
    """One check in a validation chain; raises a ServiceError on failure."""

    @abstractmethod
    def validate(self, context: WalletCommandContext) -> None:
        """Raise if the context fails this check."""


class IdentityValidationLink(WalletValidationLink):
    """Requires a non-blank user id and role."""

    def validate(self, context: WalletCommandContext) -> None:
        if not context.user_id.strip() or not context.role.strip():
            raise ForbiddenAccessError()


class AmountValidationLink(WalletValidationLink):
    """Rejects a zero amount when one is given."""

    def validate(self, context: WalletCommandContext) -> None:
        if context.amount is not None and context.amount.is_zero():
            raise DomainError(InvalidAmountError())


class CorrelationValidationLink(WalletValidationLink):
    """Rejects a blank correlation id when one is given."""

    def validate(self, context: WalletCommandContext) -> None:
        if context.correlation_id is not None and not context.correlation_id.strip():
            raise HoldFailedError("correlation id is required")


class PaymentStatusValidationLink(WalletValidationLink):
    """Requires a status that is one of the known payment wire values."""

    def validate(self, context: WalletCommandContext) -> None:
        if context.status is None:
            raise InvalidPaymentStatusError("missing status")
        if PaymentStatusStrategy.parse(context.status) is None:
            raise InvalidPaymentStatusError(context.status)


class WalletValidationChain:
    """Runs its links in order; the first failure propagates."""

    def __init__(self, links: Iterable[WalletValidationLink]) -> None:
        self.links: tuple[WalletValidationLink, ...] = tuple(links)

    @classmethod
    def wallet_mutation(cls) -> WalletValidationChain:
        return cls([IdentityValidationLink(), AmountValidationLink()])

    @classmethod
    def hold_command(cls) -> WalletValidationChain:
        return cls(
            [IdentityValidationLink(), AmountValidationLink(), CorrelationValidationLink()]
        )

    @classmethod
    def payment_status(cls) -> WalletValidationChain:
        return cls([PaymentStatusValidationLink()])

    def validate(self, context: WalletCommandContext) -> None:
        for link in self.links:
            link.validate(context)