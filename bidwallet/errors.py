"""Service-level errors combining domain, persistence and gateway failures."""

from __future__ import annotations

from bidwallet.wallet import WalletError


class ServiceError(Exception):
    """Base class for every failure reported by the wallet service layer."""


class WalletNotFoundError(ServiceError):
    """No wallet exists for the given user and role."""

    def __init__(self, user_id: str, role: str) -> None:
        self.user_id = user_id
        self.role = role
        super().__init__(f"wallet not found for user {user_id} with role {role}")


class DomainError(ServiceError):
    """A domain rule of the wallet was broken."""

    def __init__(self, error: WalletError) -> None:
        self.error = error
        super().__init__(str(error))
        self.__cause__ = error


class PersistenceError(ServiceError):
    """The storage layer failed."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"persistence error: {cause}")
        if isinstance(cause, BaseException):
            self.__cause__ = cause


class TransactionNotFoundError(ServiceError):
    """A transaction, payment or withdrawal with the given id does not exist."""

    def __init__(self, transaction_id: str) -> None:
        self.transaction_id = transaction_id
        super().__init__(f"transaction not found: {transaction_id}")


class ForbiddenAccessError(ServiceError):
    """The caller may not access the requested record."""

    def __init__(self) -> None:
        super().__init__("forbidden transaction access")


class HoldFailedError(ServiceError):
    """A hold, release, convert or escrow operation failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"hold operation failed: {message}")


class InvalidPaymentStatusError(ServiceError):
    """A payment status, bank detail or payout reference was not acceptable."""

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(f"invalid payment status: {status}")


class GatewayFailureError(ServiceError):
    """The payment gateway reported an error."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"midtrans error: {message}")