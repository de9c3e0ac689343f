# bidwallet

The core wallet logic for an auction marketplace. It keeps active and held
balances in whole rupiah and records every balance change as a transaction.
It also validates wallet commands and provides helpers for payment intents,
payment expiry and idempotency.

The package is plain Python and has no runtime dependencies.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## The wallet model

`bidwallet.wallet` holds the domain types.

- `Money` is an immutable, non-negative amount in whole rupiah. You create it with `Money.from_rupiah`, `Money.from_cents` (the same value) or `Money.zero()`. It compares and orders by value and supports `+` and `-`. Subtracting a larger amount raises `ValueError`. A negative or non-integer value also raises an error.
- `Wallet(user_id, role)` holds `active_balance` and `held_balance`. A new wallet starts at zero and gets a random UUID string as its `id`. Each operation returns a `WalletTransaction` receipt. Every operation rejects a zero amount.
  - `top_up`: increases the active balance.
  - `withdraw`: decreases the active balance.
  - `hold` and `bid`: move an amount from active to held.
  - `release`: moves an amount from held to active.
  - `convert`: removes an amount from held.
  - `payout`: increases the active balance.
  - `credit_seller_escrow`: increases the held balance.
  - `settle_seller_escrow`: moves an amount from held to active.
- `TransactionType` is an enum of transaction kinds. Each kind's value is its wire name, such as `"TOP_UP"` or `"SELLER_ESCROW_SETTLE"`. `TransactionType.from_wire_value` converts a wire name back into a kind and raises `ValueError` for an unknown name.
- `WalletTransaction` records one mutation. Its `id` is the nil UUID until it is stored. `WalletTransaction.builder(user_id, role, transaction_type, amount)` returns a builder. You can chain `with_correlation_id` and `with_source_service` on it, then call `build()`.
- `HoldStatus` has the values `ACTIVE`, `RELEASED` and `CONVERTED`. `HoldStatus.parse` raises `ValueError` for an unknown value.
- `Hold`, `PaymentIntent` and `WalletWithdrawal` are plain records for holds, top-up intents and withdrawals.

A failed operation raises a subclass of `WalletError` and leaves the balances unchanged:

- `InvalidAmountError`
- `InsufficientActiveBalanceError`
- `InsufficientHeldBalanceError`

## Errors

`bidwallet.errors` defines `ServiceError` and its subclasses:

| Error | Meaning |
| --- | --- |
| `WalletNotFoundError(user_id, role)` | No wallet exists for that user and role. |
| `DomainError(wallet_error)` | Wraps a `WalletError`. |
| `PersistenceError(cause)` | A storage failure. |
| `TransactionNotFoundError(transaction_id)` | No record has that id. |
| `ForbiddenAccessError()` | Access to the record is not allowed. |
| `HoldFailedError(message)` | A hold or escrow operation failed. |
| `InvalidPaymentStatusError(status)` | A payment status or detail was rejected. |
| `GatewayFailureError(message)` | The payment gateway reported an error. |

## Validation

`bidwallet.validation.WalletValidationChain` runs a sequence of `WalletValidationLink` checks on a `WalletCommandContext`. The links run in order, and the first failure raises its error. The context fields are:

- `user_id`
- `role`
- `amount`
- `correlation_id`
- `status`

The links are:

- `IdentityValidationLink`: raises `ForbiddenAccessError` if the user id or the role is blank.
- `AmountValidationLink`: raises `DomainError` if the amount is zero.
- `CorrelationValidationLink`: raises `HoldFailedError` if a correlation id is given but blank.
- `PaymentStatusValidationLink`: raises `InvalidPaymentStatusError` if the status is missing or unknown.

There are three ready-made chains, and you can also pass your own links to `WalletValidationChain(links)`:

| Chain | Links |
| --- | --- |
| `wallet_mutation()` | identity, amount |
| `hold_command()` | identity, amount, correlation |
| `payment_status()` | payment status |

## Payment helpers

`bidwallet.payment_status.PaymentStatusStrategy` covers the statuses `PAID`, `FAILED`, `EXPIRED` and `PENDING`. `parse` returns `None` for any other string.

`bidwallet.payments` provides these helpers:

- `parse_payment_created_at` reads three forms of timestamp and returns an aware UTC datetime, or `None` if it cannot parse the string:
  - RFC 3339 timestamps.
  - `YYYY-MM-DD HH:MM:SS[.f] +HH:MM`.
  - Naive `YYYY-MM-DD HH:MM:SS[.f]`, which it treats as UTC.
- `payment_expires_at` returns the creation time plus ten minutes as an RFC 3339 string. If it cannot parse the input, it returns the input unchanged.
- `payment_is_expired(created_at, now=None)` tells whether the ten-minute window has passed. It returns `False` for a timestamp it cannot parse.
- `dedupe_top_up_history` keeps only the first `TOP_UP` per correlation id. The history is expected newest-first.
- `filter_unpaid_without_settled_top_up` drops unpaid intents whose id already appears as a `TOP_UP` correlation id.
- `normalize_idempotency_key` trims the key, drops it if blank, and cuts it to 128 characters.
- `normalized_correlation_id` trims the id and drops it if blank.
- `idempotent_operation_id(prefix, user_id, role, key)` returns `"<prefix>-<16 hex digits>"`. The hex digits are a 64-bit FNV-1a hash of `user_id:role:key`.

## Example

```python
from bidwallet.wallet import Money, Wallet

wallet = Wallet("user-1", "BUYER")
wallet.top_up(Money.from_rupiah(10_000))
receipt = wallet.hold(Money.from_rupiah(4_000))
print(receipt.transaction_type, wallet.active_balance, wallet.held_balance)
# HOLD 6000 4000
```

## What this package does not do

This package is only the domain and helper layer. It does not include:

- storage for wallets, transactions, holds, payment intents or withdrawals;
- a service layer that loads, mutates and persists wallets;
- calls to a payment gateway;
- an HTTP or RPC server;
- a background job that releases expired holds.

The error classes in `bidwallet.errors` are defined for such a layer to raise.

## Running the tests

```
pytest
```