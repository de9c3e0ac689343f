"""Helpers for payment history, expiry and idempotent operation ids."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from bidwallet.wallet import PaymentIntent, TransactionType, WalletTransaction

PAYMENT_EXPIRY = timedelta(minutes=10)
IDEMPOTENCY_KEY_MAX_CHARS = 128

_FNV_OFFSET_BASIS = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_U64_MASK = (1 << 64) - 1

_DATE_TIME = r"(\d{4})-(\d{2})-(\d{2})"
_RFC3339 = re.compile(
    _DATE_TIME + r"[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)
_SPACED_OFFSET = re.compile(
    _DATE_TIME + r" (\d{2}):(\d{2}):(\d{2})(?:\.(\d+))? ([+-]\d{2}:\d{2})"
)
_NAIVE = re.compile(_DATE_TIME + r" (\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?")


def dedupe_top_up_history(
    history: Iterable[WalletTransaction],
) -> list[WalletTransaction]:
    """Keep only the first (newest) TOP_UP row for each correlation id."""
    seen: set[str] = set()
    kept = []
    for tx in history:
        if tx.transaction_type is TransactionType.TOP_UP and tx.correlation_id is not None:
            if tx.correlation_id in seen:
                continue
            seen.add(tx.correlation_id)
        kept.append(tx)
    return kept


def filter_unpaid_without_settled_top_up(
    unpaid: Iterable[PaymentIntent],
    history: Iterable[WalletTransaction],
) -> list[PaymentIntent]:
    """Drop unpaid payments whose id already has a TOP_UP in the history."""
    settled = {
        tx.correlation_id
        for tx in history
        if tx.transaction_type is TransactionType.TOP_UP and tx.correlation_id is not None
    }
    return [payment for payment in unpaid if payment.id not in settled]


def _offset(text: str) -> timezone:
    if text in ("Z", "z"):
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    hours, minutes = int(text[1:3]), int(text[4:6])
    if hours > 23 or minutes > 59:
        raise ValueError("offset out of range")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _build(match: re.Match[str], tz: timezone) -> datetime:
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction = match.group(7) or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)


def parse_payment_created_at(created_at: str) -> datetime | None:
    """Parse a stored creation time into an aware UTC datetime, or None."""
    for pattern in (_RFC3339, _SPACED_OFFSET):
        match = pattern.fullmatch(created_at)
        if match:
            try:
                return _build(match, _offset(match.group(8))).astimezone(timezone.utc)
            except ValueError:
                pass
    match = _NAIVE.fullmatch(created_at)
    if match:
        try:
            return _build(match, timezone.utc)
        except ValueError:
            return None
    return None


def _to_rfc3339(moment: datetime) -> str:
    if moment.microsecond == 0:
        timespec = "seconds"
    elif moment.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"
    return moment.isoformat(timespec=timespec)


def payment_expires_at(created_at: str) -> str:
    """Expiry time of a payment; the input unchanged if it cannot be parsed."""
    created = parse_payment_created_at(created_at)
    if created is None:
        return created_at
    return _to_rfc3339(created + PAYMENT_EXPIRY)


def payment_is_expired(created_at: str, now: datetime | None = None) -> bool:
    """Whether the payment's expiry window has passed; False if unparseable."""
    created = parse_payment_created_at(created_at)
    if created is None:
        return False
    if now is None:
        now = datetime.now(timezone.utc)
    return now >= created + PAYMENT_EXPIRY


def normalize_idempotency_key(value: str | None) -> str | None:
    """Trim the key, drop it if blank, and cut it to 128 characters."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    return value[:IDEMPOTENCY_KEY_MAX_CHARS]


def normalized_correlation_id(value: str | None) -> str | None:
    """Trim the id and drop it if blank."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def idempotent_operation_id(prefix: str, user_id: str, role: str, key: str) -> str:
    """Deterministic id from a 64-bit FNV-1a hash of user, role and key."""
    digest = _FNV_OFFSET_BASIS
    for byte in f"{user_id}:{role}:{key}".encode():
        digest ^= byte
        digest = (digest * _FNV_PRIME) & _U64_MASK
    return f"{prefix}-{digest:016x}"