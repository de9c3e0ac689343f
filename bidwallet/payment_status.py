"""Payment intent statuses as carried on the wire."""

from __future__ import annotations

from enum import Enum


class PaymentStatusStrategy(Enum):
    """The statuses a payment intent can be moved to."""

    PAID = "PAID"
    FAILED = "FAILED"
    EXPIRED = "EXPIRED"
    PENDING = "PENDING"

    @classmethod
    def parse(cls, status: str) -> PaymentStatusStrategy | None:
        """Return the status for an exact wire value, or None if it is unknown."""
        try:
            return cls(status)
        except ValueError:
            return None

    def as_wire_value(self) -> str:
        return self.value