"""Wallet domain model, service errors, validation chains and payment helpers for an auction marketplace."""

__version__ = "0.1.0"
__all__ = ["errors", "payment_status", "payments", "validation", "wallet"]