"""
Integration helpers for payment request URIs.

This package hosts helpers for wallets and merchant tools that hand out or
receive payment links.
"""

from .wallet import (
    PaymentReceiverConfig,
    build_payment_link,
    parse_payment_link_for,
    verify_payment_link,
)

__all__: list[str] = [
    "PaymentReceiverConfig",
    "build_payment_link",
    "parse_payment_link_for",
    "verify_payment_link",
]
