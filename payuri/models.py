"""
Core data model for payment request URIs.

A PaymentRequest describes a single payment link:
- scheme (only "bitcoin" is supported)
- address (opaque payment target)
- optional amount / label / message
- any extra query parameters

Construction never validates. Encoding and decoding do (see uri_scheme.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


SUPPORTED_SCHEME = "bitcoin"

# Query keys that are promoted to named fields.
RESERVED_PARAMS = ("amount", "label", "message")


@dataclass(frozen=True)
class PaymentRequest:
    """
    Structured payment request.

    `amount` is expressed in the scheme's base unit (BTC for "bitcoin").
    `extra_params` holds every query parameter other than amount/label/message.
    The decoder always sets it to a dict; callers building a request may
    leave it as None.

    Instances compare by value but are not hashable (extra_params is a dict).
    """
    __hash__ = None  # type: ignore[assignment]

    scheme: str
    address: str

    amount: Optional[float] = None
    label: Optional[str] = None
    message: Optional[str] = None

    extra_params: Optional[Dict[str, str]] = None
