"""
payuri: build and parse bitcoin: payment request URIs.
"""

from .errors import (
    InvalidAmountError,
    InvalidSchemeError,
    NegativeAmountError,
    PaymentURIError,
    URLParseError,
)
from .models import RESERVED_PARAMS, SUPPORTED_SCHEME, PaymentRequest
from .uri_scheme import build_uri, is_payment_uri, parse

__all__: list[str] = [
    "PaymentRequest",
    "SUPPORTED_SCHEME",
    "RESERVED_PARAMS",
    "build_uri",
    "parse",
    "is_payment_uri",
    "PaymentURIError",
    "InvalidSchemeError",
    "NegativeAmountError",
    "InvalidAmountError",
    "URLParseError",
]
