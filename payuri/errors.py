"""
MIT License
Copyright (c) 2025 DarekDGB

Error taxonomy for payment request URIs.

Every error derives from ValueError: malformed input is a ValueError across
this package, so callers that only care about "bad URI" can catch that.
"""

from __future__ import annotations


class PaymentURIError(ValueError):
    pass


class InvalidSchemeError(PaymentURIError):
    """Scheme token is missing or is not the supported one."""


class NegativeAmountError(PaymentURIError):
    """Amount is present and below zero."""


class InvalidAmountError(PaymentURIError):
    """Amount is present but is not a finite decimal number."""


class URLParseError(PaymentURIError):
    """Assembled URI is not syntactically valid."""
