"""
MIT License
Copyright (c) 2025 DarekDGB

Payment request URI scheme.

This module is the single source of truth for bitcoin: payment URIs.

Format:
    bitcoin:<address>[?key1=value1[&key2=value2...]]

Rules:
- Scheme is case-sensitive and MUST be "bitcoin" in both directions.
- The address is opaque: copied verbatim on build, never percent-decoded on parse.
- Query keys and values are percent-encoded on build and percent-decoded on parse.
- amount / label / message are promoted to named fields; everything else is
  an extra parameter.
- Extra parameters are applied last when building, so they override a named
  field with the same key.
- Exactly one ":" may appear in a URI; it separates scheme and address.
- Query tokens without exactly one "=" are skipped on parse, never an error.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from typing import Dict, Optional
from urllib.parse import quote, unquote, urlsplit

from .errors import (
    InvalidAmountError,
    InvalidSchemeError,
    NegativeAmountError,
    PaymentURIError,
    URLParseError,
)
from .models import SUPPORTED_SCHEME, PaymentRequest

logger = logging.getLogger(__name__)


_AMOUNT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

# RFC 3986 unreserved + reserved characters, plus "%" for escapes.
_URI_CHARS_RE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _check_amount(amount: float) -> float:
    if math.isnan(amount):
        raise InvalidAmountError(f"Amount must be finite: {amount!r}")
    if amount < 0:
        raise NegativeAmountError(f"Amount must not be negative: {amount!r}")
    if math.isinf(amount):
        raise InvalidAmountError(f"Amount must be finite: {amount!r}")
    return amount


def _format_amount(amount: float) -> str:
    """
    Shortest decimal string that round-trips the float, without exponent.

    100.0 -> "100", 0.5 -> "0.5", 1e-08 -> "0.00000001"
    """
    if amount == 0:
        return "0"
    text = format(Decimal(repr(amount)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _parse_amount(raw: str) -> float:
    if not _AMOUNT_RE.fullmatch(raw):
        raise InvalidAmountError(f"Amount is not a number: {raw!r}")
    return _check_amount(float(raw))


def _quote_component(value: str) -> str:
    return quote(str(value), safe="")


def _validate_uri_syntax(uri: str) -> None:
    if not _URI_CHARS_RE.fullmatch(uri) or _BAD_ESCAPE_RE.search(uri):
        raise URLParseError(f"Invalid characters in payment URI: {uri!r}")
    try:
        parts = urlsplit(uri)
    except ValueError as exc:
        raise URLParseError(f"Malformed payment URI: {uri!r}") from exc
    if parts.scheme != SUPPORTED_SCHEME:
        raise URLParseError(f"Malformed payment URI: {uri!r}")


def _extract_query_params(query: str) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for token in query.split("&"):
        pieces = token.split("=")
        if len(pieces) != 2:
            if token:
                logger.debug("Skipping malformed query token %r", token)
            continue
        key, value = pieces
        params[unquote(key)] = unquote(value)
    return params


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_uri(request: PaymentRequest) -> str:
    """
    Encode a PaymentRequest as a bitcoin: URI.

    Raises InvalidSchemeError, NegativeAmountError, InvalidAmountError
    (NaN / infinite amount) or URLParseError (address that cannot appear
    unescaped in a URI).
    """
    if request.scheme != SUPPORTED_SCHEME:
        raise InvalidSchemeError(f"Unsupported payment URI scheme: {request.scheme!r}")
    if not isinstance(request.address, str):
        raise URLParseError("Payment address must be a string.")

    uri = f"{request.scheme}:{request.address}"

    params: Dict[str, str] = {}
    if request.amount is not None:
        try:
            amount = float(request.amount)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidAmountError(f"Amount is not a number: {request.amount!r}") from exc
        params["amount"] = _format_amount(_check_amount(amount))
    if request.label is not None:
        params["label"] = request.label
    if request.message is not None:
        params["message"] = request.message
    # Extras always win over the named fields.
    for key, value in (request.extra_params or {}).items():
        params[key] = value

    if params:
        query = "&".join(
            f"{_quote_component(k)}={_quote_component(v)}" for k, v in params.items()
        )
        uri = f"{uri}?{query}"

    _validate_uri_syntax(uri)
    return uri


def parse(uri: str) -> PaymentRequest:
    """
    Decode a bitcoin: URI into a new PaymentRequest.

    The URI must contain exactly one ":", separating the scheme from the
    address and the optional query. Colons inside query values must be
    percent-encoded (build_uri always does so).
    """
    if not isinstance(uri, str):
        raise InvalidSchemeError("Payment URI must be a string.")

    pieces = uri.split(":")
    if len(pieces) != 2:
        raise InvalidSchemeError("Payment URI must contain exactly one ':' separator.")
    scheme, tail = pieces
    if scheme != SUPPORTED_SCHEME:
        raise InvalidSchemeError(f"Unsupported payment URI scheme: {scheme!r}")

    address, _, query = tail.partition("?")
    params = _extract_query_params(query)

    amount: Optional[float] = None
    if "amount" in params:
        amount = _parse_amount(params.pop("amount"))

    return PaymentRequest(
        scheme=scheme,
        address=address,
        amount=amount,
        label=params.pop("label", None),
        message=params.pop("message", None),
        extra_params=params,
    )


def is_payment_uri(uri: str) -> bool:
    """Fail-closed check: True only when parse(uri) succeeds."""
    try:
        parse(uri)
    except PaymentURIError:
        return False
    return True
