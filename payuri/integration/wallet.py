from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..models import SUPPORTED_SCHEME, PaymentRequest
from ..uri_scheme import build_uri, parse


@dataclass
class PaymentReceiverConfig:
    """
    Simple configuration for the receiving side of a payment link
    (merchant, donation page, wallet "receive" screen).

    - address: where funds should go
    - label: name shown to the payer
    - scheme: URI scheme, only "bitcoin" is accepted by the encoder
    """

    address: str
    label: Optional[str] = None
    scheme: str = SUPPORTED_SCHEME


def build_payment_link(
    receiver: PaymentReceiverConfig,
    amount: Optional[float] = None,
    message: Optional[str] = None,
    extra_params: Optional[Dict[str, str]] = None,
) -> str:
    """
    Build a payment URI for a given receiver.

    This is what a merchant would render as a QR code or deep-link.
    """
    request = PaymentRequest(
        scheme=receiver.scheme,
        address=receiver.address,
        amount=amount,
        label=receiver.label,
        message=message,
        extra_params=dict(extra_params) if extra_params else None,
    )
    return build_uri(request)


def parse_payment_link_for(receiver: PaymentReceiverConfig, uri: str) -> PaymentRequest:
    """
    Decode a payment URI and make sure it pays the expected receiver.

    Raises PaymentURIError subclasses for malformed URIs and ValueError when
    the address does not match, so a link for somebody else is never shown
    as ours.
    """
    request = parse(uri)
    if request.address != receiver.address:
        raise ValueError("Payment URI address does not match expected receiver.")
    return request


def verify_payment_link(
    receiver: PaymentReceiverConfig,
    uri: str,
    *,
    expected_amount: Optional[float] = None,
) -> bool:
    """
    Fail-closed check of an incoming payment link.

    It performs:
    - decoding of the URI
    - address matching against the receiver
    - amount matching (when expected_amount is given)
    """
    try:
        request = parse_payment_link_for(receiver, uri)
    except ValueError:
        return False

    if expected_amount is not None and request.amount != expected_amount:
        return False
    return True
