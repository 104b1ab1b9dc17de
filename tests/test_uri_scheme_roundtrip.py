from __future__ import annotations

import pytest

from payuri.errors import InvalidSchemeError
from payuri.models import PaymentRequest
from payuri.uri_scheme import build_uri, parse

ADDR = "175tWpb8K1S7NmH4Zx6rewF9WQrcZv245W"


@pytest.mark.parametrize(
    "req",
    [
        PaymentRequest(scheme="bitcoin", address=ADDR),
        PaymentRequest(scheme="bitcoin", address=ADDR, amount=0.0015),
        PaymentRequest(scheme="bitcoin", address=ADDR, amount=1e-08, label="Luke-Jr"),
        PaymentRequest(
            scheme="bitcoin",
            address=ADDR,
            amount=123.456789,
            label="Luke-Jr",
            message="Donation for project",
            extra_params={"req-somethingelseyoudontget": "999", "invoice": "INV-1001"},
        ),
        PaymentRequest(scheme="bitcoin", address=ADDR, message="50% off: pay & go?"),
    ],
)
def test_roundtrip_recovers_all_fields(req: PaymentRequest) -> None:
    decoded = parse(build_uri(req))

    assert decoded.scheme == req.scheme
    assert decoded.address == req.address
    assert decoded.amount == req.amount
    assert decoded.label == req.label
    assert decoded.message == req.message
    assert decoded.extra_params == (req.extra_params or {})


def test_roundtrip_extra_override_surfaces_as_named_field() -> None:
    req = PaymentRequest(scheme="bitcoin", address=ADDR, amount=1.0, extra_params={"amount": "2"})
    decoded = parse(build_uri(req))
    assert decoded.amount == 2.0
    assert decoded.extra_params == {}


def test_address_with_reserved_characters_is_lossy() -> None:
    # The address is copied verbatim, so a "?" inside it starts the query early.
    req = PaymentRequest(scheme="bitcoin", address="addr?x=1", amount=5.0)
    uri = build_uri(req)
    assert uri == "bitcoin:addr?x=1?amount=5"

    decoded = parse(uri)
    assert decoded.address == "addr"
    assert decoded.amount is None
    assert decoded.extra_params == {}


def test_percent_escaped_address_is_not_decoded() -> None:
    req = PaymentRequest(scheme="bitcoin", address="abc%20def")
    assert parse(build_uri(req)).address == "abc%20def"


def test_address_with_colon_builds_but_does_not_parse() -> None:
    uri = build_uri(PaymentRequest(scheme="bitcoin", address="addr:1"))
    assert uri == "bitcoin:addr:1"
    with pytest.raises(InvalidSchemeError):
        parse(uri)
