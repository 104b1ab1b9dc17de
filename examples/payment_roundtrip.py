"""
Simple end-to-end payment link roundtrip example.

This simulates:

1. A merchant generating a payment URI for an invoice.
2. A payer's wallet decoding that URI.
3. The merchant checking a link it received back.
"""

from payuri import parse
from payuri.integration.wallet import (
    PaymentReceiverConfig,
    build_payment_link,
    verify_payment_link,
)


def main() -> None:
    # 1. Merchant configuration (receiving side)
    receiver = PaymentReceiverConfig(
        address="175tWpb8K1S7NmH4Zx6rewF9WQrcZv245W",
        label="Luke-Jr",
    )

    # 2. Merchant builds the payment link for an invoice
    uri = build_payment_link(
        receiver,
        amount=0.0015,
        message="Donation for project",
        extra_params={"invoice": "INV-1001"},
    )
    print("Payment URI:")
    print(uri)
    print()

    # 3. Payer wallet decodes it
    request = parse(uri)
    print("Decoded request:")
    print(request)
    print()

    # 4. Merchant verifies a link against its own config
    ok = verify_payment_link(receiver, uri, expected_amount=0.0015)
    print("Merchant verification result:", ok)


if __name__ == "__main__":
    main()
