"""Payment bounded context - a factory keyed by payment method name."""

from .payment import (
    Amount,
    CreditCardPayment,
    PaymentMethod,
    PaymentMethodType,
    PaymentProcessor,
    PayPalPayment,
    format_amount,
)

__all__: list[str] = [
    "Amount",
    "PaymentMethod",
    "CreditCardPayment",
    "PayPalPayment",
    "PaymentMethodType",
    "PaymentProcessor",
    "format_amount",
]
