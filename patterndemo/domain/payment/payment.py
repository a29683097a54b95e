"""Payment methods and the processor that picks one by name."""
import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Callable, Dict, Union

from patterndemo.domain.base.value_objects import Selector
from patterndemo.domain.core.exceptions import ValidationError

Amount = Union[int, float, Decimal]


class PaymentMethodType(Selector):
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"

    @classmethod
    def selector_name(cls) -> str:
        return "payment method"


def format_amount(amount: Amount) -> str:
    """
    Render an amount the way a JavaScript number prints.

    Trailing zeros are dropped (10.0 -> '10', Decimal('99.950') -> '99.95').
    Floats use their shortest round-tripping digits. Magnitudes below 1e-6 or
    at least 1e21 switch to exponent form ('1e-7', '1e+21').

    Raises:
        ValidationError: If amount is not a finite number
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise ValidationError(f"Amount must be a number, got {amount!r}")
    if isinstance(amount, float):
        if not math.isfinite(amount):
            raise ValidationError(f"Amount must be finite, got {amount!r}")
        value = Decimal(repr(amount))
    else:
        value = Decimal(amount)
        if not value.is_finite():
            raise ValidationError(f"Amount must be finite, got {amount!r}")

    sign, digit_tuple, exponent = value.as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    if not digits:
        return "0"
    exponent += len(digit_tuple) - len(digits)

    # value == 0.<digits> * 10**point
    point = len(digits) + exponent
    if len(digits) <= point <= 21:
        rendered = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        rendered = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        rendered = "0." + "0" * -point + digits
    else:
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        rendered = f"{mantissa}e{point - 1:+d}"
    return f"-{rendered}" if sign else rendered


class PaymentMethod(ABC):
    """A payment strategy."""

    label: str = ""

    @abstractmethod
    def process_payment(self, amount: Amount, currency_symbol: str = "$") -> str:
        """Process a payment and return the outcome line."""


class CreditCardPayment(PaymentMethod):
    label = "credit card"

    def process_payment(self, amount: Amount, currency_symbol: str = "$") -> str:
        return f"Processing {self.label} payment of {currency_symbol}{format_amount(amount)} - Success!"


class PayPalPayment(PaymentMethod):
    label = "PayPal"

    def process_payment(self, amount: Amount, currency_symbol: str = "$") -> str:
        return f"Processing {self.label} payment of {currency_symbol}{format_amount(amount)} - Success!"


class PaymentProcessor:
    """Looks up a payment method constructor by name in a fixed mapping."""

    _methods: Dict[PaymentMethodType, Callable[[], PaymentMethod]] = {
        PaymentMethodType.CREDIT_CARD: CreditCardPayment,
        PaymentMethodType.PAYPAL: PayPalPayment,
    }

    def __init__(self, currency_symbol: str = "$", allow_negative_amounts: bool = True):
        self.currency_symbol = currency_symbol
        self.allow_negative_amounts = allow_negative_amounts

    def create_payment_method(self, method: str) -> PaymentMethod:
        """
        Create a payment method by name.

        Raises:
            UnsupportedKindError: If method is not registered
        """
        return self._methods[PaymentMethodType.parse(method)]()

    def process(self, method: str, amount: Amount) -> str:
        payment_method = self.create_payment_method(method)
        formatted = format_amount(amount)
        if not self.allow_negative_amounts and amount < 0:
            raise ValidationError(
                f"Payment amount must not be negative: {formatted}",
                details={"method": method, "amount": amount},
            )
        return payment_method.process_payment(amount, self.currency_symbol)
