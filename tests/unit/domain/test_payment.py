"""Tests for the payment method factory."""

from decimal import Decimal

import pytest

from patterndemo.domain.core.exceptions import UnsupportedKindError, ValidationError
from patterndemo.domain.payment import (
    CreditCardPayment,
    PaymentProcessor,
    PayPalPayment,
    format_amount,
)


class TestFormatAmount:
    """Test amount rendering."""

    @pytest.mark.parametrize("amount,expected", [
        (99.95, "99.95"),
        (10, "10"),
        (10.0, "10"),
        (0, "0"),
        (-5, "-5"),
        (0.1, "0.1"),
        (Decimal("12.50"), "12.5"),
        (Decimal("7.00"), "7"),
        (Decimal("99.950"), "99.95"),
        (Decimal("1E+2"), "100"),
        (Decimal("-0.00"), "0"),
        (-0.0, "0"),
        (1e-6, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.25e22, "1.25e+22"),
    ])
    def test_format_amount(self, amount, expected):
        assert format_amount(amount) == expected

    @pytest.mark.parametrize("amount", [
        float("nan"),
        float("inf"),
        float("-inf"),
        Decimal("NaN"),
        Decimal("Infinity"),
    ])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match="finite"):
            format_amount(amount)

    @pytest.mark.parametrize("amount", ["10", None, True])
    def test_non_numeric_amount_rejected(self, amount):
        with pytest.raises(ValidationError):
            format_amount(amount)


class TestPaymentProcessor:
    """Test payment method lookup and processing."""

    def setup_method(self):
        self.processor = PaymentProcessor()

    def test_credit_card_lookup(self):
        assert isinstance(self.processor.create_payment_method("credit_card"), CreditCardPayment)

    def test_paypal_lookup(self):
        assert isinstance(self.processor.create_payment_method("paypal"), PayPalPayment)

    def test_each_lookup_creates_new_method(self):
        first = self.processor.create_payment_method("paypal")
        second = self.processor.create_payment_method("paypal")
        assert first is not second

    def test_credit_card_payment(self):
        assert self.processor.process("credit_card", 99.95) == \
            "Processing credit card payment of $99.95 - Success!"

    def test_paypal_payment(self):
        assert self.processor.process("paypal", 10) == "Processing PayPal payment of $10 - Success!"

    def test_unknown_method_raises_unsupported_kind(self):
        with pytest.raises(UnsupportedKindError, match="payment method"):
            self.processor.process("bogus", 10)

    def test_negative_amount_accepted_by_default(self):
        assert self.processor.process("paypal", -3.5) == "Processing PayPal payment of $-3.5 - Success!"

    def test_negative_amount_rejected_when_disabled(self):
        processor = PaymentProcessor(allow_negative_amounts=False)

        with pytest.raises(ValidationError) as exc_info:
            processor.process("credit_card", -1)

        assert exc_info.value.details == {"method": "credit_card", "amount": -1}

    def test_currency_symbol_is_configurable(self):
        processor = PaymentProcessor(currency_symbol="€")
        assert processor.process("paypal", 5) == "Processing PayPal payment of €5 - Success!"

    def test_nan_rejected_when_negative_amounts_disabled(self):
        processor = PaymentProcessor(allow_negative_amounts=False)

        with pytest.raises(ValidationError, match="finite"):
            processor.process("paypal", float("nan"))
