import pytest
from solidstore.domain import CreditCardProcessor, PaymentProcessor, PayPalProcessor, format_amount


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1350, "1350"),
        (1350.0, "1350"),
        (1349.5, "1349.5"),
        (0, "0"),
        (0.1, "0.1"),
    ],
)
def test_format_amount(amount, expected):
    assert format_amount(amount) == expected


def test_credit_card_line():
    lines = []
    CreditCardProcessor(echo=lines.append).process_payment(1350.0)
    assert lines == ["Processing credit card payment of $1350"]


def test_paypal_line():
    lines = []
    PayPalProcessor(echo=lines.append).process_payment(99.5)
    assert lines == ["Processing PayPal payment of $99.5"]


def test_default_echo_prints(capsys):
    PayPalProcessor().process_payment(10)
    assert capsys.readouterr().out == "Processing PayPal payment of $10\n"


def test_processors_satisfy_protocol():
    assert isinstance(CreditCardProcessor(), PaymentProcessor)
    assert isinstance(PayPalProcessor(), PaymentProcessor)
