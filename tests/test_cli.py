import pytest
from solidstore.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("STORE_PROCESSOR", "STORE_DISCOUNT_PERCENT", "STORE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_demo():
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert result.output == "Processing credit card payment of $1350\n"


def test_checkout_with_discount_and_paypal():
    result = runner.invoke(
        app,
        ["checkout", "-p", "Laptop=1000", "-p", "Phone=500", "--discount", "10", "--processor", "paypal"],
    )
    assert result.exit_code == 0
    assert "Processing PayPal payment of $1350" in result.output


def test_checkout_defaults_from_env(monkeypatch):
    monkeypatch.setenv("STORE_PROCESSOR", "paypal")
    monkeypatch.setenv("STORE_DISCOUNT_PERCENT", "50")
    result = runner.invoke(app, ["checkout", "-p", "Book=30"])
    assert result.exit_code == 0
    assert "Processing PayPal payment of $15" in result.output


def test_checkout_empty_order_pays_zero():
    result = runner.invoke(app, ["checkout"])
    assert result.exit_code == 0
    assert "Processing credit card payment of $0" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["checkout", "-p", "Laptop"],
        ["checkout", "-p", "Laptop=cheap"],
        ["checkout", "-p", "Laptop=-5"],
        ["checkout", "-p", "Laptop=5", "--discount", "120"],
        ["checkout", "-p", "Laptop=5", "--processor", "bitcoin"],
    ],
)
def test_checkout_invalid_input_exits_1(args):
    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert "Processing" not in result.output


def test_processors_lists_names():
    result = runner.invoke(app, ["processors"])
    assert result.exit_code == 0
    assert result.output.split() == ["credit-card", "paypal"]
