"""
CLI: run the fixed example, or check out an order built from the command line.
Payment lines go to stdout; errors go to stderr with exit code 1.
"""
import logging
from typing import List, Optional

import typer

from solidstore.core import StoreConfig, default_processors, discount_for
from solidstore.domain import Order, Product
from solidstore.example import run_example

app = typer.Typer(help="solidstore: toy online store checkout.")


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")


def _parse_product(spec: str) -> Product:
    """NAME=PRICE -> Product. The last '=' separates name and price."""
    name, sep, price = spec.rpartition("=")
    if not sep:
        raise ValueError(f"Expected NAME=PRICE, got {spec!r}")
    try:
        value = float(price)
    except ValueError:
        raise ValueError(f"Invalid price in {spec!r}") from None
    return Product(name.strip(), value)


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(1)


@app.command()
def demo() -> None:
    """Laptop and phone, 10% off, paid by credit card."""
    run_example(echo=typer.echo)


@app.command()
def checkout(
    product: List[str] = typer.Option([], "--product", "-p", help="Product as NAME=PRICE (repeatable)"),
    discount: Optional[float] = typer.Option(None, "--discount", "-d", help="Percent off, 0-100"),
    processor: Optional[str] = typer.Option(None, "--processor", help="Payment processor name"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Build an order from --product options and pay for it."""
    try:
        config = StoreConfig.from_env()
        _configure_logging(log_level or config.log_level)
        order = Order()
        for spec in product:
            order.add_product(_parse_product(spec))
        percent = discount if discount is not None else config.discount_percent
        order.set_discount_strategy(discount_for(percent))
        processor_name = processor or config.processor
        payment = default_processors(echo=typer.echo).resolve(processor_name)
    except KeyError:
        _fail(f"Unknown payment processor: {processor_name}")
    except ValueError as e:
        _fail(str(e))
    order.process_order(payment)


@app.command()
def processors() -> None:
    """List payment processor names."""
    for name in default_processors().names():
        typer.echo(name)


def main() -> None:
    """Entry point for the solidstore console command."""
    app()


if __name__ == "__main__":
    main()
