"""CLI bootstrap for brazilian-cardinality."""

import logging
from collections.abc import Callable

import typer

from brazilian_cardinality.core.settings import get_settings
from brazilian_cardinality.domain.errors import DomainError
from brazilian_cardinality.services.spelling_service import SpellingService

app = typer.Typer(help="Spell out numbers and BRL amounts in Brazilian Portuguese.")
NUMBER_ARGUMENT = typer.Argument(..., help="Integer whose magnitude is below 10^15.")
AMOUNT_ARGUMENT = typer.Argument(..., help="Amount in reais, e.g. 110.10.")


@app.callback()
def configure() -> None:
    """Configure logging from runtime settings."""
    logging.basicConfig(level=get_settings().log_level.upper())


@app.command("cardinal")
def cardinal(number: int = NUMBER_ARGUMENT) -> None:
    """Print the cardinal words for an integer."""
    _echo_or_exit(lambda service: service.spell_number(number))


@app.command("currency")
def currency(amount: str = AMOUNT_ARGUMENT) -> None:
    """Print an amount in reais and centavos."""
    _echo_or_exit(lambda service: service.spell_currency(amount))


def _echo_or_exit(spell: Callable[[SpellingService], str]) -> None:
    service = SpellingService.from_settings()
    try:
        words = spell(service)
    except DomainError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(words)


def main() -> None:
    """Run the brazilian-cardinality CLI application."""
    app()


if __name__ == "__main__":
    main()
