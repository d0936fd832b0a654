"""
mailcheck CLI - check email addresses from the command line.

Usage:
    mailcheck --help                          Show all commands
    mailcheck check x@gnail.com               Classify an address (offline)
    mailcheck check x@corp.de --mx corp.de    Treat corp.de as accepting mail
    mailcheck distance gmial.com gmail.com    Print the edit distance
    mailcheck domains                         List the typo catalog
"""

import asyncio
import json

import typer

from mailcheck.models import AddressStatus, ValidationResult

app = typer.Typer(
    name="mailcheck",
    help="mailcheck CLI - email address validation with typo suggestions",
    no_args_is_help=True,
)


def _print_result(result: ValidationResult) -> None:
    """Print a one-line summary of a result."""
    line = f"{result.address}: {result.status.value}"
    if result.status == AddressStatus.TYPO_DETECTED:
        line += f" (did you mean {result.suggestion}?)"
    elif result.schema_problem is not None:
        line += f" ({result.schema_problem.value})"
    typer.echo(line)


@app.command()
def check(
    addresses: list[str] = typer.Argument(..., help="Addresses to validate"),
    mx: list[str] = typer.Option(
        [], "--mx", help="Domain that accepts mail (repeatable)"
    ),
    registered: list[str] = typer.Option(
        [], "--registered", help="Domain that exists but has no mail server (repeatable)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Validate addresses against the typo catalog and the given domain facts.

    Exits with 1 unless every address is valid.
    """
    from mailcheck.config import get_config
    from mailcheck.core.logging import setup_logging
    from mailcheck.oracle import StaticOracle
    from mailcheck.validator import AddressValidator, get_address_validator

    setup_logging()
    validator = AddressValidator.from_settings(
        get_config().settings,
        oracle=StaticOracle(mail_domains=mx, registered_domains=registered),
        catalog=get_address_validator().catalog,
    )

    results = asyncio.run(validator.validate_batch(addresses))

    if as_json:
        typer.echo(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
    else:
        for result in results:
            _print_result(result)

    if not all(r.is_valid for r in results):
        raise typer.Exit(code=1)


@app.command()
def distance(
    a: str = typer.Argument(..., help="First string"),
    b: str = typer.Argument(..., help="Second string"),
    alphabet_size: int = typer.Option(128, "--alphabet-size", help="Alphabet bound"),
):
    """Print the Damerau-Levenshtein distance between two strings."""
    from mailcheck.distance import damerau_levenshtein

    try:
        typer.echo(damerau_levenshtein(a, b, alphabet_size))
    except ValueError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=2) from e


@app.command()
def domains():
    """List the domains used for typo suggestions, in match order."""
    from mailcheck.validator import get_address_validator

    for domain in get_address_validator().catalog:
        typer.echo(domain)


if __name__ == "__main__":
    app()
