from __future__ import annotations

import logging
from typing import Optional

import typer

from ryandata_postcode_utils.models import CheckResult, ErrorKind, PostalRange
from ryandata_postcode_utils.service import PostcodeService

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_UNKNOWN_COUNTRY = 2

app = typer.Typer(help="Check postcodes against per-country format and range rules.")


def _init_trogon(app: typer.Typer) -> None:
    """Optionally enable the Trogon TUI when installed."""
    try:
        from trogon.typer import init_tui
    except ImportError:
        return
    init_tui(app, command="tui", help="Open interactive UI.")


_init_trogon(app)

_service: Optional[PostcodeService] = None


def get_service() -> PostcodeService:
    global _service
    if _service is None:
        _service = PostcodeService()
    return _service


@app.callback()
def main_callback(
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Log debug output to stderr.",
    ),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _finish(result: CheckResult) -> None:
    """Print a check result and exit with the matching code."""
    if result.success:
        typer.echo(f"OK: {result.message}")
        raise typer.Exit(code=EXIT_OK)

    kind = result.error_kind.value if result.error_kind else "error"
    typer.echo(f"FAIL [{kind}]: {result.message}")
    if result.error_kind is ErrorKind.RULE_NOT_FOUND:
        raise typer.Exit(code=EXIT_UNKNOWN_COUNTRY)
    raise typer.Exit(code=EXIT_FAILED)


@app.command()
def rule(
    country_code: str = typer.Argument(..., help="Two-letter country code."),  # noqa: B008
) -> None:
    """Show a country's postcode rule."""
    service = get_service()
    found = service.get_rule(country_code)
    if found is None:
        _finish(service.get_regex(country_code))
        return

    typer.echo(f"Country: {found.country_code} ({found.country_name})")
    typer.echo(f"Description: {found.description}")
    typer.echo(f"Format: {found.format or '-'}")
    typer.echo(f"Pattern: {found.full_regex or '-'}")
    typer.echo(f"Range pattern: {found.range_regex or '-'}")
    typer.echo(f"Numeric ranges: {'yes' if found.range_is_number else 'no'}")
    if found.format_fix_name:
        typer.echo(f"Format fix: {found.format_fix_name}")
    raise typer.Exit(code=EXIT_OK if found.has_format else EXIT_FAILED)


@app.command()
def validate(
    country_code: str = typer.Argument(..., help="Two-letter country code."),  # noqa: B008
    postcode: str = typer.Argument(..., help="Postcode to check."),  # noqa: B008
) -> None:
    """Check a postcode against the country's format rule."""
    _finish(get_service().validate_format(country_code, postcode))


@app.command("in-range")
def in_range(
    country_code: str = typer.Argument(..., help="Two-letter country code."),  # noqa: B008
    start: str = typer.Argument(..., help="Range start postcode."),  # noqa: B008
    end: str = typer.Argument(..., help="Range end postcode."),  # noqa: B008
    postcode: str = typer.Argument(..., help="Postcode to test."),  # noqa: B008
    format_fix: bool = typer.Option(  # noqa: B008
        True,
        "--format-fix/--no-format-fix",
        help="Apply the country's format-fix strategy before comparing.",
    ),
) -> None:
    """Check whether a postcode lies inside an inclusive range."""
    _finish(
        get_service().check_in_range(
            country_code, start, end, postcode, apply_format_fix=format_fix
        )
    )


@app.command()
def overlap(
    country_code: str = typer.Argument(..., help="Two-letter country code."),  # noqa: B008
    ranges: list[str] = typer.Argument(..., help="Ranges written as START-END."),  # noqa: B008
    separator: str = typer.Option(  # noqa: B008
        "-",
        "--separator",
        "-s",
        help="Separator between range start and end.",
    ),
) -> None:
    """Check that no two ranges of a list overlap."""
    parsed: list[PostalRange] = []
    for text in ranges:
        try:
            parsed.append(PostalRange.parse(text, separator=separator))
        except ValueError as exc:
            typer.echo(f"FAIL [{ErrorKind.INVALID_INPUT.value}]: {exc}")
            raise typer.Exit(code=EXIT_FAILED) from exc

    _finish(get_service().check_no_overlap(country_code, parsed))


@app.command()
def province(
    country_code: str = typer.Argument(..., help="Two-letter country code."),  # noqa: B008
    query: str = typer.Argument(..., help="Province code, English or Chinese name."),  # noqa: B008
) -> None:
    """Resolve a province by code or name."""
    service = get_service()
    found = service.get_province(country_code, query)
    if found is None:
        _finish(service.check_province(country_code, query))
        return

    typer.echo(f"{found.code}: {found.en_name}")
    if found.cn_name:
        typer.echo(f"Chinese name: {found.cn_name}")
    if found.aliases:
        typer.echo(f"Aliases: {', '.join(found.aliases)}")
    raise typer.Exit(code=EXIT_OK)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
