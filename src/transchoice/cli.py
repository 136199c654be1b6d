"""Command-line interface for transchoice."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from transchoice.config import TransChoiceConfig, load_config
from transchoice.exceptions import TransChoiceError
from transchoice.interval import test_interval
from transchoice.lint import has_errors, lint_message
from transchoice.plural import plural_family, plural_form, supported_locales
from transchoice.translator import Translator

app = typer.Typer(
    name="transchoice",
    help="Pick the plural variant of a message for a count and locale",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _setup(config_file: Optional[Path], verbose: bool) -> TransChoiceConfig:
    try:
        config = load_config(config_file)
    except TransChoiceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    return config


def _parse_replacements(items: Optional[list[str]]) -> dict[str, str]:
    replacements: dict[str, str] = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--replace")
        replacements[key] = value
    return replacements


ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Configuration file (YAML, JSON or TOML)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable debug logging"),
]


@app.command(name="choose")
def choose_cmd(
    message: Annotated[str, typer.Argument(help="Message template, variants separated by '|'")],
    count: Annotated[int, typer.Argument(help="Number of items")],
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale code (defaults to the configured locale)"),
    ] = None,
    replace: Annotated[
        Optional[list[str]],
        typer.Option("--replace", "-r", help="Placeholder value as KEY=VALUE (repeatable)"),
    ] = None,
    substitute: Annotated[
        bool,
        typer.Option("--substitute", "-s", help="Apply placeholder substitution"),
    ] = False,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Resolve a message template for a count."""
    config = _setup(config_file, verbose)
    replacements = _parse_replacements(replace)
    # Passing values implies substitution; otherwise the configured default applies
    apply = True if substitute or replacements else None

    translator = Translator(config)
    try:
        result = translator.trans_choice(
            message, count, replacements, locale, apply_replacements=apply
        )
    except TransChoiceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(result)


@app.command(name="interval")
def interval_cmd(
    count: Annotated[int, typer.Argument(help="Number to test")],
    interval: Annotated[str, typer.Argument(help="Interval expression, e.g. '[1,Inf]'")],
) -> None:
    """Test whether a count lies within an interval."""
    try:
        inside = test_interval(count, interval)
    except TransChoiceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo("true" if inside else "false")


@app.command(name="form")
def form_cmd(
    count: Annotated[int, typer.Argument(help="Number of items")],
    locale: Annotated[str, typer.Argument(help="Locale code")],
) -> None:
    """Print the plural-form index for a count and locale."""
    typer.echo(str(plural_form(count, locale)))


@app.command(name="locales")
def locales_cmd(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """List locales with a plural rule."""
    rows = []
    for code in supported_locales():
        family = plural_family(code)
        rows.append({"locale": code, "family": family.value, "forms": family.forms})

    if json_output:
        typer.echo(json.dumps(rows, indent=2))
        return

    table = Table(title="Plural rules")
    table.add_column("Locale", style="cyan")
    table.add_column("Family")
    table.add_column("Forms", justify="right")
    for row in rows:
        table.add_row(row["locale"], row["family"], str(row["forms"]))
    console.print(table)


@app.command(name="lint")
def lint_cmd(
    message: Annotated[str, typer.Argument(help="Message template to check")],
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale code (defaults to the configured locale)"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """Check a message template for problems."""
    config = _setup(config_file, verbose=False)
    issues = lint_message(message, locale or config.default_locale)

    if json_output:
        typer.echo(json.dumps([issue.to_dict() for issue in issues], indent=2))
    elif not issues:
        typer.echo("No issues found")
    else:
        for issue in issues:
            typer.echo(str(issue))

    if has_errors(issues):
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
