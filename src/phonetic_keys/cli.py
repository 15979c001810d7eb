"""Command-line interface for phonetic-keys.

Uses Typer for a modern, type-hinted CLI experience.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from phonetic_keys import __version__
from phonetic_keys.config import Configuration, NameType, RuleType, load_overrides
from phonetic_keys.engine import encode, match, similarity
from phonetic_keys.errors import PhoneticKeysError, format_error_for_display
from phonetic_keys.languages import default_configuration
from phonetic_keys.logging import LogConfig, LogLevel, configure_logging

app = typer.Typer(
    name="phonetic-keys",
    help="Cross-language phonetic keys for personal names.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

NameTypeOption = Annotated[
    Optional[NameType],
    typer.Option("--name-type", "-n", help="Default language pool when no heuristic fires"),
]
RuleTypeOption = Annotated[
    Optional[RuleType],
    typer.Option("--rule-type", "-r", help="Rule strictness (exact, approx)"),
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="JSON file with engine settings"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"phonetic-keys version {__version__}")
        raise typer.Exit()


def build_configuration(
    name_type: NameType | None,
    rule_type: RuleType | None,
    config_file: Path | None,
) -> Configuration:
    """Assemble the configuration from file settings and CLI options.

    Command-line options take precedence over the settings file.

    Raises:
        typer.Exit: If the settings are invalid
    """
    overrides = {}
    try:
        if config_file is not None:
            overrides.update(load_overrides(config_file))
        if name_type is not None:
            overrides["name_type"] = name_type
        if rule_type is not None:
            overrides["rule_type"] = rule_type
        return default_configuration(**overrides)
    except PhoneticKeysError as e:
        console.print(f"[red]Error:[/red] {escape(format_error_for_display(e))}")
        raise typer.Exit(2)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log search diagnostics to stderr")
    ] = False,
) -> None:
    """Phonetic Keys - compare names across spellings, languages and scripts."""
    configure_logging(LogConfig(level=LogLevel.DEBUG if verbose else LogLevel.NORMAL))


@app.command("encode")
def encode_cmd(
    name: Annotated[str, typer.Argument(help="Name to encode")],
    name_type: NameTypeOption = None,
    rule_type: RuleTypeOption = None,
    config_file: ConfigOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print results as JSON")] = False,
) -> None:
    """Show the phonetic keys of a name for each detected language."""
    config = build_configuration(name_type, rule_type, config_file)
    results = encode(name, config)

    if as_json:
        console.print_json(json.dumps([r.to_dict() for r in results], ensure_ascii=False))
        return

    if not results:
        console.print("[yellow]No keys produced.[/yellow]")
        return

    table = Table(title=f"Phonetic keys for '{escape(name)}'")
    table.add_column("Language", style="cyan")
    table.add_column("Keys", style="green")
    for result in results:
        table.add_row(result.language, " ".join(sorted(result.keys)))
    console.print(table)


@app.command("match")
def match_cmd(
    name_a: Annotated[str, typer.Argument(help="First name")],
    name_b: Annotated[str, typer.Argument(help="Second name")],
    name_type: NameTypeOption = None,
    rule_type: RuleTypeOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Check whether two names share a phonetic key.

    Exits with status 0 on a match and 1 otherwise.
    """
    config = build_configuration(name_type, rule_type, config_file)
    if match(name_a, name_b, config):
        console.print(f"[green]match[/green]: '{escape(name_a)}' ~ '{escape(name_b)}'")
        return
    console.print(f"[red]no match[/red]: '{escape(name_a)}' / '{escape(name_b)}'")
    raise typer.Exit(1)


@app.command("similarity")
def similarity_cmd(
    name_a: Annotated[str, typer.Argument(help="First name")],
    name_b: Annotated[str, typer.Argument(help="Second name")],
    name_type: NameTypeOption = None,
    rule_type: RuleTypeOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Print the Jaccard similarity of two names' phonetic keys."""
    config = build_configuration(name_type, rule_type, config_file)
    score = similarity(name_a, name_b, config)
    console.print(f"{score:.3f}")


if __name__ == "__main__":
    app()
