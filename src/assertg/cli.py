from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from assertg.config.loader import CONFIG_FILENAME, load_config
from assertg.config.models import AssertgConfig
from assertg.reporting.info import AssertionInfo
from assertg.reporting.report import build_report
from assertg.reporting.representation import representation_for

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()

_DEFAULT_CONFIG = """\
# assertg configuration
#
# representation: how values are rendered in failure messages
#   (default | hexadecimal | binary)
representation: default
# description_style: "labeled" adds a Description line to the report,
#   "inline" prefixes the Error message with [description]
description_style: labeled
# include_test_name: add a Test line when the test framework provides a name
include_test_name: true
# invalid_pattern: "raise" lets re.error abort the test, "report" records a
#   soft failure instead
invalid_pattern: raise
# fail_fast: pytest plugin fails the test on the first failed check
fail_fast: false
"""


@app.command()
def init(
    path: str = typer.Option(".", "--path", help="Directory to write assertg.yaml into"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Write a default assertg.yaml."""
    config_path = Path(path).resolve() / CONFIG_FILENAME
    if config_path.exists() and not force:
        console.print(f"[red]Target already exists:[/red] {escape(str(config_path))}")
        raise typer.Exit(code=1)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(_DEFAULT_CONFIG, encoding="utf-8")
    console.print(f"Config written to: {config_path}")


@app.command("config")
def show_config(
    path: str = typer.Option(CONFIG_FILENAME, "--path", help="Config file or directory holding assertg.yaml"),
) -> None:
    """Validate a config file and print the resolved settings."""
    try:
        config = load_config(Path(path))
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Failed to load config:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    table = Table(title="assertg config", show_lines=False)
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in config.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def preview(
    value: int = typer.Argument(..., help="Integer value to render in the sample failure"),
    representation: str = typer.Option("default", help="default, hexadecimal or binary"),
    description: Optional[str] = typer.Option(None, help="Description to attach to the assertion"),
    description_style: str = typer.Option("labeled", help="labeled or inline"),
    test_name: str = typer.Option("", "--test-name", help="Test name to include in the report"),
) -> None:
    """Print the failure report an is_zero() check on VALUE would produce."""
    try:
        config = AssertgConfig(representation=representation, description_style=description_style)
        info = AssertionInfo(representation=representation_for(representation))
    except ValueError as exc:
        console.print(f"[red]Invalid option:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    if description:
        info.with_description(description)
    report = build_report(
        info,
        "expected value to be zero, but got %s",
        value,
        test_name=test_name,
        config=config,
    )
    console.print(report, end="", markup=False, highlight=False)
