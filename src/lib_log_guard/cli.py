"""Command-line adapter for inspecting the sanitisation rules.

Purpose
-------
Give operators a quick way to see what a field would look like in the logs
without writing code: sanitise a single value, classify a key, list the rule
order, or apply the advanced text cleaning options.

Contents
--------
* :func:`cli` - click group with global traceback and ``.env`` switches.
* :func:`main` - entry point wrapped by :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer only; every command delegates to the public package API.
"""

from __future__ import annotations

import json
import os
from typing import Sequence

import click
import lib_cli_exit_tools
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as log_config
from .adapters import FieldSanitizer
from .domain import SanitizeOptions, is_sensitive_key, sanitize_with_options
from .lib_log_guard import summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(prog)s version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load LOG_* variables from the nearest .env file (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Sanitise structured log fields and inspect the rules."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    ctx.ensure_object(dict)
    ctx.obj.setdefault("sanitizer", FieldSanitizer())

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("sanitize", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object with key, rule and value.")
@click.pass_context
def cli_sanitize(ctx: click.Context, key: str, value: str, as_json: bool) -> None:
    """Print the log-safe form of VALUE stored under KEY."""

    sanitizer: FieldSanitizer = ctx.obj["sanitizer"]
    result = sanitizer.sanitize(key, value)
    if as_json:
        payload = {"key": key, "rule": sanitizer.registry.match(key).name, "value": result}
        click.echo(json.dumps(payload, sort_keys=True))
    else:
        click.echo(result)


@cli.command("check-key", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
def cli_check_key(key: str) -> None:
    """Report whether KEY is treated as sensitive."""

    click.echo("sensitive" if is_sensitive_key(key) else "not sensitive")


@cli.command("rules", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_rules(ctx: click.Context) -> None:
    """Show the rules in evaluation order (first match wins)."""

    sanitizer: FieldSanitizer = ctx.obj["sanitizer"]
    table = Table(title="Sanitisation rules")
    table.add_column("#", justify="right")
    table.add_column("Rule")
    for index, rule in enumerate(sanitizer.registry, start=1):
        table.add_row(str(index), rule.name)
    Console(soft_wrap=True).print(table)


@cli.command("clean", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option("--trim/--no-trim", default=True, show_default=True, help="Trim surrounding whitespace.")
@click.option("--strip-html", is_flag=True, help="Remove tags instead of escaping them.")
@click.option("--max-length", type=click.IntRange(min=0), default=0, show_default=True, help="Cut after N characters (0 = unlimited).")
def cli_clean(text: str, trim: bool, strip_html: bool, max_length: int) -> None:
    """Apply the advanced text cleaning options to TEXT."""

    options = SanitizeOptions(trim_whitespace=trim, strip_html=strip_html, max_length=max_length)
    click.echo(sanitize_with_options(text, options))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI through :func:`lib_cli_exit_tools.run_cli`.

    The traceback preferences in :mod:`lib_cli_exit_tools.config` are restored
    afterwards so embedding hosts keep their own settings.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
