"""Command-line interface for metadata and a live facade demonstration.

Contents
--------
* :func:`cli` - Click group (``info``, ``logdemo``) with ``--traceback`` and
  ``--use-dotenv`` switches.
* :func:`main` - runs the group through :mod:`lib_cli_exit_tools` and restores
  the shared traceback preferences afterwards.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence
from uuid import uuid4

import click
import lib_cli_exit_tools
from rich.console import Console
from rich.logging import RichHandler

from . import __init__conf__
from . import config as config_module
from .domain import LogOutcome, Severity
from .runtime import RuntimeConfig
from .runtime._composition import build_runtime
from .runtime._settings import build_runtime_settings

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
DEMO_CHANNEL = "lib_log_correlated.logdemo"
_LEVEL_CHOICES = [severity.severity for severity in Severity if severity is not Severity.TRACE]


def summary_info() -> str:
    """Return the metadata banner used by ``info`` and the bare command."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show the full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global switches."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--level",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default="debug",
    show_default=True,
    help="Threshold configured on the demo channel's stdlib logger.",
)
@click.option(
    "--mirror/--no-mirror",
    default=False,
    help="Mirror emitted entries to the diagnostic channel.",
)
def cli_logdemo(level: str, mirror: bool) -> None:
    """Emit one entry per severity through the facade and print each outcome."""

    for severity, outcome in _logdemo(level=Severity.from_name(level), mirror=mirror):
        click.echo(f"{severity.severity}: {outcome.kind.value}")


def _demo_error() -> RuntimeError:
    try:
        try:
            raise ConnectionError("upstream closed the connection")
        except ConnectionError as inner:
            raise RuntimeError("demo request failed") from inner
    except RuntimeError as exc:
        return exc


def _logdemo(*, level: Severity, mirror: bool) -> list[tuple[Severity, LogOutcome]]:
    """Run the demo against a Rich-rendered stdlib logger and return the outcomes."""

    channel_logger = logging.getLogger(DEMO_CHANNEL)
    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    previous = (channel_logger.level, channel_logger.propagate)
    channel_logger.addHandler(handler)
    channel_logger.setLevel(level.to_python_level())
    channel_logger.propagate = False
    try:
        runtime = build_runtime(build_runtime_settings(RuntimeConfig(fallback_channel=DEMO_CHANNEL, mirror_diagnostics=mirror)))
        correlation_id = uuid4()
        results: list[tuple[Severity, LogOutcome]] = []
        for severity in Severity:
            error = _demo_error() if severity.value >= Severity.ERROR.value else None
            outcome = runtime.logger.log(
                severity,
                f"{severity.severity} demo entry",
                error,
                caller=DEMO_CHANNEL,
                correlation_id=correlation_id,
            )
            results.append((severity, outcome))
        return results
    finally:
        channel_logger.removeHandler(handler)
        channel_logger.setLevel(previous[0])
        channel_logger.propagate = previous[1]


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Parameters
    ----------
    argv:
        Optional argument list (defaults to ``sys.argv[1:]``).
    restore_traceback:
        Restore :mod:`lib_cli_exit_tools` traceback preferences afterwards so
        embedding hosts keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
