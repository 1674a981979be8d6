"""CLI module for SmartEncode."""

import logging
from pathlib import Path

import click

from smartencode import __version__
from smartencode.config.models import LoggingConfig
from smartencode.logging import configure_logging

logger = logging.getLogger(__name__)


def _configure_logging(
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> bool:
    """Configure logging from CLI options.

    Args:
        log_level: Override log level (debug, info, warning, error).
        log_file: Override log file path.
        log_json: Use JSON log format.

    Returns:
        True if any logging option was given on the command line.
    """
    overridden = bool(log_level or log_file or log_json)
    configure_logging(
        LoggingConfig(
            level=log_level or "warning",
            file=log_file,
            format="json" if log_json else "text",
        )
    )
    logger.debug(
        "Logging configured: level=%s file=%s json=%s",
        log_level or "warning",
        log_file,
        log_json,
    )
    return overridden


@click.group()
@click.version_option(version=__version__, prog_name="smartencode")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Write logs to this file instead of stderr.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """SmartEncode - Decide how (and whether) to transcode media files."""
    ctx.ensure_object(dict)
    ctx.obj["logging_overridden"] = _configure_logging(log_level, log_file, log_json)


# Defer import to avoid circular dependency
def _register_commands():
    from smartencode.cli.evaluate import evaluate_command
    from smartencode.cli.profiles import profiles_command

    main.add_command(evaluate_command)
    main.add_command(profiles_command)


_register_commands()
