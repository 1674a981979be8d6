"""CLI evaluate command for SmartEncode."""

import json
import logging
import sys
from pathlib import Path

import click

from smartencode.cli.exit_codes import ExitCode
from smartencode.config.profiles import ProfileError, ProfileNotFoundError, get_profile
from smartencode.logging import configure_logging
from smartencode.policy.exceptions import OptionsError
from smartencode.policy.options import build_options
from smartencode.workflow.processor import evaluate_file

logger = logging.getLogger(__name__)


def _parse_option_pairs(pairs: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated KEY=VALUE options into a dict.

    Raises:
        OptionsError: If a pair has no "=".
    """
    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise OptionsError(f"Expected KEY=VALUE, got '{pair}'", field=pair)
        options[key.strip()] = value.strip()
    return options


@click.command("evaluate")
@click.argument(
    "probe_json", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--profile",
    "-p",
    "profile_name",
    default=None,
    help="Profile supplying option defaults (final, nas, titan or a user profile).",
)
@click.option(
    "--option",
    "-o",
    "option_pairs",
    multiple=True,
    metavar="KEY=VALUE",
    help="Encode option override (repeatable), e.g. -o target_codec=h265",
)
@click.option(
    "--year",
    type=int,
    default=None,
    help="Release year, if known (overrides the year in the file name).",
)
@click.option(
    "--file-path",
    default=None,
    help="Media file path (default: format.filename from the probe).",
)
@click.option(
    "--profiles-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding user profiles (default: ~/.smartencode/profiles).",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.pass_context
def evaluate_command(
    ctx: click.Context,
    probe_json: Path,
    profile_name: str | None,
    option_pairs: tuple[str, ...],
    year: int | None,
    file_path: str | None,
    profiles_dir: Path | None,
    output_format: str,
) -> None:
    """Evaluate a probed media file and print the transcode decision.

    PROBE_JSON is the output of
    ``ffprobe -v quiet -print_format json -show_format -show_streams FILE``.

    Skipped files exit with status 0; the summary explains why.
    """
    try:
        probe_bytes = probe_json.read_bytes()
    except OSError as e:
        click.echo(f"Error: Could not read probe file: {probe_json}", err=True)
        click.echo(f"Reason: {e}", err=True)
        sys.exit(ExitCode.GENERAL_ERROR)

    try:
        probe_data = json.loads(probe_bytes)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        click.echo(f"Error: Could not parse probe JSON: {probe_json}", err=True)
        click.echo(f"Reason: {e}", err=True)
        sys.exit(ExitCode.PARSE_ERROR)

    profile = None
    if profile_name:
        try:
            profile = get_profile(profile_name, profiles_dir)
        except ProfileNotFoundError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(ExitCode.PROFILE_NOT_FOUND)
        except ProfileError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(ExitCode.CONFIG_ERROR)

        logging_overridden = (ctx.obj or {}).get("logging_overridden", False)
        if profile.logging is not None and not logging_overridden:
            configure_logging(profile.logging)

    try:
        options = build_options(_parse_option_pairs(option_pairs), profile)
    except OptionsError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    decision = evaluate_file(
        probe_data if isinstance(probe_data, dict) else None,
        options,
        profile=profile,
        file_path=file_path,
        release_year=year,
    )

    if output_format == "json":
        click.echo(json.dumps(decision.to_response(), indent=2))
    else:
        click.echo(decision.summary, nl=False)
        if decision.process_file:
            click.echo(f"\nFFmpeg arguments:{decision.directive.to_preset()[1:]}")
