"""CLI command for listing option profiles."""

import json
from pathlib import Path

import click

from smartencode.config.profiles import (
    BUILTIN_PROFILES,
    ProfileError,
    get_profile,
    get_profiles_directory,
    list_profiles,
)


@click.command("profiles")
@click.option(
    "--profiles-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding user profiles (default: ~/.smartencode/profiles).",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)
def profiles_command(profiles_dir: Path | None, json_output: bool) -> None:
    """List built-in and user option profiles.

    User profiles are stored in ~/.smartencode/profiles/ as YAML files.

    Examples:

        # List all profiles
        smartencode profiles

        # Output as JSON
        smartencode profiles --json
    """
    data = []
    for name in list_profiles(profiles_dir):
        source = "built-in" if name in BUILTIN_PROFILES else "user"
        try:
            profile = get_profile(name, profiles_dir)
        except ProfileError as e:
            data.append({"name": name, "source": source, "error": str(e)})
            continue
        data.append(
            {
                "name": profile.name,
                "source": source,
                "title": profile.title,
                "description": profile.description,
                "options": dict(profile.options),
            }
        )

    if json_output:
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"{'NAME':<12} {'SOURCE':<10} {'DESCRIPTION':<56}")
    click.echo("-" * 80)
    for p in data:
        desc = p.get("description") or p.get("error") or "-"
        desc = desc[:56] if len(desc) > 56 else desc
        click.echo(f"{p['name']:<12} {p['source']:<10} {desc:<56}")

    user_dir = profiles_dir or get_profiles_directory()
    click.echo(f"\nUser profiles directory: {user_dir}")
