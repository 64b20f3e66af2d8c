"""CLI command: flowlint lint -- scan a JSON page snapshot."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click

from flowlint.adapters.snapshot import SnapshotHost
from flowlint.config import LinterConfig
from flowlint.errors import FlowlintError
from flowlint.linter import Linter
from flowlint.registry.opinion import OpinionMode

MODE_CHOICES = [m.value for m in OpinionMode]


def build_linter(preset: str | None, mode: str | None, structural: bool = False) -> Linter:
    """Linter for CLI use; unset options keep the ``LinterConfig`` defaults."""
    overrides: dict[str, object] = {"structural_element_scan": structural}
    if preset:
        overrides["preset"] = preset
    if mode:
        overrides["opinion_mode"] = mode
    return Linter(LinterConfig(**overrides))


@click.command()
@click.argument("snapshot", type=click.Path(exists=True))
@click.option("--preset", "preset_id", default=None, help="Preset id (default: lumos).")
@click.option("--mode", type=click.Choice(MODE_CHOICES), default=None, help="Opinion mode.")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="Rule configuration JSON to import.",
)
@click.option("--element", "element_id", default=None, help="Scan a single element.")
@click.option("--structural", is_flag=True, help="With --element, include descendants.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def lint(
    snapshot: str,
    preset_id: str | None,
    mode: str | None,
    config_file: str | None,
    element_id: str | None,
    structural: bool,
    output_format: str,
) -> None:
    """Lint the class names in a page snapshot.

    Exits with code 1 if any error-severity violation is found.
    """
    try:
        host = SnapshotHost.from_file(snapshot)
        linter = build_linter(preset_id, mode, structural)
        if config_file:
            linter.import_configuration(Path(config_file).read_text(encoding="utf-8"))
        if element_id:
            result = asyncio.run(linter.scan_element(host, element_id))
        else:
            result = asyncio.run(linter.scan_page(host))
    except FlowlintError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)
    except KeyError as exc:
        click.echo(f"Error: {exc.args[0] if exc.args else exc}", err=True)
        sys.exit(2)

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        for violation in result.violations:
            click.echo(str(violation))
        if result.violations:
            click.echo()
        click.echo(
            f"Summary ({result.preset_id}): {result.error_count} error(s), "
            f"{result.warning_count} warning(s), {result.suggestion_count} suggestion(s)"
        )
        if result.ignored_class_names:
            click.echo(f"Ignored third-party classes: {', '.join(result.ignored_class_names)}")

    sys.exit(1 if result.has_errors else 0)
