"""CLI commands: flowlint presets / rules / export-config."""

from __future__ import annotations

import click

from flowlint.cli.lint import MODE_CHOICES, build_linter
from flowlint.presets.registry import default_presets


@click.command()
def presets() -> None:
    """List the registered presets."""
    registry = default_presets()
    default_id = registry.default_id
    for preset in registry.all():
        marker = "*" if preset.id == default_id else " "
        click.echo(f"{marker} {preset.id:<14} {preset.name}")


@click.command()
@click.option("--preset", "preset_id", default=None, help="Preset id (default: lumos).")
@click.option("--mode", type=click.Choice(MODE_CHOICES), default=None, help="Opinion mode.")
def rules(preset_id: str | None, mode: str | None) -> None:
    """List the active preset's rules with effective state."""
    linter = build_linter(preset_id, mode)
    registry = linter.registry
    click.echo(f"Preset: {linter.preset.id}  Mode: {linter.opinion_mode.value}")
    for rule in registry.all_rules():
        state = "on " if registry.is_enabled(rule) else "off"
        severity = registry.configured_severity(rule).value
        click.echo(f"  [{state}] {severity:<10} {rule.id}  ({rule.type.value})")


@click.command("export-config")
@click.option("--preset", "preset_id", default=None, help="Preset id (default: lumos).")
@click.option("--mode", type=click.Choice(MODE_CHOICES), default=None, help="Opinion mode.")
def export_config(preset_id: str | None, mode: str | None) -> None:
    """Print the rule configuration as JSON."""
    click.echo(build_linter(preset_id, mode).export_configuration())
