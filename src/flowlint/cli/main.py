"""flowlint CLI entry point: Click group with subcommands."""

import logging

import click

from flowlint import __version__


@click.group()
@click.version_option(version=__version__, prog_name="flowlint")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """flowlint - naming-convention linter for page builder class names."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from flowlint.cli.lint import lint  # noqa: E402
from flowlint.cli.rules import export_config, presets, rules  # noqa: E402

cli.add_command(lint)
cli.add_command(presets)
cli.add_command(rules)
cli.add_command(export_config)
