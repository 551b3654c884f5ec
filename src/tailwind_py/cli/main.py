"""tailwind-py CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from tailwind_py import __version__
from tailwind_py.config import ThemeConfig, load_config
from tailwind_py.errors import ConfigError
from tailwind_py.generator.generator import Generator


@click.group()
@click.version_option(version=__version__, prog_name="tailwind-py")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON theme file merged over the stock theme.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """tailwind-py - turn utility class strings into CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def make_generator(ctx: click.Context) -> Generator:
    """Generator for the ``--config`` given to the group; exits 1 on a bad config."""
    config_path = (ctx.obj or {}).get("config_path")
    try:
        config = load_config(config_path) if config_path else ThemeConfig()
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
    return Generator(config)


def gather_classes(classes: tuple[str, ...], input_file: str | None) -> list[str]:
    """Class strings from arguments plus whitespace-separated file content."""
    gathered: list[str] = []
    for text in classes:
        gathered.extend(text.split())
    if input_file:
        with click.open_file(input_file, encoding="utf-8") as handle:
            gathered.extend(handle.read().split())
    return gathered


# Import and register subcommands
from tailwind_py.cli.build import build  # noqa: E402
from tailwind_py.cli.check import check  # noqa: E402
from tailwind_py.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(inspect)
