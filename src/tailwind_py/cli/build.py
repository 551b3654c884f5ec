"""CLI command: tailwind-py build -- generate CSS for a set of classes."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailwind_py.config import OutputMode


@click.command()
@click.argument("classes", nargs=-1)
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=None,
    help="File of whitespace-separated class strings ('-' for stdin).",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write CSS here instead of stdout.",
)
@click.option("--minify", is_flag=True, help="Emit minified CSS.")
@click.option("--strict", is_flag=True, help="Exit with code 1 if any class fails.")
@click.pass_context
def build(
    ctx: click.Context,
    classes: tuple[str, ...],
    input_file: str | None,
    output_file: str | None,
    minify: bool,
    strict: bool,
) -> None:
    """Generate CSS for CLASSES (and the classes listed in --input).

    Classes that cannot be turned into CSS are reported on stderr and
    skipped; the rest of the stylesheet is still written.
    """
    from tailwind_py.cli.main import gather_classes, make_generator

    generator = make_generator(ctx)
    try:
        batch = gather_classes(classes, input_file)
    except OSError as exc:
        click.echo(f"Cannot read {input_file}: {exc}", err=True)
        sys.exit(1)

    sheet, errors = generator.generate(batch)
    mode = OutputMode.MINIFIED if minify else generator.config.output_mode
    css = sheet.to_css(mode)

    if output_file:
        Path(output_file).write_text(css, encoding="utf-8")
        click.echo(
            f"Wrote {sheet.rule_count} rule(s) to {output_file}", err=True
        )
    else:
        click.echo(css, nl=False)

    for error in errors:
        click.echo(f"error: {error.raw}: {error}", err=True)

    if strict and errors:
        sys.exit(1)
