"""CLI command: tailwind-py check -- validate class strings ahead of time."""

from __future__ import annotations

import sys

import click

from tailwind_py.model.diagnostic import Severity
from tailwind_py.validation import validate as run_validate


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
@click.pass_context
def check(ctx: click.Context, classes: tuple[str, ...], input_file: str | None) -> None:
    """Validate CLASSES without writing CSS.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    from tailwind_py.cli.main import gather_classes, make_generator

    generator = make_generator(ctx)
    try:
        batch = gather_classes(classes, input_file)
    except OSError as exc:
        click.echo(f"Cannot read {input_file}: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(batch, generator)

    if not diagnostics:
        click.echo(f"OK: {len(set(batch))} class(es) are valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
