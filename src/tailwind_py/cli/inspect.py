"""CLI command: tailwind-py inspect -- show how one class is resolved."""

from __future__ import annotations

import sys

import click

from tailwind_py.config import OutputMode
from tailwind_py.errors import ClassError
from tailwind_py.generator.cascade import classify
from tailwind_py.model.stylesheet import GeneratedStylesheet, RuleGroup


@click.command()
@click.argument("class_name")
@click.pass_context
def inspect(ctx: click.Context, class_name: str) -> None:
    """Parse CLASS_NAME and display its token, context and CSS."""
    from tailwind_py.cli.main import make_generator

    generator = make_generator(ctx)
    try:
        token = generator.parse(class_name)
        context = generator.resolver.resolve(token.variants)
        rule = generator.builder.build(token.definition, token, context)
    except ClassError as exc:
        click.echo(f"{exc.kind}: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Class:    {token.raw}")
    click.echo(f"Utility:  {token.utility} -> {token.definition.name}")
    click.echo(f"Value:    {token.value}")
    if token.opacity is not None:
        click.echo(f"Opacity:  {token.opacity}")
    flags = [name for name, on in (("important", token.important), ("negative", token.negative)) if on]
    if flags:
        click.echo(f"Flags:    {', '.join(flags)}")
    click.echo()

    click.echo("Variants:")
    if not token.variants:
        click.echo("  (none)")
    for variant in token.variants:
        click.echo(f"  {variant.kind.value}: {variant}")
    click.echo()

    category = classify(context)
    click.echo(f"Context:  {context.describe() or '(none)'} [{category.value}]")
    click.echo()

    sheet = GeneratedStylesheet(groups=(RuleGroup(context, category, (rule,)),))
    click.echo(sheet.to_css(OutputMode.PRETTY), nl=False)
