"""CLI command: flowstyle inspect -- list the registries."""

from __future__ import annotations

import click

from flowstyle.registry import DEFAULT_REGISTRY


@click.command()
def inspect() -> None:
    """Display the registered properties and pseudo-classes.

    Shows each property's CSS name, variable, default and class, then each
    pseudo-class with its prefix.
    """
    registry = DEFAULT_REGISTRY

    click.echo(f"Properties: {len(registry.properties)}")
    click.echo(f"Pseudo-classes: {len(registry.pseudo_classes)}")
    click.echo()

    click.echo("Properties:")
    width = max((len(p.name) for p in registry.properties), default=0)
    for prop in registry.properties:
        click.echo(
            f"  {prop.name:<{width}}  {prop.prefixed_variable()}  "
            f"default={prop.default_value}  class={prop.class_name()}"
        )
    click.echo()

    click.echo("Pseudo-classes:")
    for pseudo in registry.pseudo_classes:
        click.echo(f"  {pseudo.name}  prefix={pseudo.prefix}  class={pseudo.class_name}")
