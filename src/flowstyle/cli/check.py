"""CLI command: flowstyle check -- validate the registries."""

from __future__ import annotations

import sys

import click

from flowstyle.model.diagnostic import Severity
from flowstyle.registry import DEFAULT_REGISTRY
from flowstyle.validation import count_by_severity, failures, validate
from flowstyle.validation.rules import RULES_BY_NAME, producible_classes, stylesheet_classes


@click.command()
@click.option("--strict", is_flag=True, help="Fail on warnings as well as errors.")
@click.option(
    "--skip",
    multiple=True,
    type=click.Choice(sorted(RULES_BY_NAME)),
    help="Rule to leave out (repeatable).",
)
@click.option(
    "--coverage", is_flag=True, help="Report how many producible classes have a rule."
)
def check(strict: bool, skip: tuple[str, ...], coverage: bool) -> None:
    """Check the registries for name collisions and stylesheet coverage.

    Exits with code 1 if any error is found, or any warning under --strict.
    """
    registry = DEFAULT_REGISTRY
    diagnostics = validate(registry, skip=skip)

    for diag in diagnostics:
        click.echo(str(diag))
        if diag.fix:
            click.echo(f"  fix: {diag.fix}")

    if coverage:
        produced = producible_classes(registry)
        covered = produced & stylesheet_classes(registry)
        click.echo(f"Coverage: {len(covered)}/{len(produced)} classes have a stylesheet rule")

    counts = count_by_severity(diagnostics)
    ran = len(RULES_BY_NAME) - len(set(skip))
    failed = failures(diagnostics, strict=strict)
    click.echo(
        f"{'FAILED' if failed else 'OK'}: {ran} rule(s) over "
        f"{len(registry.properties)} properties and {len(registry.pseudo_classes)} "
        f"pseudo-classes; {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info"
    )
    if failed:
        sys.exit(1)
