"""CLI command: flowstyle css -- emit the static stylesheet."""

from __future__ import annotations

from pathlib import Path

import click

from flowstyle.config import DEFAULT_CONFIG, StylesheetConfig
from flowstyle.stylesheet import generate_stylesheet


@click.command()
@click.option(
    "--out",
    "out_file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the stylesheet to FILE instead of stdout",
)
@click.option("--no-prelude", is_flag=True, help="Omit the base-class prelude")
def css(out_file: str | None, no_prelude: bool) -> None:
    """Generate the flowstyle stylesheet.

    The output depends only on the built-in registries, so it can be
    generated once at build time and served as a static asset.
    """
    config = StylesheetConfig(prelude="") if no_prelude else DEFAULT_CONFIG
    text = generate_stylesheet(config=config)

    if out_file is None:
        click.echo(text, nl=False)
        return

    path = Path(out_file)
    path.write_text(text, encoding="utf-8")
    click.echo(f"Wrote {len(text)} bytes to {path}", err=True)
