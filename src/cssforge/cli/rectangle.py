"""CLI command: cssforge rectangle -- print a rectangle as JSON with its area."""

from __future__ import annotations

import sys
from dataclasses import replace

import click

from cssforge.config import CssForgeConfig
from cssforge.errors import SerializationError
from cssforge.serialization import get_json
from cssforge.shapes import Rectangle


def _number(ctx: click.Context, param: click.Parameter, raw: str) -> float:
    """Parse *raw* as an int when it is integral, otherwise as a float."""
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise click.BadParameter(f"{raw!r} is not a number", param=param) from None


@click.command()
@click.argument("width", callback=_number)
@click.argument("height", callback=_number)
@click.option("--indent", type=int, default=None, help="Pretty-print JSON with this indent")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort JSON object keys")
@click.pass_obj
def rectangle(
    config: CssForgeConfig | None,
    width: float,
    height: float,
    indent: int | None,
    sort_keys: bool,
) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON, followed by its area."""
    config = replace(config or CssForgeConfig(), json_indent=indent, json_sort_keys=sort_keys)
    rect = Rectangle(width, height)

    try:
        text = get_json(
            rect,
            indent=config.json_indent,
            sort_keys=config.json_sort_keys,
            ensure_ascii=config.ensure_ascii,
        )
    except SerializationError as exc:
        click.echo(f"Serialization error: {exc}", err=True)
        sys.exit(1)

    click.echo(text)
    click.echo(f"Area: {rect.get_area()}")
