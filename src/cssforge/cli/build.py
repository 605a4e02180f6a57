"""CLI command: cssforge build -- assemble a compound selector from parts."""

from __future__ import annotations

import sys
from typing import Callable

import click

from cssforge.errors import SelectorError
from cssforge.selector import PartKind, SelectorBuilder

_APPENDERS: dict[PartKind, Callable[[SelectorBuilder, str], SelectorBuilder]] = {
    PartKind.ELEMENT: SelectorBuilder.set_element,
    PartKind.ID: SelectorBuilder.set_id,
    PartKind.CLASS: SelectorBuilder.add_class,
    PartKind.ATTRIBUTE: SelectorBuilder.add_attribute,
    PartKind.PSEUDO_CLASS: SelectorBuilder.add_pseudo_class,
    PartKind.PSEUDO_ELEMENT: SelectorBuilder.set_pseudo_element,
}


def _parse_parts(
    ctx: click.Context, param: click.Parameter, tokens: tuple[str, ...]
) -> list[tuple[PartKind, str]]:
    """Turn ``kind=value`` tokens into (PartKind, value) pairs."""
    parts: list[tuple[PartKind, str]] = []
    for token in tokens:
        kind, sep, value = token.partition("=")
        if not sep:
            raise click.BadParameter(f"expected KIND=VALUE, got {token!r}", param=param)
        try:
            parts.append((PartKind(kind.strip().lower()), value))
        except ValueError:
            choices = ", ".join(k.value for k in PartKind)
            raise click.BadParameter(
                f"unknown part kind {kind!r} (choose from {choices})", param=param
            ) from None
    return parts


@click.command()
@click.argument("parts", nargs=-1, required=True, callback=_parse_parts)
def build(parts: list[tuple[PartKind, str]]) -> None:
    """Build a selector from KIND=VALUE parts, applied in the order given.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Example: cssforge build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    (first_kind, first_value), rest = parts[0], parts[1:]
    try:
        selector = SelectorBuilder(first_kind, first_value)
        for kind, value in rest:
            _APPENDERS[kind](selector, value)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
