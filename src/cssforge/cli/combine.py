"""CLI command: cssforge combine -- join two finalized selectors."""

from __future__ import annotations

import click

from cssforge.selector import CombinedSelector, Combinator

_COMBINATOR_NAMES: dict[str, Combinator] = {
    "descendant": Combinator.DESCENDANT,
    "child": Combinator.CHILD,
    "adjacent": Combinator.ADJACENT_SIBLING,
    "sibling": Combinator.GENERAL_SIBLING,
}


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join LEFT and RIGHT selectors with COMBINATOR.

    COMBINATOR is used verbatim, or may be one of the names descendant,
    child, adjacent, sibling.
    """
    token = _COMBINATOR_NAMES.get(combinator.lower(), combinator)
    click.echo(CombinedSelector(left=left, combinator=str(token), right=right).stringify())
