"""CLI command: cssbuilder build -- render a selector from fragment tokens."""

from __future__ import annotations

import sys

import click

from cssbuilder.errors import CssBuilderError
from cssbuilder.selector.builder import Selector, SelectorBuilder, combine
from cssbuilder.selector.model import Combinator, FragmentKind

_TOKEN_KINDS: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}

_COMBINATOR_TOKENS: dict[str, Combinator] = {
    "descendant": Combinator.DESCENDANT,
    ">": Combinator.CHILD,
    "+": Combinator.NEXT_SIBLING,
    "~": Combinator.SUBSEQUENT_SIBLING,
}


def build_selector(tokens: tuple[str, ...] | list[str]) -> Selector:
    """Turn ``kind=value`` and combinator tokens into a selector.

    Compound selectors are joined left to right, so
    ``element=div + element=p ~ class=note`` renders ``div + p ~ .note``.

    Raises:
        ValueError: a token is malformed or a compound selector is empty.
        SelectorError: fragments break the selector grammar.
    """
    compounds: list[SelectorBuilder] = [SelectorBuilder()]
    separators: list[Combinator] = []

    for token in tokens:
        if token in _COMBINATOR_TOKENS:
            if not compounds[-1].kinds:
                raise ValueError(f"Combinator {token!r} has no selector on its left")
            separators.append(_COMBINATOR_TOKENS[token])
            compounds.append(SelectorBuilder())
            continue

        name, sep, value = token.partition("=")
        if not sep:
            raise ValueError(f"Expected kind=value or a combinator, got {token!r}")
        kind = _TOKEN_KINDS.get(name)
        if kind is None:
            raise ValueError(
                f"Unknown fragment kind {name!r}; expected one of: "
                + ", ".join(_TOKEN_KINDS)
            )
        compounds[-1].add(kind, value)

    if not compounds[-1].kinds:
        raise ValueError("Selector is empty" if not separators else "Trailing combinator")

    selector: Selector = compounds[0]
    for separator, right in zip(separators, compounds[1:]):
        selector = combine(selector, separator, right)
    return selector


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a selector from TOKENS and print it.

    Each token is either a fragment, written kind=value with kind one of
    element, id, class, attr, pseudo-class, pseudo-element, or a combinator:
    '+', '~', '>' or 'descendant'.

    Example: cssbuilder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        selector = build_selector(tokens)
    except (CssBuilderError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.render())
