"""
Variant resolution by partial match.

A variant matches a selection when it agrees on every option present in
the selection; options not chosen yet are unconstrained. The selection
resolves to a variant as soon as exactly one candidate is left, which may
happen before every option is chosen:

    options: Color in {Red, Blue}, Size in {38, 39}
    variants: (Red, 38), (Red, 39), (Blue, 38)

    {"Color": "Blue"} -> (Blue, 38)   single candidate
    {"Color": "Red"}  -> None         two candidates, Size still open
"""

from collections.abc import Iterable, Mapping

from variantman.protocols.catalog import Variant


def matches(variant: Variant, selection: Mapping[str, str]) -> bool:
    """True if variant agrees with every chosen option."""
    return all(variant.options.get(name) == value for name, value in selection.items())


def candidates(variants: Iterable[Variant], selection: Mapping[str, str]) -> list[Variant]:
    """Variants still compatible with the selection."""
    return [v for v in variants if matches(v, selection)]


def resolve(variants: Iterable[Variant], selection: Mapping[str, str]) -> Variant | None:
    """
    Return the single variant implied by the selection.

    Returns:
        The only surviving candidate, or None when zero or several survive
        (duplicated combinations therefore never resolve).
    """
    found = candidates(variants, selection)
    if len(found) == 1:
        return found[0]
    return None
