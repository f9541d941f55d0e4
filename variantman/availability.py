"""
Per-value availability.

Each value is probed by forcing it into the selection (replacing the
option's own current value) and applying the resolver's partial-match
rule. A value is:

- existing: at least one variant matches the probe
- available: ... and at least one of those has stock
"""

from collections.abc import Iterable, Mapping, Sequence

from variantman.conf import variantman_settings
from variantman.protocols.catalog import (
    CatalogOption,
    OptionRow,
    OptionValueState,
    Variant,
)
from variantman.resolver import candidates


def _probe(
    option_name: str,
    value: str,
    variants: Iterable[Variant],
    selection: Mapping[str, str],
) -> list[Variant]:
    probe = {**selection, option_name: value}
    return candidates(variants, probe)


def option_value_exists(
    option_name: str,
    value: str,
    variants: Iterable[Variant],
    selection: Mapping[str, str],
) -> bool:
    """True if choosing value can lead to an existing variant, stock ignored."""
    return bool(_probe(option_name, value, variants, selection))


def is_option_value_available(
    option_name: str,
    value: str,
    variants: Iterable[Variant],
    selection: Mapping[str, str],
) -> bool:
    """True if choosing value can lead to an existing, in-stock variant."""
    return any(v.stock > 0 for v in _probe(option_name, value, variants, selection))


def option_rows(
    options: Sequence[CatalogOption],
    variants: Sequence[Variant],
    selection: Mapping[str, str],
    hide_sold_out: bool | None = None,
) -> list[OptionRow]:
    """
    Build the value buttons for every option.

    Values that match no variant are never listed. Sold-out values are
    listed only when hide_sold_out is False (defaults to
    VARIANTMAN["HIDE_SOLD_OUT_VALUES"]).
    """
    if hide_sold_out is None:
        hide_sold_out = variantman_settings.HIDE_SOLD_OUT_VALUES

    rows = []
    for option in options:
        current = selection.get(option.name)
        states = []
        for value in option.values:
            probed = _probe(option.name, value, variants, selection)
            exists = bool(probed)
            available = any(v.stock > 0 for v in probed)
            if not exists or (hide_sold_out and not available):
                continue
            states.append(
                OptionValueState(
                    value=value,
                    swatch=option.swatch_for(value),
                    is_selected=current == value,
                    is_available=available,
                    exists=exists,
                    is_dimmed=current is not None and current != value,
                )
            )
        rows.append(OptionRow(option=option, values=tuple(states)))
    return rows
