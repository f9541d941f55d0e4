"""Selection: the user's in-progress option choices for one product."""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from variantman.protocols.catalog import Product

logger = logging.getLogger(__name__)


class Selection:
    """
    Mutable mapping option name -> chosen value.

    handle_option_change() is the only mutation entry point. Writes naming
    an undeclared option or value are ignored. Re-selecting a value
    overwrites (no toggle), so repeating a call is idempotent.
    """

    def __init__(self, product: Product):
        self._allowed = {option.name: frozenset(option.values) for option in product.options}
        self._chosen: dict[str, str] = {}

    def __repr__(self):
        return f"<Selection {self._chosen!r}>"

    def __contains__(self, option_name):
        return option_name in self._chosen

    def __len__(self):
        return len(self._chosen)

    @property
    def selected(self) -> Mapping[str, str]:
        """Read-only snapshot; later changes do not show through."""
        return MappingProxyType(dict(self._chosen))

    def get(self, option_name: str) -> str | None:
        return self._chosen.get(option_name)

    def handle_option_change(self, option_name: str, value: str) -> bool:
        """
        Set option_name to value.

        Returns:
            True if the selection changed, False if the write was ignored
            or repeated the current value.
        """
        allowed = self._allowed.get(option_name)
        if allowed is None or value not in allowed:
            logger.debug("Ignoring selection %r=%r: not declared", option_name, value)
            return False
        if self._chosen.get(option_name) == value:
            return False
        self._chosen[option_name] = value
        return True

    def reset(self) -> None:
        self._chosen.clear()
