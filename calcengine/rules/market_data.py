"""Market data rules: which market data mappings each target type uses."""

from __future__ import annotations

from .keyed import KeyedRules


class MarketDataRules(KeyedRules):
    """Maps a target type name to the name of its market data mappings.

    The mappings name usually identifies a curve group, for example
    ``Swap=USD-Discounting``.
    """

    KEY_NAME = 'target'
    VALUE_NAME = 'mappings'

    def mappings(self, target: str) -> str | None:
        """Return the market data mappings name for ``target``, if any."""
        return self.lookup(target)


MarketDataRules.EMPTY = MarketDataRules()
