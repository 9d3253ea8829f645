"""Configuration for building non-observable market data such as curves."""

from __future__ import annotations

from enum import Enum

from ..errors import ValidationError
from .keyed import KeyedRules
from .text import check_token


class MarketDataKind(str, Enum):
    """Kinds of market data built from configuration."""

    CURVE_GROUP = 'curve_group'
    SURFACE = 'surface'
    FX_MATRIX = 'fx_matrix'


class MarketDataConfig(KeyedRules):
    """Named market data build configurations, each tagged with its kind.

    Text form: ``EUR-Vols=surface,USD-Discounting=curve_group``.
    """

    KEY_NAME = 'name'
    VALUE_NAME = 'kind'

    @classmethod
    def _normalize_value(cls, value: object, owner: str) -> str:
        if isinstance(value, MarketDataKind):
            return value.value
        token = check_token(value, cls.VALUE_NAME, owner)
        try:
            return MarketDataKind(token).value
        except ValueError:
            valid = [kind.value for kind in MarketDataKind]
            raise ValidationError(
                f'{owner} kind must be one of {valid}', field=cls.VALUE_NAME, details=f'got {token!r}'
            ) from None

    def get(self, name: str) -> MarketDataKind | None:
        """Return the kind of the configuration called ``name``, if present."""
        value = self.lookup(name)
        return MarketDataKind(value) if value is not None else None

    def names(self, kind: MarketDataKind | str) -> list[str]:
        """Return the names of all configurations of ``kind``, sorted."""
        kind_value = self._normalize_value(kind, type(self).__name__)
        return [name for name, value in self.entries if value == kind_value]

    def with_entry(self, name: str, kind: MarketDataKind | str) -> MarketDataConfig:
        """Return a copy with ``name`` added or replaced."""
        updated = self.as_dict()
        updated[check_token(name, self.KEY_NAME, type(self).__name__)] = self._normalize_value(
            kind, type(self).__name__
        )
        return MarketDataConfig.of(updated)


MarketDataConfig.EMPTY = MarketDataConfig()
