"""Base class for rules that map a key to a named setting."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from ..errors import ParseError, ValidationError
from .text import check_token, format_entries, parse_entries

_KeyedT = TypeVar('_KeyedT', bound='KeyedRules')


@dataclass(frozen=True)
class KeyedRules:
    """Immutable, ordered ``key -> value`` rules.

    Entries are normalised to a tuple sorted by key, so two rule sets built
    from the same mapping in a different order are equal and hash equally.
    """

    EMPTY: ClassVar[KeyedRules]
    KEY_NAME: ClassVar[str] = 'key'
    VALUE_NAME: ClassVar[str] = 'value'

    entries: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        owner = type(self).__name__
        if self.entries is None:
            raise ValidationError.not_null('entries')
        normalized: dict[str, str] = {}
        for entry in self.entries:
            if not isinstance(entry, (tuple, list)) or len(entry) != 2:
                raise ValidationError(
                    f'{owner} entries must be (key, value) pairs', field='entries', details=f'got {entry!r}'
                )
            raw_key, raw_value = entry
            key = check_token(raw_key, self.KEY_NAME, owner)
            value = self._normalize_value(raw_value, owner)
            if key in normalized:
                raise ValidationError(f'{owner} has duplicate {self.KEY_NAME} {key!r}', field='entries')
            normalized[key] = value
        object.__setattr__(self, 'entries', tuple(sorted(normalized.items())))

    @classmethod
    def _normalize_value(cls, value: object, owner: str) -> str:
        return check_token(value, cls.VALUE_NAME, owner)

    @classmethod
    def of(cls: type[_KeyedT], mapping: Mapping[str, object] | Iterable[tuple[str, object]]) -> _KeyedT:
        """Create rules from a mapping or from ``(key, value)`` pairs."""
        items = mapping.items() if isinstance(mapping, Mapping) else mapping
        rules = cls(tuple(items))
        return rules if rules.entries else cls.EMPTY

    @classmethod
    def parse(cls: type[_KeyedT], text: str) -> _KeyedT:
        """Parse the canonical ``key=value,...`` form; ``EMPTY`` gives the empty rules."""
        entries = parse_entries(text)
        if not entries:
            return cls.EMPTY
        try:
            return cls(entries)
        except ValidationError as exc:
            raise ParseError(text, exc.message) from exc

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def as_dict(self) -> dict[str, str]:
        return dict(self.entries)

    def lookup(self, key: str) -> str | None:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return None

    def composed_with(self: _KeyedT, other: _KeyedT) -> _KeyedT:
        """
        Combine with another rule set of the same type.

        Entries in this rule set take precedence; ``other`` only supplies
        keys missing here.
        """
        if type(other) is not type(self):
            raise ValidationError(
                f'Cannot compose {type(self).__name__} with {type(other).__name__}', field='other'
            )
        merged = dict(other.entries)
        merged.update(self.entries)
        return type(self).of(merged)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return format_entries(self.entries)
