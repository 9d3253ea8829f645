"""Name-based access to the properties of immutable configuration beans.

Each bean type gets one ``MetaBean``, built at import time from a fixed
table of ``MetaProperty`` entries. Tooling uses it to enumerate property
names, look up their types, read values by name, parse text into property
values and obtain a builder without knowing the concrete bean class.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from ..errors import ParseError, UnknownPropertyError


@dataclass(frozen=True)
class MetaProperty:
    """Metadata for a single bean property."""

    name: str
    property_type: type
    description: str = ''

    def get(self, bean: Any) -> Any:
        return getattr(bean, self.name)

    def parse(self, text: str) -> Any:
        """Parse ``text`` with the property type's ``parse`` classmethod.

        Raises:
            ParseError: With ``field`` set to this property's name
        """
        try:
            return self.property_type.parse(text)
        except ParseError as exc:
            raise ParseError(exc.text, exc.reason, field=self.name) from exc

    def render(self, value: Any) -> str:
        return str(value)

    def accepts(self, value: Any) -> bool:
        return isinstance(value, self.property_type)


class MetaBean:
    """Property table for one bean type."""

    def __init__(
        self,
        bean_type: type,
        properties: Sequence[MetaProperty],
        builder_factory: Callable[[], Any],
    ):
        """
        Initialize the meta-bean.

        Args:
            bean_type: The immutable bean class described
            properties: Properties in their fixed declaration order
            builder_factory: Returns a new builder populated with defaults
        """
        self.bean_type = bean_type
        self._properties: dict[str, MetaProperty] = {prop.name: prop for prop in properties}
        self._builder_factory = builder_factory

    @property
    def bean_name(self) -> str:
        return self.bean_type.__name__

    def property_names(self) -> tuple[str, ...]:
        return tuple(self._properties)

    def meta_properties(self) -> Iterator[MetaProperty]:
        return iter(self._properties.values())

    def meta_property(self, name: str | MetaProperty) -> MetaProperty:
        """Resolve a property by name, or check that ``name`` is one of this bean's properties."""
        if isinstance(name, MetaProperty):
            if self._properties.get(name.name) != name:
                raise UnknownPropertyError(name.name, self.bean_name)
            return name
        try:
            return self._properties[name]
        except (KeyError, TypeError):
            raise UnknownPropertyError(name, self.bean_name) from None

    def has_property(self, name: str) -> bool:
        try:
            return name in self._properties
        except TypeError:
            return False

    def property_type(self, name: str) -> type:
        return self.meta_property(name).property_type

    def get(self, bean: Any, name: str) -> Any:
        return self.meta_property(name).get(bean)

    def to_dict(self, bean: Any) -> dict[str, Any]:
        return {name: prop.get(bean) for name, prop in self._properties.items()}

    def builder(self) -> Any:
        """Return a new builder for the bean type, populated with defaults."""
        return self._builder_factory()

    def render(self, bean: Any, prefix: str | None = None) -> str:
        """Render ``Name{prop=value, ...}`` using each property's text form."""
        body = ', '.join(f'{name}={prop.render(prop.get(bean))}' for name, prop in self._properties.items())
        return f'{prefix or self.bean_name}{{{body}}}'
