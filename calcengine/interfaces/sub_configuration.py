"""Sub-configuration protocol interface."""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable


@runtime_checkable
class SubConfigurationProtocol(Protocol):
    """Protocol for values stored inside ``CalculationRules``.

    Calculation rules treat these values as opaque. All they rely on is an
    empty default, a canonical text form that ``parse`` accepts back, and
    structural equality and hashing.
    """

    EMPTY: ClassVar[SubConfigurationProtocol]

    @classmethod
    def parse(cls, text: str) -> SubConfigurationProtocol:
        """Parse the canonical text form.

        Raises:
            ParseError: If the text is malformed
        """
        ...

    @property
    def is_empty(self) -> bool:
        """Whether this is the empty default."""
        ...

    def __str__(self) -> str:
        ...

    def __eq__(self, other: object) -> bool:
        ...

    def __hash__(self) -> int:
        ...
