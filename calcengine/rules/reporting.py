"""Reporting rules: how calculation results are reported."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from ..errors import ParseError, ValidationError
from .text import EMPTY_TEXT, is_empty_text

CURRENCY_PATTERN = re.compile(r'[A-Z]{3}')  # e.g., USD, EUR


@dataclass(frozen=True)
class ReportingRules:
    """Reporting rules, currently the currency results are reported in.

    The empty rules have no currency, in which case each result is reported
    in its natural currency. Text form is the currency code, e.g. ``USD``.
    """

    EMPTY: ClassVar[ReportingRules]

    currency: str | None = None

    def __post_init__(self) -> None:
        if self.currency is not None and (
            not isinstance(self.currency, str) or not CURRENCY_PATTERN.fullmatch(self.currency)
        ):
            raise ValidationError(
                'Reporting currency must be a three letter upper-case code',
                field='currency',
                details=f'got {self.currency!r}',
            )

    @classmethod
    def fixed_currency(cls, currency: str) -> ReportingRules:
        """Report every result in ``currency``."""
        if currency is None:
            raise ValidationError.not_null('currency')
        return cls(currency)

    @classmethod
    def parse(cls, text: str) -> ReportingRules:
        if not isinstance(text, str):
            raise ParseError(repr(text), f'expected a string, got {type(text).__name__}')
        if is_empty_text(text):
            return cls.EMPTY
        try:
            return cls(text.strip())
        except ValidationError as exc:
            raise ParseError(text, exc.message) from exc

    @property
    def is_empty(self) -> bool:
        return self.currency is None

    def reporting_currency(self, target: object = None) -> str | None:
        """Return the currency results for ``target`` are reported in, if fixed.

        The currency does not depend on the target yet; the argument keeps
        call sites stable for per-target rules.
        """
        return self.currency

    def composed_with(self, other: ReportingRules) -> ReportingRules:
        """Use this currency if set, otherwise fall back to ``other``."""
        if not isinstance(other, ReportingRules):
            raise ValidationError(f'Cannot compose ReportingRules with {type(other).__name__}', field='other')
        return self if not self.is_empty else other

    def __str__(self) -> str:
        return self.currency if self.currency is not None else EMPTY_TEXT


ReportingRules.EMPTY = ReportingRules()
