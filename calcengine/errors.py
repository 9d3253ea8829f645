"""Exceptions raised while constructing and inspecting calculation rules."""

from __future__ import annotations


class CalculationRulesError(Exception):
    """Base exception for calculation rules errors."""


class ValidationError(CalculationRulesError, ValueError):
    """A required value is missing or has the wrong type."""

    def __init__(self, message: str, field: str = '', details: str = ''):
        self.message = message
        self.field = field
        self.details = details
        super().__init__(self.format_message())

    def format_message(self) -> str:
        msg = self.message
        if self.details:
            msg += f' ({self.details})'
        return msg

    @classmethod
    def not_null(cls, field: str) -> ValidationError:
        return cls(f'{field} must not be null', field=field)


class UnknownPropertyError(CalculationRulesError, LookupError):
    """A name-indexed access referenced a property that does not exist."""

    def __init__(self, property_name: str, bean_name: str = ''):
        self.property_name = property_name
        self.bean_name = bean_name
        message = f'Unknown property: {property_name}'
        if bean_name:
            message += f' on {bean_name}'
        super().__init__(message)


class ParseError(CalculationRulesError, ValueError):
    """Text could not be converted into the expected value type."""

    def __init__(self, text: str, reason: str, field: str = ''):
        self.text = text
        self.reason = reason
        self.field = field
        where = f' for {field}' if field else ''
        super().__init__(f'Unable to parse {text!r}{where}: {reason}')
