"""Canonical text form shared by the rule types.

Mapping-shaped rules render as ``key=value`` entries joined by commas, with
entries sorted by key. The empty value of every rule type renders as
``EMPTY``.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import ParseError, ValidationError

EMPTY_TEXT = 'EMPTY'
ENTRY_SEPARATOR = ','
KEY_VALUE_SEPARATOR = '='


def is_empty_text(text: str) -> bool:
    return text.strip() == EMPTY_TEXT


def format_entries(entries: Iterable[tuple[str, str]]) -> str:
    rendered = [f'{key}{KEY_VALUE_SEPARATOR}{value}' for key, value in entries]
    return ENTRY_SEPARATOR.join(rendered) if rendered else EMPTY_TEXT


def parse_entries(text: str) -> tuple[tuple[str, str], ...]:
    """
    Parse ``key=value,key=value`` text into sorted entries.

    Args:
        text: Text to parse; ``EMPTY`` yields no entries

    Returns:
        Entries sorted by key

    Raises:
        ParseError: On a non-string, a blank string, an entry without ``=``,
            an empty key or value, or a repeated key
    """
    if not isinstance(text, str):
        raise ParseError(repr(text), f'expected a string, got {type(text).__name__}')
    if not text.strip():
        raise ParseError(text, 'text is blank')
    if is_empty_text(text):
        return ()

    parsed: dict[str, str] = {}
    for raw_entry in text.split(ENTRY_SEPARATOR):
        key, sep, value = raw_entry.partition(KEY_VALUE_SEPARATOR)
        key = key.strip()
        value = value.strip()
        if not sep:
            raise ParseError(text, f"entry {raw_entry.strip()!r} is missing '{KEY_VALUE_SEPARATOR}'")
        if not key or not value:
            raise ParseError(text, f'entry {raw_entry.strip()!r} has an empty key or value')
        if key in parsed:
            raise ParseError(text, f'duplicate key {key!r}')
        parsed[key] = value

    return tuple(sorted(parsed.items()))


def check_token(token: object, what: str, owner: str) -> str:
    """
    Check that a key or value can appear in the canonical text form.

    Returns:
        The token with surrounding whitespace removed

    Raises:
        ValidationError: If the token is not a non-blank string free of
            separators
    """
    if token is None:
        raise ValidationError(f'{owner} {what} must not be null', field=what)
    if not isinstance(token, str):
        raise ValidationError(f'{owner} {what} must be a string, got {type(token).__name__}', field=what)
    stripped = token.strip()
    if not stripped:
        raise ValidationError(f'{owner} {what} must not be blank', field=what)
    if ENTRY_SEPARATOR in stripped or KEY_VALUE_SEPARATOR in stripped:
        raise ValidationError(
            f'{owner} {what} must not contain {ENTRY_SEPARATOR!r} or {KEY_VALUE_SEPARATOR!r}',
            field=what,
            details=f'got {token!r}',
        )
    return stripped
