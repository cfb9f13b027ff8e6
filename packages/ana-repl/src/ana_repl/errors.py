"""Errors raised by the token shell."""

from __future__ import annotations

from ana.token import Token


class AnaError(Exception):
    pass


class ConfigurationError(AnaError):
    """An ANA_* setting holds a value that cannot be used."""

    def __init__(self, name: str, value: str):
        super().__init__(f"Invalid boolean for {name}: {value!r}")
        self.name = name
        self.value = value


class IllegalTokenError(AnaError):
    """Strict mode hit an illegal character."""

    def __init__(self, token: Token, *, line_number: int, line: str):
        super().__init__(f"illegal character {token.literal!r} on line {line_number}")
        self.token = token
        self.line_number = line_number
        self.line = line
