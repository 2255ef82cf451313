"""Exception types raised by infraid."""

from __future__ import annotations


class InfraIDError(Exception):
    """Base class for infraid errors."""


class InvalidInputError(InfraIDError, ValueError):
    """Raised when a string has no alphanumeric character to build an identifier from."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f'Invalid input string "{raw}". It must contain at least 1 alphanum character')
