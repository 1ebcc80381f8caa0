"""Exceptions raised while reading, checking or encoding ABI values."""

from __future__ import annotations


class AbiError(ValueError):
    """Base class for every ABI related failure."""


class InvalidName(AbiError):
    """A type or parameter name could not be understood."""

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid name: {name!r}")
        self.name = name


class InvalidData(AbiError):
    """Data does not match what the ABI description expects."""

    def __init__(self, message: str = "invalid data") -> None:
        super().__init__(message)