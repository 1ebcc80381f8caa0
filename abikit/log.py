"""Raw and decoded Ethereum event logs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .token import Token


@dataclass(frozen=True)
class RawLog:
    """A log as stored on chain: indexed params as topics, the rest as data."""

    topics: tuple[bytes, ...] = ()
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "topics", tuple(bytes(topic) for topic in self.topics))
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_tuple(cls, raw: tuple[Iterable[bytes], bytes]) -> RawLog:
        """Build a log from a ``(topics, data)`` pair."""
        topics, data = raw
        return cls(topics=tuple(topics), data=data)


@dataclass(frozen=True)
class LogParam:
    """A decoded log parameter."""

    name: str
    value: Token


@dataclass(frozen=True)
class Log:
    """A decoded log."""

    params: tuple[LogParam, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))