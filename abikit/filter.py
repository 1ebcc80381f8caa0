"""Topic filters used to select contract event logs."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TopicKind(Enum):
    """Which topic values a filter position accepts."""

    ANY = "any"
    ONE_OF = "one_of"
    THIS = "this"


_UNAVAILABLE = "Topic unavailable"


@dataclass(frozen=True)
class Topic:
    """Acceptable values for one topic position: any, one of several, or exactly one."""

    kind: TopicKind = TopicKind.ANY
    value: Any = None

    def __post_init__(self) -> None:
        if self.kind is TopicKind.ONE_OF:
            object.__setattr__(self, "value", tuple(self.value))
        elif self.kind is TopicKind.ANY:
            object.__setattr__(self, "value", None)

    @classmethod
    def any(cls) -> Topic:
        """A topic matching any value."""
        return cls(TopicKind.ANY)

    @classmethod
    def one_of(cls, items: Iterable[Any]) -> Topic:
        """A topic matching any of ``items``."""
        return cls(TopicKind.ONE_OF, tuple(items))

    @classmethod
    def this(cls, value: Any) -> Topic:
        """A topic matching only ``value``."""
        return cls(TopicKind.THIS, value)

    @classmethod
    def from_value(cls, value: Any) -> Topic:
        """``None`` matches anything, a list or tuple any of its items, anything else itself."""
        if value is None:
            return cls.any()
        if isinstance(value, (list, tuple)):
            return cls.one_of(value)
        return cls.this(value)

    def map(self, func: Callable[[Any], Any]) -> Topic:
        """Return a topic with ``func`` applied to every value."""
        match self.kind:
            case TopicKind.ANY:
                return Topic.any()
            case TopicKind.ONE_OF:
                return Topic.one_of(func(item) for item in self.value)
            case _:
                return Topic.this(func(self.value))

    def is_any(self) -> bool:
        """Whether this topic matches any value."""
        return self.kind is TopicKind.ANY

    def to_list(self) -> list[Any]:
        """Return the accepted values; empty when any value is accepted."""
        match self.kind:
            case TopicKind.ANY:
                return []
            case TopicKind.ONE_OF:
                return list(self.value)
            case _:
                return [self.value]

    def __getitem__(self, index: int) -> Any:
        match self.kind:
            case TopicKind.ANY:
                raise IndexError(_UNAVAILABLE)
            case TopicKind.THIS:
                if index != 0:
                    raise IndexError(_UNAVAILABLE)
                return self.value
            case _:
                if index < 0:
                    raise IndexError(_UNAVAILABLE)
                return self.value[index]

    def to_json(self) -> str:
        """Serialise a topic of 32-byte hashes to compact JSON text."""
        return json.dumps(_topic_json_value(self), separators=(",", ":"))


def _hash_hex(value: Any) -> str:
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError(f"topic value is not a hash: {value!r}")
    return "0x" + bytes(value).hex()


def _topic_json_value(topic: Topic) -> Any:
    match topic.kind:
        case TopicKind.ANY:
            return None
        case TopicKind.ONE_OF:
            return [_hash_hex(item) for item in topic.value]
        case _:
            return _hash_hex(topic.value)


@dataclass(frozen=True)
class RawTopicFilter:
    """Topic filter over tokens, before they are turned into hashes."""

    topic0: Topic = field(default_factory=Topic.any)
    topic1: Topic = field(default_factory=Topic.any)
    topic2: Topic = field(default_factory=Topic.any)


@dataclass(frozen=True)
class TopicFilter:
    """Topic filter over hashes; ``topic0`` is usually the event signature."""

    topic0: Topic = field(default_factory=Topic.any)
    topic1: Topic = field(default_factory=Topic.any)
    topic2: Topic = field(default_factory=Topic.any)
    topic3: Topic = field(default_factory=Topic.any)

    def to_json(self) -> str:
        """Serialise the four topics as a compact JSON array."""
        topics = (self.topic0, self.topic1, self.topic2, self.topic3)
        return json.dumps([_topic_json_value(t) for t in topics], separators=(",", ":"))