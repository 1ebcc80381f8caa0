"""ABI parameter types, with parsing from and formatting to type strings."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InvalidName

_UNSIGNED = re.compile(r"\+?[0-9]+")


class ParamType:
    """Base class of all function and event parameter types."""

    def is_dynamic(self) -> bool:
        """Whether values of this type are encoded with an offset prefix."""
        return False

    def is_empty_bytes_valid_encoding(self) -> bool:
        """Whether an empty byte string is a valid encoding of this type."""
        return False

    def __str__(self) -> str:
        return write(self)


@dataclass(frozen=True)
class AddressType(ParamType):
    """An address."""


@dataclass(frozen=True)
class BytesType(ParamType):
    """Bytes of unknown length."""

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class IntType(ParamType):
    """A signed integer of the given bit size."""

    size: int


@dataclass(frozen=True)
class UintType(ParamType):
    """An unsigned integer of the given bit size."""

    size: int


@dataclass(frozen=True)
class BoolType(ParamType):
    """A boolean."""


@dataclass(frozen=True)
class StringType(ParamType):
    """A UTF-8 string."""

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class ArrayType(ParamType):
    """An array of unknown length."""

    inner: ParamType

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class FixedBytesType(ParamType):
    """Bytes of a fixed length."""

    size: int

    def is_empty_bytes_valid_encoding(self) -> bool:
        return self.size == 0


@dataclass(frozen=True)
class FixedArrayType(ParamType):
    """An array of a fixed length."""

    inner: ParamType
    size: int

    def is_dynamic(self) -> bool:
        return self.inner.is_dynamic()

    def is_empty_bytes_valid_encoding(self) -> bool:
        return self.size == 0


@dataclass(frozen=True)
class TupleType(ParamType):
    """A tuple of possibly different types."""

    params: tuple[ParamType, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))

    def is_dynamic(self) -> bool:
        return any(param.is_dynamic() for param in self.params)


def _parse_size(text: str, name: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise InvalidName(name)
    return int(text)


def _read_tuple(name: str) -> TupleType:
    if not name.startswith("("):
        raise InvalidName(name)

    subtypes: list[ParamType] = []
    subtuples: list[list[ParamType]] = []
    nested = 0
    top_level_paren_open = 0
    last_item = 1
    length = len(name)
    pos = 0

    while pos < length:
        char = name[pos]
        if char == "(":
            top_level_paren_open = pos
            nested += 1
            if nested > 1:
                subtuples.append([])
                last_item = pos + 1
        elif char == ")":
            nested -= 1
            if nested < 0:
                raise InvalidName(name)
            if not name[last_item:pos]:
                last_item = pos + 1
            elif nested == 0:
                subtypes.append(read(name[last_item:pos]))
                last_item = pos + 1
            else:
                # Keep any trailing array brackets with the nested tuple.
                while pos + 1 < length and name[pos + 1] not in ",)":
                    pos += 1
                subtype = read(name[top_level_paren_open : pos + 1])
                if nested > 1:
                    subtuple = subtuples[nested - 2]
                    subtuples[nested - 2] = []
                    subtuple.append(subtype)
                    subtypes.append(TupleType(subtuple))
                else:
                    subtypes.append(subtype)
                last_item = pos + 1
        elif char == ",":
            if not name[last_item:pos]:
                last_item = pos + 1
            elif nested == 1:
                subtypes.append(read(name[last_item:pos]))
                last_item = pos + 1
            elif nested > 1:
                subtuples[nested - 2].append(read(name[last_item:pos]))
                last_item = pos + 1
        pos += 1

    return TupleType(subtypes)


def _read_array(name: str) -> ParamType:
    body = name[:-1]
    number = body[body.rfind("[") + 1 :]
    if not number:
        return ArrayType(read(name[:-2]))
    size = _parse_size(number, name)
    end = len(name) - len(number) - 2
    if end < 0:
        raise InvalidName(name)
    return FixedArrayType(read(name[:end]), size)


_SIMPLE: dict[str, ParamType] = {
    "address": AddressType(),
    "bytes": BytesType(),
    "bool": BoolType(),
    "string": StringType(),
    "int": IntType(256),
    "tuple": TupleType(),
    "uint": UintType(256),
}


def read(name: str) -> ParamType:
    """Parse a type string such as ``uint256[]`` or ``(address,bool)``."""
    if name.endswith(")"):
        return _read_tuple(name)
    if name.endswith("]"):
        return _read_array(name)

    simple = _SIMPLE.get(name)
    if simple is not None:
        return simple
    if name.startswith("int"):
        return IntType(_parse_size(name[3:], name))
    if name.startswith("uint"):
        return UintType(_parse_size(name[4:], name))
    if name.startswith("bytes"):
        return FixedBytesType(_parse_size(name[5:], name))
    raise InvalidName(name)


def write(param: ParamType) -> str:
    """Format a type as used in signatures, with tuple contents spelled out."""
    return write_for_abi(param, True)


def write_for_abi(param: ParamType, serialize_tuple_contents: bool) -> str:
    """Format a type; tuples become ``tuple`` unless contents are requested."""
    match param:
        case AddressType():
            return "address"
        case BytesType():
            return "bytes"
        case FixedBytesType(size):
            return f"bytes{size}"
        case IntType(size):
            return f"int{size}"
        case UintType(size):
            return f"uint{size}"
        case BoolType():
            return "bool"
        case StringType():
            return "string"
        case FixedArrayType(inner, size):
            return f"{write_for_abi(inner, serialize_tuple_contents)}[{size}]"
        case ArrayType(inner):
            return f"{write_for_abi(inner, serialize_tuple_contents)}[]"
        case TupleType(params):
            if not serialize_tuple_contents:
                return "tuple"
            inner = ",".join(write_for_abi(p, serialize_tuple_contents) for p in params)
            return f"({inner})"
    raise TypeError(f"not a parameter type: {param!r}")