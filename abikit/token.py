"""ABI values, type checking against parameter types and parsing from text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidData
from .param_type import (
    AddressType,
    ArrayType,
    BoolType,
    BytesType,
    FixedArrayType,
    FixedBytesType,
    IntType,
    ParamType,
    StringType,
    TupleType,
    UintType,
)


class TokenKind(Enum):
    """The kind of value a token holds."""

    ADDRESS = "address"
    FIXED_BYTES = "fixed_bytes"
    BYTES = "bytes"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    STRING = "string"
    FIXED_ARRAY = "fixed_array"
    ARRAY = "array"
    TUPLE = "tuple"


_BYTE_KINDS = frozenset({TokenKind.ADDRESS, TokenKind.FIXED_BYTES, TokenKind.BYTES})
_SEQUENCE_KINDS = frozenset({TokenKind.FIXED_ARRAY, TokenKind.ARRAY, TokenKind.TUPLE})


@dataclass(frozen=True)
class Token:
    """An ABI value.

    Addresses and byte strings hold ``bytes``; integers hold an unsigned
    256-bit ``int`` (signed values in two's complement); arrays and tuples
    hold a tuple of tokens.
    """

    kind: TokenKind
    value: Any

    def __post_init__(self) -> None:
        if self.kind in _BYTE_KINDS:
            object.__setattr__(self, "value", bytes(self.value))
        elif self.kind in _SEQUENCE_KINDS:
            object.__setattr__(self, "value", tuple(self.value))

    def type_check(self, param_type: ParamType) -> bool:
        """Whether this token can be encoded as ``param_type``."""
        match self.kind:
            case TokenKind.ADDRESS:
                return isinstance(param_type, AddressType)
            case TokenKind.BYTES:
                return isinstance(param_type, BytesType)
            case TokenKind.INT:
                return isinstance(param_type, IntType)
            case TokenKind.UINT:
                return isinstance(param_type, UintType)
            case TokenKind.BOOL:
                return isinstance(param_type, BoolType)
            case TokenKind.STRING:
                return isinstance(param_type, StringType)
            case TokenKind.FIXED_BYTES:
                return isinstance(param_type, FixedBytesType) and param_type.size >= len(self.value)
            case TokenKind.ARRAY:
                return isinstance(param_type, ArrayType) and all(
                    token.type_check(param_type.inner) for token in self.value
                )
            case TokenKind.FIXED_ARRAY:
                return (
                    isinstance(param_type, FixedArrayType)
                    and param_type.size == len(self.value)
                    and all(token.type_check(param_type.inner) for token in self.value)
                )
            case TokenKind.TUPLE:
                if not isinstance(param_type, TupleType):
                    return False
                if len(self.value) > len(param_type.params):
                    return False
                return all(
                    token.type_check(param) for token, param in zip(self.value, param_type.params)
                )
        return False

    def is_dynamic(self) -> bool:
        """Whether this token is encoded with an offset prefix."""
        if self.kind in (TokenKind.BYTES, TokenKind.STRING, TokenKind.ARRAY):
            return True
        if self.kind in (TokenKind.FIXED_ARRAY, TokenKind.TUPLE):
            return any(token.is_dynamic() for token in self.value)
        return False

    def __str__(self) -> str:
        match self.kind:
            case TokenKind.BOOL:
                return "true" if self.value else "false"
            case TokenKind.STRING:
                return self.value
            case TokenKind.ADDRESS | TokenKind.BYTES | TokenKind.FIXED_BYTES:
                return self.value.hex()
            case TokenKind.INT | TokenKind.UINT:
                return format(self.value, "x")
            case TokenKind.ARRAY | TokenKind.FIXED_ARRAY:
                return "[" + ",".join(str(token) for token in self.value) + "]"
            case TokenKind.TUPLE:
                return "(" + ",".join(str(token) for token in self.value) + ")"
        return repr(self)


def types_check(tokens: Sequence[Token], param_types: Sequence[ParamType]) -> bool:
    """Whether every token matches the parameter type at the same position."""
    return len(tokens) == len(param_types) and all(
        token.type_check(param) for token, param in zip(tokens, param_types)
    )


class Tokenizer(ABC):
    """Parses text into tokens; subclasses decide how scalar values are read."""

    def tokenize(self, param: ParamType, value: str) -> Token:
        """Parse ``value`` as a token of type ``param``."""
        match param:
            case AddressType():
                return Token(TokenKind.ADDRESS, self.tokenize_address(value))
            case StringType():
                return Token(TokenKind.STRING, self.tokenize_string(value))
            case BoolType():
                return Token(TokenKind.BOOL, self.tokenize_bool(value))
            case BytesType():
                return Token(TokenKind.BYTES, self.tokenize_bytes(value))
            case FixedBytesType(size):
                return Token(TokenKind.FIXED_BYTES, self.tokenize_fixed_bytes(value, size))
            case UintType():
                return Token(TokenKind.UINT, int.from_bytes(self.tokenize_uint(value), "big"))
            case IntType():
                return Token(TokenKind.INT, int.from_bytes(self.tokenize_int(value), "big"))
            case ArrayType(inner):
                return Token(TokenKind.ARRAY, self.tokenize_array(value, inner))
            case FixedArrayType(inner, size):
                return Token(TokenKind.FIXED_ARRAY, self.tokenize_fixed_array(value, inner, size))
            case TupleType(params):
                return Token(TokenKind.TUPLE, self.tokenize_struct(value, params))
        raise TypeError(f"not a parameter type: {param!r}")

    def tokenize_fixed_array(self, value: str, param: ParamType, length: int) -> list[Token]:
        """Parse ``[a,b,...]`` holding exactly ``length`` items of type ``param``."""
        result = self.tokenize_array(value, param)
        if len(result) != length:
            raise InvalidData(f"expected {length} items, got {len(result)}")
        return result

    def tokenize_struct(self, value: str, params: Sequence[ParamType]) -> list[Token]:
        """Parse ``(a,b,...)`` whose items have the given types in order."""
        if not value.startswith("(") or not value.endswith(")"):
            raise InvalidData("a struct must be enclosed in parentheses")
        if len(value) == 2:
            return []

        remaining = iter(params)

        def next_param() -> ParamType:
            param = next(remaining, None)
            if param is None:
                raise InvalidData("more struct items than parameter types")
            return param

        return self._split(value, "(", ")", next_param)

    def tokenize_array(self, value: str, param: ParamType) -> list[Token]:
        """Parse ``[a,b,...]`` whose items all have type ``param``."""
        if not value.startswith("[") or not value.endswith("]"):
            raise InvalidData("an array must be enclosed in brackets")
        if len(value) == 2:
            return []
        return self._split(value, "[", "]", lambda: param)

    def _split(self, value: str, opener: str, closer: str, next_param) -> list[Token]:
        result: list[Token] = []
        nested = 0
        ignore = False
        last_item = 1
        for pos, char in enumerate(value):
            if char == opener and not ignore:
                nested += 1
            elif char == closer and not ignore:
                nested -= 1
                if nested < 0:
                    raise InvalidData("unbalanced brackets")
                if nested == 0:
                    result.append(self.tokenize(next_param(), value[last_item:pos]))
                    last_item = pos + 1
            elif char == '"':
                ignore = not ignore
            elif char == "," and nested == 1 and not ignore:
                result.append(self.tokenize(next_param(), value[last_item:pos]))
                last_item = pos + 1
        if ignore:
            raise InvalidData("unterminated quote")
        return result

    @abstractmethod
    def tokenize_address(self, value: str) -> bytes:
        """Parse a 20-byte address."""

    @abstractmethod
    def tokenize_string(self, value: str) -> str:
        """Parse a string."""

    @abstractmethod
    def tokenize_bool(self, value: str) -> bool:
        """Parse a boolean."""

    @abstractmethod
    def tokenize_bytes(self, value: str) -> bytes:
        """Parse bytes of any length."""

    @abstractmethod
    def tokenize_fixed_bytes(self, value: str, length: int) -> bytes:
        """Parse bytes of the given length."""

    @abstractmethod
    def tokenize_uint(self, value: str) -> bytes:
        """Parse an unsigned integer into a 32-byte big-endian word."""

    @abstractmethod
    def tokenize_int(self, value: str) -> bytes:
        """Parse a signed integer into a 32-byte two's complement word."""