"""Named function parameters and tuple components as found in JSON ABI files."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import InvalidData
from .param_type import ArrayType, FixedArrayType, ParamType, TupleType, read, write_for_abi


def inner_tuple(kind: ParamType) -> tuple[ParamType, ...] | None:
    """Return the members of the tuple inside ``kind``, looking through arrays."""
    while True:
        match kind:
            case ArrayType(inner):
                kind = inner
            case FixedArrayType(inner, _):
                kind = inner
            case TupleType(params):
                return params
            case _:
                return None


def _with_tuple_components(kind: ParamType, components: Sequence[ParamType]) -> ParamType:
    match kind:
        case ArrayType(inner):
            return ArrayType(_with_tuple_components(inner, components))
        case FixedArrayType(inner, size):
            return FixedArrayType(_with_tuple_components(inner, components), size)
        case TupleType(params):
            return TupleType((*params, *components))
    return kind


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise InvalidData(f"{what} must be an object")
    return data


def _read_kind(data: Mapping[str, Any]) -> ParamType:
    """Read ``type`` and fold any ``components`` into the tuple it names."""
    if "type" not in data:
        raise InvalidData("missing field 'type'")
    type_name = data["type"]
    if not isinstance(type_name, str):
        raise InvalidData("field 'type' must be a string")
    kind = read(type_name)

    raw_components = data.get("components")
    if raw_components is not None and not isinstance(raw_components, list):
        raise InvalidData("field 'components' must be a list")

    if inner_tuple(kind) is None:
        return kind
    if raw_components is None:
        raise InvalidData("missing field 'components'")
    components = [TupleParam.from_dict(item).kind for item in raw_components]
    return _with_tuple_components(kind, components)


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise InvalidData(f"field {key!r} must be a string")
    return value


def _kind_to_dict(kind: ParamType) -> dict[str, Any]:
    result: dict[str, Any] = {"type": write_for_abi(kind, False)}
    members = inner_tuple(kind)
    if members is not None:
        result["components"] = [_kind_to_dict(member) for member in members]
    return result


@dataclass(frozen=True)
class Param:
    """A named function parameter."""

    name: str
    kind: ParamType
    internal_type: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Param:
        """Build a parameter from its JSON ABI object."""
        data = _require_mapping(data, "a parameter")
        if "name" not in data:
            raise InvalidData("missing field 'name'")
        name = data["name"]
        if not isinstance(name, str):
            raise InvalidData("field 'name' must be a string")
        internal_type = _optional_str(data, "internalType")
        return cls(name=name, kind=_read_kind(data), internal_type=internal_type)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON ABI object describing this parameter."""
        result: dict[str, Any] = {}
        if self.internal_type is not None:
            result["internalType"] = self.internal_type
        result["name"] = self.name
        result.update(_kind_to_dict(self.kind))
        return result


@dataclass(frozen=True)
class TupleParam:
    """A tuple component, whose name is optional."""

    name: str | None
    kind: ParamType
    internal_type: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TupleParam:
        """Build a tuple component from its JSON ABI object."""
        data = _require_mapping(data, "a tuple parameter")
        name = _optional_str(data, "name")
        internal_type = _optional_str(data, "internalType")
        return cls(name=name, kind=_read_kind(data), internal_type=internal_type)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON ABI object describing this component."""
        result: dict[str, Any] = {}
        if self.internal_type is not None:
            result["internalType"] = self.internal_type
        if self.name is not None:
            result["name"] = self.name
        result.update(_kind_to_dict(self.kind))
        return result