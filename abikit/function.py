"""Contract function descriptions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import InvalidData
from .param_type import ParamType, write
from .params import Param
from .signature import short_signature
from .state_mutability import StateMutability
from .util import sanitize_name


def _read_params(data: Mapping[str, Any], key: str) -> tuple[Param, ...]:
    if key not in data:
        raise InvalidData(f"missing field {key!r}")
    items = data[key]
    if not isinstance(items, list):
        raise InvalidData(f"field {key!r} must be a list")
    return tuple(Param.from_dict(item) for item in items)


@dataclass(frozen=True)
class Function:
    """A contract function: its name, inputs, outputs and mutability."""

    name: str
    inputs: tuple[Param, ...] = ()
    outputs: tuple[Param, ...] = ()
    constant: bool = False
    state_mutability: StateMutability = StateMutability.NONPAYABLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))
        object.__setattr__(self, "state_mutability", StateMutability(self.state_mutability))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Function:
        """Build a function from its JSON ABI object."""
        if not isinstance(data, Mapping):
            raise InvalidData("a function must be an object")
        if "name" not in data:
            raise InvalidData("missing field 'name'")
        name = data["name"]
        if not isinstance(name, str):
            raise InvalidData("field 'name' must be a string")
        constant = data.get("constant", False)
        if not isinstance(constant, bool):
            raise InvalidData("field 'constant' must be a boolean")
        raw_mutability = data.get("stateMutability", StateMutability.NONPAYABLE.value)
        try:
            mutability = StateMutability(raw_mutability)
        except ValueError:
            raise InvalidData(f"unknown state mutability: {raw_mutability!r}") from None
        return cls(
            name=sanitize_name(name),
            inputs=_read_params(data, "inputs"),
            outputs=_read_params(data, "outputs"),
            constant=constant,
            state_mutability=mutability,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON ABI object describing this function."""
        return {
            "name": self.name,
            "inputs": [param.to_dict() for param in self.inputs],
            "outputs": [param.to_dict() for param in self.outputs],
            "constant": self.constant,
            "stateMutability": self.state_mutability.value,
        }

    def input_types(self) -> list[ParamType]:
        """Types of the inputs, in order."""
        return [param.kind for param in self.inputs]

    def output_types(self) -> list[ParamType]:
        """Types of the outputs, in order."""
        return [param.kind for param in self.outputs]

    def selector(self) -> bytes:
        """The 4-byte selector that prefixes an encoded call."""
        return short_signature(self.name, self.input_types())

    def signature(self) -> str:
        """A signature identifying the function, e.g. ``name(bool):(uint256,string)``."""
        inputs = ",".join(write(kind) for kind in self.input_types())
        outputs = ",".join(write(kind) for kind in self.output_types())
        if not outputs:
            return f"{self.name}({inputs})"
        return f"{self.name}({inputs}):({outputs})"