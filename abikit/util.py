"""Small helpers shared by the encoding and description modules."""

from __future__ import annotations

_U32_MAX = 0xFFFFFFFF


def pad_u32(value: int) -> bytes:
    """Return ``value`` as a right aligned, big-endian 32-byte word."""
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"value does not fit in 32 bits: {value}")
    return bytes(28) + value.to_bytes(4, "big")


def sanitize_name(name: str) -> str:
    """Drop everything from the first ``(`` on, as some ABI files carry full signatures."""
    head, _, _ = name.partition("(")
    return head