"""Function and event signatures derived from Keccak-256 hashes."""

from __future__ import annotations

from collections.abc import Iterable

from Crypto.Hash import keccak

from .param_type import ParamType, write


def _signature_hash(name: str, params: Iterable[ParamType]) -> bytes:
    types = ",".join(write(param) for param in params)
    digest = keccak.new(digest_bits=256)
    digest.update(f"{name}({types})".encode("utf-8"))
    return digest.digest()


def short_signature(name: str, params: Iterable[ParamType]) -> bytes:
    """Return the 4-byte selector of ``name(params)``."""
    return _signature_hash(name, params)[:4]


def long_signature(name: str, params: Iterable[ParamType]) -> bytes:
    """Return the full 32-byte hash of ``name(params)``."""
    return _signature_hash(name, params)