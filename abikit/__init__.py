"""Ethereum contract ABI types, tokens, signatures, JSON specs and topic filters."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "param_type",
    "util",
    "signature",
    "state_mutability",
    "token",
    "params",
    "filter",
    "log",
    "function",
]