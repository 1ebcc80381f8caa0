"""Whether a function reads or modifies blockchain state."""

from __future__ import annotations

from enum import Enum


class StateMutability(str, Enum):
    """State mutability of a contract function; ``NONPAYABLE`` is the default."""

    PURE = "pure"
    VIEW = "view"
    NONPAYABLE = "nonpayable"
    PAYABLE = "payable"