"""
Error taxonomy for the sorting core.

Empty input is never an error: every algorithm treats it as a no-op.

Hierarchy:
    SortError
    ├── NegativeValueError   (also a ValueError)   radix / digit pass only
    ├── RangeTooLargeError   (also a MemoryError)  table would exceed max_range
    ├── ConfigError          (also a ValueError)   bad algorithm config
    └── UnknownAlgorithmError (also a KeyError)    registry lookup
"""

from __future__ import annotations

__all__ = [
    "SortError",
    "NegativeValueError",
    "RangeTooLargeError",
    "ConfigError",
    "UnknownAlgorithmError",
]


class SortError(Exception):
    """Base class for all errors raised by linsort."""


class NegativeValueError(SortError, ValueError):
    """A negative key reached an algorithm that only handles non-negative keys."""

    def __init__(self, algo: str, index: int, value: int) -> None:
        self.algo = algo
        self.index = index
        self.value = value
        super().__init__(
            f"{algo} requires non-negative keys; got {value} at index {index}"
        )


class RangeTooLargeError(SortError, MemoryError):
    """The value range would need a table larger than the configured limit."""

    def __init__(self, algo: str, span: int, limit: int) -> None:
        self.algo = algo
        self.span = span
        self.limit = limit
        super().__init__(
            f"{algo}: value range {span} exceeds max_range={limit}"
        )


class ConfigError(SortError, ValueError):
    """Invalid algorithm configuration."""


class UnknownAlgorithmError(SortError, KeyError):
    """No algorithm registered under the requested name."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""
