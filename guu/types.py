"""Value definitions for Guu.

A variable slot holds exactly one of four values: `Empty` (the slot has
never been assigned), a `Number`, a `Text` literal, or a `VariableRef`
naming another variable by identifier. References are never terminal;
the interpreter resolves them through `Environment.resolve` before a
value is copied or printed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class Empty:
    """Marker for an unset variable slot. Never produced by a literal."""

    def __repr__(self) -> str:
        return 'Empty'


EMPTY = Empty()


@dataclass(frozen=True)
class Number:
    """A signed 64-bit integer value."""
    value: int

    def __post_init__(self):
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"number {self.value} does not fit in 64 bits")


@dataclass(frozen=True)
class Text:
    """A string literal with its surrounding quotes removed."""
    value: str


@dataclass(frozen=True)
class VariableRef:
    """A reference to another variable, by identifier."""
    id: int


Value = Union[Empty, Number, Text, VariableRef]


def is_terminal(value: Value) -> bool:
    return isinstance(value, (Number, Text))


def to_string(value: Value) -> str:
    """Render a terminal value the way `print` emits it."""
    if isinstance(value, Number):
        return str(value.value)
    if isinstance(value, Text):
        return value.value
    raise TypeError(f"cannot render non-terminal value {value!r}")


def describe(value: Value) -> str:
    """Render a terminal value for the debugger, quoting text."""
    if isinstance(value, Text):
        return f'"{value.value}"'
    return to_string(value)
