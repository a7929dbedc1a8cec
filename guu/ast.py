"""Program representation for the Guu language.

The loader turns source lines into the instruction dataclasses below.
Each instruction refers to procedures and variables by numeric
identifier only; names are kept on the `Program` for diagnostics and
for the debugger.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple, Union

from .types import Value


@dataclass(frozen=True)
class Set:
    target: int  # variable id
    value: Value


@dataclass(frozen=True)
class Call:
    target: int  # procedure id


@dataclass(frozen=True)
class Print:
    source: int  # variable id


Instruction = Union[Set, Call, Print]


@dataclass(frozen=True)
class Procedure:
    id: int
    name: str
    instructions: Tuple[Instruction, ...]

    def __len__(self) -> int:
        return len(self.instructions)


@dataclass(frozen=True)
class Program:
    """A fully loaded and validated program.

    `procedures` and `variable_names` are indexed by identifier.
    `entry` is the identifier of the entry procedure.
    """
    procedures: Tuple[Procedure, ...]
    variable_names: Tuple[str, ...]
    procedure_ids: Mapping[str, int]
    variable_ids: Mapping[str, int]
    entry: int

    @property
    def procedure_names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.procedures)

    def procedure_name(self, procedure_id: int) -> str:
        return self.procedures[procedure_id].name

    def variable_name(self, variable_id: int) -> str:
        return self.variable_names[variable_id]
