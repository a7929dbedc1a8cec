"""Loader for Guu programs.

`load_program` turns source text into a validated `Program`. Statements
are processed in source order against two symbol tables, one for
procedures and one for variables. Any name may be used before the line
that defines it; once the whole source has been read the loader checks
that the entry procedure exists and that every referenced procedure and
variable was eventually defined.
"""

from __future__ import annotations

import re
from typing import IO, List, Optional

from .ast import Call, Instruction, Print, Procedure, Program, Set
from .errors import LoadError
from .parser import Statement, parse_statements
from .symbols import SymbolTable
from .types import INT64_MAX, INT64_MIN, Number, Text, Value, VariableRef


ENTRY_PROCEDURE = 'main'

# Leading portion of a literal that a C-style integer conversion accepts.
_INTEGER_PREFIX = re.compile(r'[ \t\n\v\f\r]*([+-]?[0-9]+)')


def strip_value(text: str) -> str:
    return text.strip(' \t\n')


def parse_number(literal: str) -> Optional[int]:
    """Interpret a literal as an integer, or return None.

    Only the exact text `0` yields zero. Anything else is converted from
    its leading decimal digits, clamped to 64 bits, and a zero result
    means the literal is not a number.
    """
    if literal == '0':
        return 0
    match = _INTEGER_PREFIX.match(literal)
    if match is None:
        return None
    number = max(INT64_MIN, min(INT64_MAX, int(match.group(1))))
    return number or None


class ProgramBuilder:
    """Collects procedures and instructions while statements are loaded."""

    def __init__(self, procedures: SymbolTable, variables: SymbolTable):
        self.procedures = procedures
        self.variables = variables
        self.instructions: List[List[Instruction]] = []
        self.current: Optional[int] = None

    def procedure_id(self, name: str, definition: bool = False) -> int:
        procedure_id = self.procedures.lookup(name, definition)
        while len(self.instructions) < len(self.procedures):
            self.instructions.append([])
        return procedure_id

    def emit(self, instruction: Instruction):
        self.instructions[self.current].append(instruction)

    def make_value(self, literal: str) -> Value:
        if len(literal) >= 2 and literal[0] == '"' and literal[-1] == '"':
            return Text(literal[1:-1])
        number = parse_number(literal)
        if number is not None:
            return Number(number)
        return VariableRef(self.variables.lookup(literal))

    def load(self, statement: Statement):
        keyword, line, args = statement.keyword, statement.line, statement.args
        if keyword == 'sub':
            if not args:
                raise LoadError("instruction `sub' requires an argument: procedure name", line)
            self.current = self.procedure_id(args[0], definition=True)
            return
        if keyword not in ('set', 'print', 'call'):
            raise LoadError(f"unknown instruction: `{keyword}'", line)
        if self.current is None:
            raise LoadError(f"instruction `{keyword}' doesn't belong to any procedure", line)
        if keyword == 'set':
            value = strip_value(args[1]) if len(args) > 1 else ''
            if not value:
                raise LoadError(
                    "instruction `set' requires two arguments: variable name and value", line)
            target = self.variables.define(args[0])
            self.emit(Set(target, self.make_value(value)))
        elif keyword == 'print':
            if not args:
                raise LoadError("instruction `print' requires an argument: variable name", line)
            self.emit(Print(self.variables.lookup(args[0])))
        else:
            if not args:
                raise LoadError("instruction `call' requires an argument: procedure name", line)
            self.emit(Call(self.procedure_id(args[0])))

    def validate(self):
        if not self.procedures.is_defined(ENTRY_PROCEDURE):
            raise LoadError(f"no entry procedure (procedure named `{ENTRY_PROCEDURE}') defined")
        for table in (self.procedures, self.variables):
            undefined = table.undefined_names()
            if undefined:
                names = ', '.join(f"`{name}'" for name in undefined)
                raise LoadError(f"{table.kind}s used but not defined: {names}")

    def build(self) -> Program:
        self.validate()
        procedure_names, procedure_ids = self.procedures.freeze()
        variable_names, variable_ids = self.variables.freeze()
        procedures = tuple(
            Procedure(i, name, tuple(self.instructions[i]))
            for i, name in enumerate(procedure_names)
        )
        return Program(
            procedures=procedures,
            variable_names=variable_names,
            procedure_ids=procedure_ids,
            variable_ids=variable_ids,
            entry=procedure_ids[ENTRY_PROCEDURE],
        )


def load_program(source: str) -> Program:
    """Parse and validate Guu source code, returning a runnable Program."""
    builder = ProgramBuilder(SymbolTable('procedure'), SymbolTable('variable'))
    for statement in parse_statements(source):
        builder.load(statement)
    return builder.build()


def load_stream(stream: IO[str]) -> Program:
    return load_program(stream.read())
