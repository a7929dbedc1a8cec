"""Interactive step debugger.

`Debugger` is a step hook for `Interpreter`. Before each call it writes
a `> ` prompt and reads whitespace separated commands until one of them
lets execution continue:

    i       step into the call; prompt again at the next call
    o       step over the call; calls made inside it are not stopped at,
            and the next prompt comes at the next call made from the
            current depth or shallower
    trace   print the call stack, oldest frame first
    var     print every assigned variable and its resolved value

Anything else is ignored. End of input detaches the debugger and the
program runs to completion.
"""

from __future__ import annotations

import sys
from typing import IO, List, Optional

from .interpreter import StepAction, StepContext
from .types import describe


PROMPT = '> '


class Debugger:
    def __init__(self, input: Optional[IO[str]] = None, output: Optional[IO[str]] = None):
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stderr
        self._pending: List[str] = []

    def __call__(self, context: StepContext) -> StepAction:
        while True:
            self.output.write(PROMPT)
            self.output.flush()
            command = self.read_command()
            if command is None:
                return StepAction.CONTINUE
            if command == 'i':
                return StepAction.STEP_INTO
            if command == 'o':
                return StepAction.STEP_OVER
            if command == 'trace':
                self.print_trace(context)
            elif command == 'var':
                self.print_variables(context)

    def read_command(self) -> Optional[str]:
        while not self._pending:
            line = self.input.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.pop(0)

    def print_trace(self, context: StepContext):
        for index, frame in enumerate(context.stack):
            self.output.write(f"{index} {context.program.procedure_name(frame.procedure)}\n")

    def print_variables(self, context: StepContext):
        for name, value in context.environment.defined():
            self.output.write(f"{name} = {describe(value)}\n")
