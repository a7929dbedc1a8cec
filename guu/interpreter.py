"""Interpreter for the Guu language.

Programs are executed by an explicit call stack of `Frame` records
rather than by Python recursion, so arbitrarily deep call chains cost
no native stack and the full stack is available to a debugger at any
call site.

Each step looks at the top frame. A frame whose cursor has reached the
end of its procedure is popped; execution ends when the stack is empty.
Otherwise the instruction under the cursor is dispatched and the cursor
advanced. For `Call` the caller's cursor is advanced before the callee's
frame is pushed, so execution resumes after the call on return.

An optional step hook is invoked just before every `Call` with a
`StepContext`, and steers subsequent hook invocations through the
`StepAction` it returns. `guu.debugger.Debugger` is the interactive
implementation.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import IO, Callable, List, Optional, Tuple

from .ast import Call, Print, Program, Set
from .environment import Environment
from .loader import load_program
from .types import VariableRef, to_string


@dataclass
class Frame:
    procedure: int
    cursor: int = 0


class StepAction(enum.Enum):
    STEP_INTO = 'step_into'  # invoke the hook again at the next call
    STEP_OVER = 'step_over'  # no hook calls until control is back at this depth
    CONTINUE = 'continue'  # no further hook calls for this run


@dataclass(frozen=True)
class StepContext:
    program: Program
    target: int  # procedure id about to be called
    stack: Tuple[Frame, ...]  # snapshot, oldest frame first
    environment: Environment

    @property
    def target_name(self) -> str:
        return self.program.procedure_name(self.target)


StepHook = Callable[[StepContext], StepAction]


class Interpreter:
    """Executes a loaded Guu Program."""
    def __init__(
        self,
        out: Optional[IO[str]] = None,
        err: Optional[IO[str]] = None,
        step_hook: Optional[StepHook] = None,
        debug_level: int = 0,
        debug_file: Optional[str] = None,
    ):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.step_hook = step_hook
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[IO[str]] = None
        self.stack: List[Frame] = []
        self.environment: Optional[Environment] = None
        self._hook_enabled = True
        self._hook_depth: Optional[int] = None

    def debug(self, msg: str, level: int = 1):
        if self.debug_level >= level:
            fp = self.debug_fp or self.err
            fp.write(msg + '\n')
            fp.flush()

    # Public API
    def run(self, program: Program) -> Environment:
        """Run the entry procedure to completion.

        Returns the environment holding the final variable values.
        Any GuuRuntimeError aborts the run and propagates to the caller.
        """
        if self.debug_level > 0 and self.debug_file:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        try:
            self.environment = Environment(program.variable_names)
            self.stack = [Frame(program.entry)]
            self._hook_enabled = self.step_hook is not None
            self._hook_depth = None
            self.debug('run')
            while self.step(program):
                pass
            self.debug('end')
            return self.environment
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def step(self, program: Program) -> bool:
        """Execute one step. Returns False once the call stack is empty."""
        frame = self.stack[-1]
        procedure = program.procedures[frame.procedure]
        if frame.cursor == len(procedure):
            self.stack.pop()
            self.debug(f'return {procedure.name}', 2)
            return bool(self.stack)
        instruction = procedure.instructions[frame.cursor]
        if isinstance(instruction, Set):
            self.execute_set(program, instruction)
            frame.cursor += 1
        elif isinstance(instruction, Print):
            self.execute_print(program, instruction)
            frame.cursor += 1
        elif isinstance(instruction, Call):
            self.before_call(program, instruction)
            frame.cursor += 1
            self.stack.append(Frame(instruction.target))
            self.debug(f'call {program.procedure_name(instruction.target)}', 2)
        else:
            raise NotImplementedError(f"step: unexpected instruction {instruction!r}")
        return True

    def execute_set(self, program: Program, instruction: Set):
        self.debug(f'set {program.variable_name(instruction.target)}', 3)
        value = instruction.value
        if isinstance(value, VariableRef):
            value = self.environment.resolve(value)
        self.environment.set(instruction.target, value)

    def execute_print(self, program: Program, instruction: Print):
        self.debug(f'print {program.variable_name(instruction.source)}', 3)
        value = self.environment.resolve(VariableRef(instruction.source))
        self.out.write(to_string(value) + '\n')

    def before_call(self, program: Program, instruction: Call):
        if not self._hook_enabled:
            return
        depth = len(self.stack)
        if self._hook_depth is not None:
            if depth > self._hook_depth:
                return
            self._hook_depth = None
        context = StepContext(
            program=program,
            target=instruction.target,
            stack=tuple(Frame(f.procedure, f.cursor) for f in self.stack),
            environment=self.environment,
        )
        action = self.step_hook(context)
        if action is StepAction.STEP_OVER:
            self._hook_depth = depth
        elif action is StepAction.CONTINUE:
            self._hook_enabled = False


def run_program(source: str, **kwargs) -> Environment:
    """Convenience function to load and run a Guu program from source."""
    program = load_program(source)
    interpreter = Interpreter(**kwargs)
    return interpreter.run(program)
