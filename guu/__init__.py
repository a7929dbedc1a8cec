# Guu language package
# This package provides a loader, interpreter and step debugger for Guu.
from .errors import GuuError, LoadError, GuuRuntimeError
from .loader import load_program, load_stream, ENTRY_PROCEDURE
from .interpreter import Interpreter, StepAction, StepContext, run_program
from .debugger import Debugger

__all__ = [
    'load_program',
    'load_stream',
    'run_program',
    'Interpreter',
    'Debugger',
    'StepAction',
    'StepContext',
    'ENTRY_PROCEDURE',
    'GuuError',
    'LoadError',
    'GuuRuntimeError',
]
