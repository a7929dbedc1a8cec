"""CLI entry point for the Guu interpreter.

Usage:
    python -m guu [-v|-vv|-vvv] [-d] [--debug-file FILE] [program_file]

Options:
  -v            Increase trace verbosity (can be repeated)
  -d, --debug   Stop before every call and read debugger commands from stdin
  --debug-file  Write trace output to FILE instead of stderr

The program is read from `program_file`, or from stdin when it is
omitted or `-`. Exit status is 0 on success, 1 when there is no input,
3 when the program fails to load and 4 when it fails at run time.
"""

import argparse
import sys
from pathlib import Path

from .debugger import Debugger
from .errors import GuuRuntimeError, LoadError
from .interpreter import Interpreter
from .loader import load_program


EXIT_NO_INPUT = 1
EXIT_LOAD_ERROR = 3
EXIT_RUNTIME_ERROR = 4


def read_source(name):
    if name is None or name == '-':
        if sys.stdin.isatty():
            print("Error: no input: give a program file or pipe one on stdin", file=sys.stderr)
            sys.exit(EXIT_NO_INPUT)
        return sys.stdin.read()
    program_file = Path(name)
    if not program_file.is_file():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(EXIT_NO_INPUT)
    try:
        with open(program_file, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        print(f"Error: cannot read {program_file}: {e.strerror}", file=sys.stderr)
        sys.exit(EXIT_NO_INPUT)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='guu', description="Guu language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase trace verbosity (can be repeated)')
    parser.add_argument('-d', '--debug', action='store_true', help='run under the interactive step debugger')
    parser.add_argument('--debug-file', metavar='FILE', help='write trace output to FILE')
    parser.add_argument('program', nargs='?', help='Guu program file (.guu) to execute')
    args = parser.parse_args(argv)

    source = read_source(args.program)
    try:
        program = load_program(source)
    except LoadError as e:
        print(f"Load error: {e}", file=sys.stderr)
        sys.exit(EXIT_LOAD_ERROR)

    hook = Debugger(sys.stdin, sys.stderr) if args.debug else None
    interpreter = Interpreter(step_hook=hook, debug_level=args.v, debug_file=args.debug_file)
    try:
        interpreter.run(program)
    except GuuRuntimeError as e:
        sys.stdout.flush()
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(EXIT_RUNTIME_ERROR)


if __name__ == '__main__':
    main()
