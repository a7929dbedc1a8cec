from pathlib import Path

import pytest

from guu.errors import GuuRuntimeError
from guu.interpreter import Interpreter
from guu.loader import load_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_unset_variable(capsys):
    with open(EXAMPLES / 'program_6.guu', 'r', encoding='utf-8') as f:
        source = f.read()
    program = load_program(source)
    interp = Interpreter()
    with pytest.raises(GuuRuntimeError) as excinfo:
        interp.run(program)
    assert excinfo.value.variable == 'never'
    # only the print before the failing call ran
    assert capsys.readouterr().out == 'first\n'
