from pathlib import Path

from guu.interpreter import Interpreter
from guu.loader import load_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_value_chain(capsys):
    with open(EXAMPLES / 'program_3.guu', 'r', encoding='utf-8') as f:
        source = f.read()
    program = load_program(source)
    interp = Interpreter()
    interp.run(program)
    out = capsys.readouterr().out
    assert out == 'ok\n'
