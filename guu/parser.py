"""Parser for the Guu language.

Guu source is line oriented: every non-blank line is one statement whose
first whitespace-separated word selects the statement form::

    sub   <name>
    set   <name> <value>
    print <name>
    call  <name>

Source text is split on newlines and each line is parsed on its own by
a Lark LALR parser with a contextual lexer, so statements are produced
in source order and a malformed line never masks an error on an earlier
one. Whitespace is the C `isspace` set (space, tab, vertical tab, form
feed, carriage return); every other character, including other Unicode
spaces, may be part of a name. Keywords are only recognised in statement
position, so `call sub` calls a procedure named `sub`. The value of a
`set` line is lexed as a single REST token running to the end of the
line.

Parsing is purely syntactic: missing arguments and unknown keywords are
kept in the resulting `Statement` records and rejected by the loader,
which knows the line they came from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from .errors import LoadError


GUU_GRAMMAR = r"""
    start: _statement?

    _statement: sub_stmt
              | set_stmt
              | print_stmt
              | call_stmt
              | unknown_stmt

    sub_stmt: SUB (NAME REST?)?
    set_stmt: SET (NAME REST?)?
    print_stmt: PRINT (NAME REST?)?
    call_stmt: CALL (NAME REST?)?
    unknown_stmt: NAME REST?

    SUB: "sub"
    SET: "set"
    PRINT: "print"
    CALL: "call"

    NAME: /[^ \t\n\v\f\r]+/
    REST: /[^ \t\n\v\f\r][^\n]*/

    WS: /[ \t\v\f\r]+/
    %ignore WS
"""


GUU_PARSER = Lark(
    GUU_GRAMMAR,
    parser='lalr',
    lexer='contextual',
    maybe_placeholders=False,
)


@dataclass(frozen=True)
class Statement:
    """One source line: its keyword, 1-based line number and arguments.

    For `set` the second argument is the raw remainder of the line.
    For `unknown` the keyword field holds the unrecognised word.
    """
    keyword: str
    line: int
    args: Tuple[str, ...] = ()


class StatementTransformer(Transformer):
    """Turns the parse tree of one line into a `Statement`, or None if blank."""

    def __init__(self, line: int):
        super().__init__()
        self.line = line

    def start(self, items):
        return items[0] if items else None

    def _make(self, keyword: str, items) -> Statement:
        return Statement(keyword, self.line, tuple(str(token) for token in items[1:]))

    def sub_stmt(self, items):
        return self._make('sub', items)

    def set_stmt(self, items):
        return self._make('set', items)

    def print_stmt(self, items):
        return self._make('print', items)

    def call_stmt(self, items):
        return self._make('call', items)

    def unknown_stmt(self, items):
        head: Token = items[0]
        return self._make(str(head), items)


def parse_line(text: str, line: int) -> Optional[Statement]:
    """Parse a single source line, without its terminator.

    Lexer and parser failures raised by Lark are reported as `LoadError`
    on that line.
    """
    try:
        tree = GUU_PARSER.parse(text)
    except UnexpectedInput as e:
        raise LoadError(f"malformed statement at column {e.column}", line) from e
    return StatementTransformer(line).transform(tree)


def parse_statements(source: str) -> Iterator[Statement]:
    """Parse Guu source text lazily, one statement per non-blank line.

    Lines end at `\\n`; a `\\r` immediately before it is part of the
    terminator.
    """
    for number, text in enumerate(source.split('\n'), 1):
        if text.endswith('\r'):
            text = text[:-1]
        statement = parse_line(text, number)
        if statement is not None:
            yield statement
