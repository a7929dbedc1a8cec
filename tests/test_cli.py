import io
import sys

import pytest

from guu.__main__ import EXIT_LOAD_ERROR, EXIT_NO_INPUT, EXIT_RUNTIME_ERROR, main


def write_program(tmp_path, text, name='program.guu'):
    path = tmp_path / name
    path.write_text(text, encoding='utf-8')
    return str(path)


def test_runs_program_file(tmp_path, capsys):
    main([write_program(tmp_path, 'sub main\ncall greet\nsub greet\nset msg "hi"\nprint msg\n')])
    captured = capsys.readouterr()
    assert captured.out == 'hi\n'
    assert captured.err == ''


def test_reads_program_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('sub main\nset x 5\nprint x\n'))
    main(['-'])
    assert capsys.readouterr().out == '5\n'


def test_missing_file_is_no_input(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / 'absent.guu')])
    assert excinfo.value.code == EXIT_NO_INPUT
    assert 'not found' in capsys.readouterr().err


def test_load_error_exit_status(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([write_program(tmp_path, 'sub helper\nset x 1\n')])
    assert excinfo.value.code == EXIT_LOAD_ERROR
    assert "Load error: no entry procedure" in capsys.readouterr().err


def test_runtime_error_exit_status(tmp_path, capsys):
    source = 'sub main\nset a "shown"\nprint a\nprint b\nsub unused\nset b 1\n'
    with pytest.raises(SystemExit) as excinfo:
        main([write_program(tmp_path, source)])
    assert excinfo.value.code == EXIT_RUNTIME_ERROR
    captured = capsys.readouterr()
    assert captured.out == 'shown\n'
    assert 'Runtime error: undefined variable b' in captured.err


def test_debug_flag_reads_commands_from_stdin(tmp_path, monkeypatch, capsys):
    path = write_program(tmp_path, 'sub main\nset v 1\ncall p\nsub p\nprint v\n')
    monkeypatch.setattr(sys, 'stdin', io.StringIO('var\ni\n'))
    main(['--debug', path])
    captured = capsys.readouterr()
    assert captured.out == '1\n'
    assert captured.err == '> v = 1\n> '


def test_verbose_trace_on_stderr(tmp_path, capsys):
    main(['-vv', write_program(tmp_path, 'sub main\ncall p\nsub p\n')])
    assert capsys.readouterr().err.splitlines() == ['run', 'call p', 'return p', 'return main', 'end']
