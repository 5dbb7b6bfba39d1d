import io

import pytest

from ebisp.expr import to_sexpr
from ebisp.interpreter import evaluate
from ebisp.parser import read_expr
from ebisp.repl import eval_line, main
from ebisp.repl_runtime import load_repl_runtime
from ebisp.scope import Scope
from ebisp.std import load_std_library


@pytest.fixture
def scope():
    env = Scope()
    load_std_library(env)
    load_repl_runtime(env)
    return env


def run(scope, line):
    out, err = io.StringIO(), io.StringIO()
    eval_line(scope, line, out, err)
    return out.getvalue(), err.getvalue()


def test_prints_each_expression_result(scope):
    out, err = run(scope, "(+ 1 2) (list 1)\n")
    expected = to_sexpr(evaluate(scope, read_expr("(+ 1 2)")[0]))
    assert out.splitlines() == [expected, "(1)"]
    assert err == ""


def test_state_persists_between_lines(scope):
    run(scope, "(set x 4)\n")
    out, _ = run(scope, "x\n")
    assert out == "4\n"


def test_eval_error_is_reported_and_stops(scope):
    out, err = run(scope, "(undefined-fn) 5\n")
    assert out == ""
    assert err == "Error:\t(void-variable . undefined-fn)\n"


def test_parse_error_shows_caret(scope):
    out, err = run(scope, '"abc')
    assert out == ""
    assert "^" in err
    assert err.endswith("Unclosed string\n")


def test_blank_line_reports_eof(scope):
    out, err = run(scope, "\n")
    assert out == ""
    assert err.endswith("EOF\n")


def test_main_returns_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(list 7 8)\n"))
    assert main() == -1
    captured = capsys.readouterr().out
    assert captured.startswith("> ")
    assert "(7 8)\n" in captured


def test_main_quit_exits(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("(quit)\n"))
    with pytest.raises(SystemExit) as info:
        main()
    assert info.value.code == 0