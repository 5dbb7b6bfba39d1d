import pytest

from ebisp.builtins import equal, length_of_list, make_list
from ebisp.expr import NIL, Cons, Number, String, Symbol, to_sexpr
from ebisp.parser import (
    MAX_FILE_SIZE,
    ParseError,
    format_parse_error,
    read_all_exprs,
    read_all_exprs_from_file,
    read_expr,
    read_expr_from_file,
)


def test_number():
    expr, end = read_expr("42")
    assert expr == Number(42)
    assert end == 2


def test_negative_number():
    expr, _ = read_expr("-17")
    assert expr == Number(-17)


def test_lone_minus_is_symbol():
    expr, _ = read_expr("-")
    assert expr == Symbol("-")


def test_digits_followed_by_letters_is_symbol():
    expr, _ = read_expr("5a")
    assert expr == Symbol("5a")


def test_symbol():
    expr, end = read_expr("  hello ")
    assert expr == Symbol("hello")
    assert end == 7


def test_string():
    expr, _ = read_expr('"hello world"')
    assert expr == String("hello world")


def test_empty_string():
    expr, _ = read_expr('""')
    assert expr == String("")


def test_unclosed_string():
    with pytest.raises(ParseError) as info:
        read_expr('"abc')
    assert info.value.message == "Unclosed string"
    assert info.value.position == 0


def test_empty_list_is_nil():
    expr, end = read_expr("()")
    assert expr == NIL
    assert end == 2


def test_list_round_trip():
    source = "(a (b 1) \"c\" (d . e))"
    expr, end = read_expr(source)
    assert to_sexpr(expr) == source
    assert end == len(source)


def test_dotted_pair():
    expr, _ = read_expr("(a . b)")
    assert isinstance(expr, Cons)
    assert expr.car == Symbol("a")
    assert expr.cdr == Symbol("b")


def test_list_structure():
    expr, _ = read_expr("(1 2 3)")
    assert equal(expr, make_list(Number(1), Number(2), Number(3)))
    assert length_of_list(expr) == 3


def test_dotted_pair_with_extra_element():
    with pytest.raises(ParseError) as info:
        read_expr("(a . b c)")
    assert info.value.message == "Expected )"
    assert info.value.position == 7


def test_unterminated_list():
    source = "(a b"
    with pytest.raises(ParseError) as info:
        read_expr(source)
    assert info.value.message == "Expected )"
    assert info.value.position == len(source)


def test_empty_input_is_eof():
    with pytest.raises(ParseError) as info:
        read_expr("   ")
    assert info.value.message == "EOF"


@pytest.mark.parametrize(
    "prefix, name",
    [("'", "quote"), ("`", "quasiquote"), (",", "unquote")],
)
def test_prefix_forms(prefix, name):
    expr, _ = read_expr(prefix + "(x y)")
    assert equal(expr, make_list(Symbol(name), make_list(Symbol("x"), Symbol("y"))))


def test_prefix_at_end_is_eof():
    with pytest.raises(ParseError) as info:
        read_expr("'")
    assert info.value.message == "EOF"


def test_comments_are_skipped():
    expr, _ = read_expr("; a comment\n(a ; inner\n b)")
    assert equal(expr, make_list(Symbol("a"), Symbol("b")))


def test_read_expr_from_position():
    source = "(a) b "
    first, end = read_expr(source)
    assert equal(first, make_list(Symbol("a")))
    second, _ = read_expr(source, end)
    assert second == Symbol("b")


def test_read_all_exprs():
    source = "(a) (b 2)\n"
    expr, _ = read_all_exprs(source)
    assert to_sexpr(expr) == "((a) (b 2))"


def test_read_all_exprs_empty():
    expr, _ = read_all_exprs("  \n ")
    assert expr == NIL


def test_read_all_exprs_propagates_error():
    with pytest.raises(ParseError) as info:
        read_all_exprs("(a) (b\n")
    assert info.value.message == "Expected )"


def test_read_expr_from_file(tmp_path):
    path = tmp_path / "code.lisp"
    path.write_text("(+ 1 2)\n(ignored)\n")
    expr = read_expr_from_file(path)
    assert equal(expr, make_list(Symbol("+"), Number(1), Number(2)))


def test_read_all_exprs_from_file(tmp_path):
    path = tmp_path / "code.lisp"
    path.write_text("(set x 1)\n(set y 2)\n")
    expr = read_all_exprs_from_file(str(path))
    assert to_sexpr(expr) == "((set x 1) (set y 2))"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.lisp"
    path.write_text("")
    with pytest.raises(ParseError) as info:
        read_expr_from_file(path)
    assert info.value.message == "File is empty"
    assert info.value.position is None


def test_too_big_file(tmp_path):
    path = tmp_path / "big.lisp"
    path.write_bytes(b" " * MAX_FILE_SIZE)
    with pytest.raises(ParseError) as info:
        read_all_exprs_from_file(path)
    assert info.value.message == "File is too big"


def test_missing_file(tmp_path):
    with pytest.raises(ParseError) as info:
        read_expr_from_file(tmp_path / "missing.lisp")
    assert info.value.position is None


def test_format_parse_error_with_position():
    source = "(a b"
    with pytest.raises(ParseError) as info:
        read_expr(source)
    text = format_parse_error(source, info.value)
    assert text == source + "\n" + " " * len(source) + "^\nExpected )\n"


def test_format_parse_error_without_position():
    error = ParseError("File is empty")
    assert format_parse_error("ignored", error) == "File is empty\n"