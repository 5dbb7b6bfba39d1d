import pytest

from ebisp.tokenizer import Token, next_token


def _all_tokens(source):
    tokens = []
    pos = 0
    while True:
        token = next_token(source, pos)
        if token.begin == token.end:
            return tokens
        tokens.append(source[token.begin:token.end])
        pos = token.end


def test_skips_leading_whitespace():
    source = "   foo bar"
    token = next_token(source)
    assert source[token.begin:token.end] == "foo"


def test_empty_source_gives_empty_token():
    assert next_token("") == Token(0, 0)


def test_only_whitespace_gives_empty_token_at_end():
    source = " \t\n "
    token = next_token(source)
    assert token.begin == token.end == len(source)


@pytest.mark.parametrize("char", ["(", ")", ".", "'", "`", ","])
def test_single_character_tokens(char):
    source = char + "abc"
    token = next_token(source)
    assert token == Token(0, 1)


def test_string_token_includes_quotes():
    source = '"hello world" x'
    token = next_token(source)
    assert source[token.begin:token.end] == '"hello world"'


def test_unclosed_string_runs_to_end():
    source = '"abc'
    token = next_token(source)
    assert token == Token(0, len(source))


def test_comment_is_skipped():
    source = "; a comment\n  foo"
    token = next_token(source)
    assert source[token.begin:token.end] == "foo"


def test_several_comment_lines_are_skipped():
    source = "; one\n; two\n\nbar ; trailing"
    token = next_token(source)
    assert source[token.begin:token.end] == "bar"


def test_comment_at_end_gives_empty_token():
    source = "; nothing else"
    token = next_token(source)
    assert token.begin == token.end == len(source)


@pytest.mark.parametrize("source, expected", [("abc(def", "abc"), ("a.b", "a"), ("x,y", "x"), ("foo\"bar", "foo")])
def test_symbol_stops_at_forbidden_chars(source, expected):
    token = next_token(source)
    assert source[token.begin:token.end] == expected


def test_start_position_is_respected():
    source = "a b"
    token = next_token(source, 1)
    assert source[token.begin:token.end] == "b"


def test_whole_expression_tokenizes():
    assert _all_tokens("(+ 1 2)") == ["(", "+", "1", "2", ")"]


def test_quoted_list_tokenizes():
    assert _all_tokens("'(a . b)") == ["'", "(", "a", ".", "b", ")"]