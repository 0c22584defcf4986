import pytest
from sexpression.cursor import Cursor
from sexpression.errors import InvalidEscape, Position, UnterminatedString
from sexpression.token import TokenKind
from sexpression.tokenizer import Tokenizer, tokenize
from sexpression.types import WHITESPACE


def kinds(src, **kw):
    return [t.kind for t in tokenize(src, **kw)]


def texts(src, **kw):
    return [t.text(src) for t in tokenize(src, **kw)]


def test_cursor_tracks_lines_and_columns():
    cur = Cursor("ab\nc")
    assert cur.position() == Position(0, 1, 1)
    assert cur.advance() == "a"
    assert cur.peek() == "b"
    assert cur.peek_next() == "\n"
    cur.advance()
    assert cur.advance() == "\n"
    assert cur.position() == Position(3, 2, 1)
    assert cur.advance() == "c"
    assert cur.at_end
    assert cur.peek() is None
    assert cur.advance() is None
    assert cur.position() == Position(4, 2, 2)


def test_whitespace_set_matches_isspace():
    assert all(ch.isspace() for ch in WHITESPACE)
    assert all(chr(i) in WHITESPACE for i in range(0x3001) if chr(i).isspace())


def test_simple_list():
    assert texts("(hello world)") == ["(", "hello", "world", ")", ""]
    assert kinds("(hello world)") == [
        TokenKind.LEFT_PAREN, TokenKind.SYMBOL, TokenKind.SYMBOL,
        TokenKind.RIGHT_PAREN, TokenKind.END_OF_INPUT,
    ]


def test_words():
    assert texts("this is a test") == ["this", "is", "a", "test", ""]


def test_end_of_input_emitted_once():
    toks = list(Tokenizer("  "))
    assert len(toks) == 1
    assert toks[0].kind is TokenKind.END_OF_INPUT


def test_parens_and_quotes_are_boundaries():
    assert texts('a(b)"c"d') == ["a", "(", "b", ")", '"c"', "d", ""]


def test_numbers_tagged():
    assert kinds("42 -7 +3.5 1e10") == [TokenKind.NUMBER] * 4 + [TokenKind.END_OF_INPUT]


def test_malformed_numbers_still_tagged_number():
    # Conversion happens later and reports InvalidNumber.
    assert kinds("1. 12abc") == [TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.END_OF_INPUT]


def test_signs_without_digit_are_symbols():
    assert kinds("- + -x +.5") == [TokenKind.SYMBOL] * 4 + [TokenKind.END_OF_INPUT]


def test_operator_symbols():
    src = "(+ - * / < > = !)"
    toks = list(tokenize(src))
    assert [t.text(src) for t in toks[1:-2]] == list("+-*/<>=!")
    assert all(t.kind is TokenKind.SYMBOL for t in toks[1:-2])


def test_operator_followed_by_symbol_char():
    assert texts("<= != ->") == ["<=", "!=", "->", ""]


def test_comment_runs_to_end_of_line():
    assert texts("a ; b c\nd") == ["a", "d", ""]


def test_comment_marker_ends_symbol():
    assert texts("a;b") == ["a", ""]
    assert texts("(x y; c\n)") == ["(", "x", "y", ")", ""]


def test_comment_marker_ends_number():
    src = "42;c"
    toks = list(tokenize(src))
    assert [t.text(src) for t in toks] == ["42", ""]
    assert toks[0].kind is TokenKind.NUMBER
    assert list(tokenize(src, fast_paths=False)) == toks


def test_comment_marker_ends_operator():
    assert texts("(+; sum\n 1)") == ["(", "+", "1", ")", ""]


def test_peek_start_does_not_scan_lexeme():
    toks = Tokenizer('a ; note\n  "unterminated')
    next(toks)
    assert toks.peek_start() == Position(11, 2, 3)
    assert Tokenizer("  ; only\n").peek_start() is None


def test_positions():
    src = "(a\n  bc)"
    toks = list(tokenize(src))
    assert [(t.line, t.column) for t in toks] == [(1, 1), (1, 2), (2, 3), (2, 5), (2, 6)]
    assert (toks[2].start, toks[2].end) == (5, 7)


def test_string_token_span_and_escape_flag():
    src = r'"plain" "esc\"aped"'
    a, b, end = tokenize(src)
    assert a.text(src) == '"plain"'
    assert not a.escaped
    assert b.text(src) == r'"esc\"aped"'
    assert b.escaped
    assert end.kind is TokenKind.END_OF_INPUT


def test_multiline_string_advances_line():
    src = '"a\nb" c'
    toks = list(tokenize(src))
    assert toks[1].line == 2
    assert toks[1].column == 4


def test_unterminated_string():
    with pytest.raises(UnterminatedString) as exc:
        list(tokenize('(a "abc'))
    assert exc.value.position == Position(3, 1, 4)


def test_backslash_at_end_is_unterminated():
    with pytest.raises(UnterminatedString):
        list(tokenize('"abc\\'))


def test_invalid_escape():
    with pytest.raises(InvalidEscape) as exc:
        list(tokenize(r'"a\qb"'))
    assert exc.value.offset == 2
    assert exc.value.context == "\\q"


def test_tokens_before_error_are_produced():
    toks = Tokenizer('x "oops')
    assert next(toks).kind is TokenKind.SYMBOL
    with pytest.raises(UnterminatedString):
        next(toks)


@pytest.mark.parametrize("src", [
    "(+ 1 2)", "-5", "+x", "(- -1 +2.5e-3)", "a+b", "1+", "=> ! !!", "-;x", "+(",
])
def test_fast_and_general_paths_agree(src):
    assert list(tokenize(src, fast_paths=True)) == list(tokenize(src, fast_paths=False))
