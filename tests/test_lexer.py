from hypothesis import given
from hypothesis import strategies as st

from monkey.monkey_lexer import Lexer, tokenize
from monkey.monkey_token import TokenType


def types_and_literals(source: str) -> list[tuple[TokenType, str]]:
    return [(tok.type, tok.literal) for tok in tokenize(source)]


def test_let_statement_tokens() -> None:
    assert [tok.type for tok in tokenize("let x = 5 + 5;")] == [
        TokenType.LET,
        TokenType.IDENT,
        TokenType.ASSIGN,
        TokenType.INT,
        TokenType.PLUS,
        TokenType.INT,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]


def test_eof_is_returned_forever() -> None:
    lexer = Lexer("let x = 5 + 5;")
    for _ in range(8):
        lexer.next_token()
    for _ in range(5):
        tok = lexer.next_token()
        assert tok.type == TokenType.EOF
        assert tok.literal == ""


def test_empty_input_returns_eof() -> None:
    assert Lexer("").next_token().type == TokenType.EOF
    assert Lexer(" \t\r\n ").next_token().type == TokenType.EOF


def test_single_char_tokens() -> None:
    source = "=+-!*/<>,;(){}"
    expected = [
        TokenType.ASSIGN,
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.BANG,
        TokenType.ASTERISK,
        TokenType.SLASH,
        TokenType.LT,
        TokenType.GT,
        TokenType.COMMA,
        TokenType.SEMICOLON,
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.EOF,
    ]
    assert [tok.type for tok in tokenize(source)] == expected
    assert "".join(tok.literal for tok in tokenize(source)) == source


def test_two_char_operators() -> None:
    assert types_and_literals("==") == [(TokenType.EQ, "=="), (TokenType.EOF, "")]
    assert types_and_literals("!=") == [(TokenType.NOT_EQ, "!="), (TokenType.EOF, "")]


def test_two_char_operators_need_adjacent_chars() -> None:
    assert [tok.type for tok in tokenize("= =")] == [
        TokenType.ASSIGN,
        TokenType.ASSIGN,
        TokenType.EOF,
    ]
    assert [tok.type for tok in tokenize("!!=")] == [
        TokenType.BANG,
        TokenType.NOT_EQ,
        TokenType.EOF,
    ]


def test_full_program() -> None:
    source = """let five = 5;
let ten = 10;

let add = fn(x, y) {
  x + y;
};

let result = add(five, ten);
!-/*5;
5 < 10 > 5;

if (5 < 10) {
    return true;
} else {
    return false;
}

10 == 10;
10 != 9;
"""
    expected = [
        (TokenType.LET, "let"),
        (TokenType.IDENT, "five"),
        (TokenType.ASSIGN, "="),
        (TokenType.INT, "5"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.LET, "let"),
        (TokenType.IDENT, "ten"),
        (TokenType.ASSIGN, "="),
        (TokenType.INT, "10"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.LET, "let"),
        (TokenType.IDENT, "add"),
        (TokenType.ASSIGN, "="),
        (TokenType.FUNCTION, "fn"),
        (TokenType.LPAREN, "("),
        (TokenType.IDENT, "x"),
        (TokenType.COMMA, ","),
        (TokenType.IDENT, "y"),
        (TokenType.RPAREN, ")"),
        (TokenType.LBRACE, "{"),
        (TokenType.IDENT, "x"),
        (TokenType.PLUS, "+"),
        (TokenType.IDENT, "y"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.RBRACE, "}"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.LET, "let"),
        (TokenType.IDENT, "result"),
        (TokenType.ASSIGN, "="),
        (TokenType.IDENT, "add"),
        (TokenType.LPAREN, "("),
        (TokenType.IDENT, "five"),
        (TokenType.COMMA, ","),
        (TokenType.IDENT, "ten"),
        (TokenType.RPAREN, ")"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.BANG, "!"),
        (TokenType.MINUS, "-"),
        (TokenType.SLASH, "/"),
        (TokenType.ASTERISK, "*"),
        (TokenType.INT, "5"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.INT, "5"),
        (TokenType.LT, "<"),
        (TokenType.INT, "10"),
        (TokenType.GT, ">"),
        (TokenType.INT, "5"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.IF, "if"),
        (TokenType.LPAREN, "("),
        (TokenType.INT, "5"),
        (TokenType.LT, "<"),
        (TokenType.INT, "10"),
        (TokenType.RPAREN, ")"),
        (TokenType.LBRACE, "{"),
        (TokenType.RETURN, "return"),
        (TokenType.TRUE, "true"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.RBRACE, "}"),
        (TokenType.ELSE, "else"),
        (TokenType.LBRACE, "{"),
        (TokenType.RETURN, "return"),
        (TokenType.FALSE, "false"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.RBRACE, "}"),
        (TokenType.INT, "10"),
        (TokenType.EQ, "=="),
        (TokenType.INT, "10"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.INT, "10"),
        (TokenType.NOT_EQ, "!="),
        (TokenType.INT, "9"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.EOF, ""),
    ]
    assert types_and_literals(source) == expected


def test_identifiers_allow_underscore() -> None:
    assert types_and_literals("_foo bar_baz") == [
        (TokenType.IDENT, "_foo"),
        (TokenType.IDENT, "bar_baz"),
        (TokenType.EOF, ""),
    ]


def test_digits_end_an_identifier() -> None:
    # only letters and underscore continue an identifier
    assert types_and_literals("x1") == [
        (TokenType.IDENT, "x"),
        (TokenType.INT, "1"),
        (TokenType.EOF, ""),
    ]


def test_numbers_have_no_decimal_point() -> None:
    assert types_and_literals("3.14") == [
        (TokenType.INT, "3"),
        (TokenType.ILLEGAL, "."),
        (TokenType.INT, "14"),
        (TokenType.EOF, ""),
    ]


def test_unrecognized_character_is_illegal() -> None:
    assert types_and_literals("@") == [(TokenType.ILLEGAL, "@"), (TokenType.EOF, "")]


def test_scanning_resumes_after_illegal() -> None:
    assert types_and_literals("a @ b") == [
        (TokenType.IDENT, "a"),
        (TokenType.ILLEGAL, "@"),
        (TokenType.IDENT, "b"),
        (TokenType.EOF, ""),
    ]


def test_non_ascii_letters_are_illegal() -> None:
    assert types_and_literals("é") == [(TokenType.ILLEGAL, "é"), (TokenType.EOF, "")]


def test_embedded_nul_is_illegal_not_eof() -> None:
    assert types_and_literals("a\0b") == [
        (TokenType.IDENT, "a"),
        (TokenType.ILLEGAL, "\0"),
        (TokenType.IDENT, "b"),
        (TokenType.EOF, ""),
    ]


def test_peek_char_does_not_advance() -> None:
    lexer = Lexer("ab")
    assert lexer.ch == "a"
    assert lexer.peek_char() == "b"
    assert lexer.peek_char() == "b"
    assert (lexer.position, lexer.read_position) == (0, 1)
    lexer.read_char()
    assert lexer.ch == "b"
    assert lexer.peek_char() == "\0"
    lexer.read_char()
    assert lexer.ch == "\0"


def test_line_and_column_tracking() -> None:
    tokens = tokenize("x = 1\n  y == 2")
    y = tokens[3]
    assert y.literal == "y"
    assert (y.line, y.col) == (2, 3)
    assert (tokens[4].line, tokens[4].col) == (2, 5)


@given(st.text(max_size=200))  # type: ignore[misc]
def test_lexer_never_raises_and_ends_in_eof(text: str) -> None:
    tokens = tokenize(text)
    assert tokens[-1].type == TokenType.EOF
    assert all(tok.type != TokenType.EOF for tok in tokens[:-1])
    assert len(tokens) <= len(text) + 1


@given(st.text(max_size=100))  # type: ignore[misc]
def test_literals_cover_non_whitespace_input(text: str) -> None:
    joined = "".join(tok.literal for tok in tokenize(text))
    assert joined == "".join(c for c in text if c not in " \t\n\r")
