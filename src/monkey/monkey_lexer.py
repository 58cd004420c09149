"""
Lexical analyzer for the Monkey programming language.

This module converts raw source text into a stream of `Token` objects:

Classes:
    Lexer: Single-pass scanner over an in-memory string.

Functions:
    tokenize(source: str) -> list[Token]:
        Scans a whole string, returning every token up to and including EOF.

Features:
    - Skips whitespace (space, tab, newline, carriage return)
    - One character of lookahead to recognize `==` and `!=`
    - Recognizes:
        * Identifiers and keywords (ASCII letters and `_`)
        * Integer literals (digits only)
        * Operators and delimiters
    - Unknown characters become ILLEGAL tokens; scanning never stops on bad input

Example:
    >>> lexer = Lexer("let x = 5;")
    >>> lexer.next_token()
    Token(LET, let)

Exports:
    - Lexer
    - tokenize
"""

from monkey.monkey_token import Token, TokenType, lookup_ident

NUL = "\0"

single_char_tokens: dict[str, TokenType] = {
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# first char -> (one-char type, two-char type)
two_char_tokens: dict[str, tuple[TokenType, TokenType]] = {
    "=": (TokenType.ASSIGN, TokenType.EQ),
    "!": (TokenType.BANG, TokenType.NOT_EQ),
}


def is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Scanner for the Monkey language.

    Attributes:
        source (str): The text being scanned. Never modified.
        position (int): Index of the last character read (the one in `ch`).
        read_position (int): Index of the next character to read.
        ch (str): The character at `position`, or NUL past the end.
        line (int): 1-based line of `ch`.
        column (int): 1-based column of `ch`.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0
        self.read_position = 0
        self.ch = NUL
        self.line = 1
        self.column = 0
        self.read_char()

    def read_char(self) -> None:
        """Consumes one character, moving `position` to `read_position`."""
        if self.ch == "\n":
            self.line += 1
            self.column = 0
        if self.read_position >= len(self.source):
            self.ch = NUL
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def peek_char(self) -> str:
        """Returns the character at `read_position` without consuming it."""
        if self.read_position >= len(self.source):
            return NUL
        return self.source[self.read_position]

    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def skip_whitespace(self) -> None:
        while self.ch in (" ", "\t", "\n", "\r") and not self.at_end():
            self.read_char()

    def read_identifier(self) -> str:
        start = self.position
        while is_letter(self.ch):
            self.read_char()
        return self.source[start : self.position]

    def read_number(self) -> str:
        start = self.position
        while is_digit(self.ch):
            self.read_char()
        return self.source[start : self.position]

    def next_token(self) -> Token:
        """Returns the next token, or EOF forever once the input is exhausted."""
        self.skip_whitespace()

        line, col = self.line, self.column

        if self.at_end():
            return Token(TokenType.EOF, "", line, col)

        ch = self.ch

        if ch in two_char_tokens:
            single, double = two_char_tokens[ch]
            if self.peek_char() == "=":
                self.read_char()
                self.read_char()
                return Token(double, ch + "=", line, col)
            self.read_char()
            return Token(single, ch, line, col)

        if ch in single_char_tokens:
            self.read_char()
            return Token(single_char_tokens[ch], ch, line, col)

        if is_letter(ch):
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal, line, col)

        if is_digit(ch):
            return Token(TokenType.INT, self.read_number(), line, col)

        self.read_char()
        return Token(TokenType.ILLEGAL, ch, line, col)


def tokenize(source: str) -> list[Token]:
    """Scans `source` and returns all tokens, ending with the EOF token."""
    lexer = Lexer(source)
    tokens = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.type == TokenType.EOF:
            break
    return tokens


__all__ = ["Lexer", "tokenize"]
