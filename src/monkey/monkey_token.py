"""
Token definitions for the Monkey programming language.

This module holds the closed set of token types produced by the scanner, the
immutable `Token` record, and the read-only keyword table used to classify
identifiers.

Classes:
    TokenType: Enumeration of every token kind the scanner can emit.
    Token: An immutable (type, literal) pair with the position it started at.

Functions:
    lookup_ident(ident: str) -> TokenType:
        Classifies identifier text as a keyword or a plain identifier.

Example:
    >>> lookup_ident("fn")
    <TokenType.FUNCTION: 'FUNCTION'>
    >>> Token(TokenType.INT, "5")
    Token(INT, 5)

Exports:
    - TokenType
    - Token
    - keywords
    - lookup_ident
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class TokenType(str, Enum):
    """Every token kind the Monkey scanner can produce.

    Operators and delimiters use their source text as the value so that
    diagnostics read naturally (`expected next token to be =`).
    """

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers + literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        type (TokenType): The token kind.
        literal (str): The exact source text of the token (empty for EOF).
        line (int): The 1-based line the token starts on.
        col (int): The 1-based column the token starts on.
    """

    type: TokenType
    literal: str
    line: int = 0
    col: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal})"


keywords: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "fn": TokenType.FUNCTION,
        "let": TokenType.LET,
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
        "if": TokenType.IF,
        "else": TokenType.ELSE,
        "return": TokenType.RETURN,
    }
)


def lookup_ident(ident: str) -> TokenType:
    """Returns the keyword type for `ident`, or `TokenType.IDENT`."""
    return keywords.get(ident, TokenType.IDENT)


__all__ = ["Token", "TokenType", "keywords", "lookup_ident"]
