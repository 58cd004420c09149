"""
Monkey Language Parser

Parses the token stream of a `Lexer` into a `Program` syntax tree.

This module implements a precedence-climbing (Pratt) parser. Every token type
that can begin an expression has a prefix parse function, and every token type
that can continue one (binary operators and the `(` of a call) has an infix
parse function and a binding precedence. `parse_expression` looks up the
prefix function for the current token, then keeps handing the expression built
so far to infix functions for as long as the next operator binds tighter than
its caller.

Supported Constructs
--------------------
- Statements:
    * `let <ident> = <expr>;`
    * `return <expr>;`
    * expression statements, with an optional trailing `;`
- Expressions:
    * identifiers, integer literals, `true`/`false`
    * prefix `!` and `-`
    * infix `+ - * / < > == !=`
    * grouping with `( )`
    * `if (<cond>) { ... } else { ... }`
    * function literals `fn(<params>) { ... }`
    * calls `<callee>(<args>)`

Parser Behavior
---------------
- Never raises on malformed input. Each problem is recorded as a message in
  `errors()` and the construct it occurred in yields no node.
- After a failed statement the parser moves on one token at a time without
  resynchronizing, so one malformed statement can produce follow-up errors.
- Expressions nested more than `MAX_NESTING_DEPTH` levels deep record
  `expression nested too deeply` and end the parse; the statements parsed
  before that point are kept.

Entry Points
------------
- `Parser(lexer).parse_program()`: Parse a full program; read `errors()` afterwards.
- `parse(source)`: Convenience returning `(program, errors)`.
- `parse_or_raise(source)`: Strict convenience raising `ParseError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import IntEnum

from monkey.monkey_ast import (
    BlockStatement,
    Boolean,
    CallExpression,
    Expression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.monkey_lexer import Lexer
from monkey.monkey_token import Token, TokenType

logger = logging.getLogger(__name__)

INT64_MAX = 2**63 - 1
INT64_MAX_DIGITS = len(str(INT64_MAX))

# counted in parse_expression calls; one level costs at most six stack frames
MAX_NESTING_DEPTH = 100


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2  # ==
    LESSGREATER = 3  # > or <
    SUM = 4  # +
    PRODUCT = 5  # *
    PREFIX = 6  # -X or !X
    CALL = 7  # myFunction(X)


precedences: dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
}

PrefixParseFn = Callable[[], "Expression | None"]
InfixParseFn = Callable[["Expression | None"], "Expression | None"]


class NestingTooDeep(Exception):
    """Unwinds a statement whose expressions nest past `MAX_NESTING_DEPTH`."""


class ParseError(Exception):
    """Raised by `parse_or_raise` when parsing produced any errors.

    Attributes:
        errors (list[str]): The parser's messages, in the order they were recorded.
    """

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class Parser:
    """
    Monkey Parser Class

    Pulls tokens from a `Lexer` through a two-token window and assembles the
    syntax tree.

    Attributes
    ----------
    lexer : Lexer
        The token source.
    cur_token : Token
        The token under examination.
    peek_token : Token
        The token after `cur_token`, used to decide what to do next.
    prefix_parse_fns : dict[TokenType, PrefixParseFn]
        Parse functions for tokens that start an expression.
    infix_parse_fns : dict[TokenType, InfixParseFn]
        Parse functions for tokens that continue an expression.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self._errors: list[str] = []
        self._depth = 0

        self.cur_token = Token(TokenType.EOF, "")
        self.peek_token = Token(TokenType.EOF, "")

        self.prefix_parse_fns: dict[TokenType, PrefixParseFn] = {}
        self.register_prefix(TokenType.IDENT, self.parse_identifier)
        self.register_prefix(TokenType.INT, self.parse_integer_literal)
        self.register_prefix(TokenType.TRUE, self.parse_boolean)
        self.register_prefix(TokenType.FALSE, self.parse_boolean)
        self.register_prefix(TokenType.BANG, self.parse_prefix_expression)
        self.register_prefix(TokenType.MINUS, self.parse_prefix_expression)
        self.register_prefix(TokenType.LPAREN, self.parse_grouped_expression)
        self.register_prefix(TokenType.IF, self.parse_if_expression)
        self.register_prefix(TokenType.FUNCTION, self.parse_function_literal)

        self.infix_parse_fns: dict[TokenType, InfixParseFn] = {}
        for tok_type in (
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.SLASH,
            TokenType.ASTERISK,
            TokenType.EQ,
            TokenType.NOT_EQ,
            TokenType.LT,
            TokenType.GT,
        ):
            self.register_infix(tok_type, self.parse_infix_expression)
        self.register_infix(TokenType.LPAREN, self.parse_call_expression)

        # Read two tokens, so cur_token and peek_token are both set
        self.next_token()
        self.next_token()

    def register_prefix(self, tok_type: TokenType, fn: PrefixParseFn) -> None:
        self.prefix_parse_fns[tok_type] = fn

    def register_infix(self, tok_type: TokenType, fn: InfixParseFn) -> None:
        self.infix_parse_fns[tok_type] = fn

    def errors(self) -> list[str]:
        """Returns a copy of the messages recorded so far."""
        return list(self._errors)

    def record_error(self, msg: str) -> None:
        logger.debug("parse error at %r: %s", self.cur_token, msg)
        self._errors.append(msg)

    def next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, tok_type: TokenType) -> bool:
        return self.cur_token.type == tok_type

    def peek_token_is(self, tok_type: TokenType) -> bool:
        return self.peek_token.type == tok_type

    def expect_peek(self, tok_type: TokenType) -> bool:
        """Advances if the next token has type `tok_type`, else records an error."""
        if self.peek_token_is(tok_type):
            self.next_token()
            return True
        self.peek_error(tok_type)
        return False

    def peek_error(self, tok_type: TokenType) -> None:
        self.record_error(
            f"expected next token to be {tok_type}, got {self.peek_token.type} instead"
        )

    def no_prefix_parse_fn_error(self, tok_type: TokenType) -> None:
        self.record_error(f"no prefix parse function for {tok_type} found")

    def peek_precedence(self) -> Precedence:
        return precedences.get(self.peek_token.type, Precedence.LOWEST)

    def cur_precedence(self) -> Precedence:
        return precedences.get(self.cur_token.type, Precedence.LOWEST)

    def parse_program(self) -> Program:
        """Parse statements until EOF and return the program."""
        statements: list[Statement] = []
        while not self.cur_token_is(TokenType.EOF):
            try:
                stmt = self.parse_statement()
            except NestingTooDeep:
                self.record_error("expression nested too deeply")
                break
            if stmt is not None:
                statements.append(stmt)
            self.next_token()
        return Program(tuple(statements))

    def parse_statement(self) -> Statement | None:
        if self.cur_token.type == TokenType.LET:
            return self.parse_let_statement()
        if self.cur_token.type == TokenType.RETURN:
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> LetStatement | None:
        tok = self.cur_token

        if not self.expect_peek(TokenType.IDENT):
            return None
        name = Identifier(self.cur_token, self.cur_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        if value is None:
            return None
        return LetStatement(tok, name, value)

    def parse_return_statement(self) -> ReturnStatement | None:
        tok = self.cur_token

        self.next_token()
        return_value = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        if return_value is None:
            return None
        return ReturnStatement(tok, return_value)

    def parse_expression_statement(self) -> ExpressionStatement | None:
        tok = self.cur_token
        expression = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        if expression is None:
            return None
        return ExpressionStatement(tok, expression)

    def parse_expression(self, precedence: Precedence) -> Expression | None:
        """Parse an expression whose operators all bind tighter than `precedence`."""
        self._depth += 1
        try:
            if self._depth > MAX_NESTING_DEPTH:
                raise NestingTooDeep()
            return self._parse_expression(precedence)
        finally:
            self._depth -= 1

    def _parse_expression(self, precedence: Precedence) -> Expression | None:
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token.type)
            return None
        left_exp = prefix()

        while (
            not self.peek_token_is(TokenType.SEMICOLON)
            and not self.peek_token_is(TokenType.EOF)
            and precedence < self.peek_precedence()
        ):
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left_exp

            self.next_token()
            left_exp = infix(left_exp)

        return left_exp

    def parse_identifier(self) -> Expression | None:
        return Identifier(self.cur_token, self.cur_token.literal)

    def parse_integer_literal(self) -> Expression | None:
        tok = self.cur_token
        # length is checked before int(), which rejects strings over 4300 digits
        digits = tok.literal.lstrip("0") or "0"
        if len(digits) > INT64_MAX_DIGITS or int(digits) > INT64_MAX:
            self.record_error(f'could not parse "{tok.literal}" as integer')
            return None
        return IntegerLiteral(tok, int(digits))

    def parse_boolean(self) -> Expression | None:
        return Boolean(self.cur_token, self.cur_token_is(TokenType.TRUE))

    def parse_prefix_expression(self) -> Expression | None:
        tok = self.cur_token
        self.next_token()
        right = self.parse_expression(Precedence.PREFIX)
        if right is None:
            return None
        return PrefixExpression(tok, tok.literal, right)

    def parse_infix_expression(self, left: Expression | None) -> Expression | None:
        tok = self.cur_token
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        if left is None or right is None:
            return None
        return InfixExpression(tok, left, tok.literal, right)

    def parse_grouped_expression(self) -> Expression | None:
        self.next_token()
        exp = self.parse_expression(Precedence.LOWEST)
        if not self.expect_peek(TokenType.RPAREN):
            return None
        return exp

    def parse_if_expression(self) -> Expression | None:
        tok = self.cur_token

        if not self.expect_peek(TokenType.LPAREN):
            return None

        self.next_token()
        condition = self.parse_expression(Precedence.LOWEST)

        if not self.expect_peek(TokenType.RPAREN):
            return None
        if not self.expect_peek(TokenType.LBRACE):
            return None

        consequence = self.parse_block_statement()

        alternative = None
        if self.peek_token_is(TokenType.ELSE):
            self.next_token()
            if not self.expect_peek(TokenType.LBRACE):
                return None
            alternative = self.parse_block_statement()
            if alternative is None:
                return None

        if condition is None or consequence is None:
            return None
        return IfExpression(tok, condition, consequence, alternative)

    def parse_block_statement(self) -> BlockStatement | None:
        """Parse statements up to the closing `}`; `cur_token` is the opening `{`."""
        tok = self.cur_token
        statements: list[Statement] = []

        self.next_token()

        while not self.cur_token_is(TokenType.RBRACE):
            if self.cur_token_is(TokenType.EOF):
                self.record_error(
                    f"expected next token to be {TokenType.RBRACE}, "
                    f"got {TokenType.EOF} instead"
                )
                return None
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()

        return BlockStatement(tok, tuple(statements))

    def parse_function_literal(self) -> Expression | None:
        tok = self.cur_token

        if not self.expect_peek(TokenType.LPAREN):
            return None

        parameters = self.parse_function_parameters()
        if parameters is None:
            return None

        if not self.expect_peek(TokenType.LBRACE):
            return None

        body = self.parse_block_statement()
        if body is None:
            return None
        return FunctionLiteral(tok, parameters, body)

    def parse_function_parameters(self) -> tuple[Identifier, ...] | None:
        identifiers: list[Identifier] = []

        if self.peek_token_is(TokenType.RPAREN):
            self.next_token()
            return ()

        if not self.expect_peek(TokenType.IDENT):
            return None
        identifiers.append(Identifier(self.cur_token, self.cur_token.literal))

        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            if not self.expect_peek(TokenType.IDENT):
                return None
            identifiers.append(Identifier(self.cur_token, self.cur_token.literal))

        if not self.expect_peek(TokenType.RPAREN):
            return None

        return tuple(identifiers)

    def parse_call_expression(self, function: Expression | None) -> Expression | None:
        tok = self.cur_token
        arguments = self.parse_call_arguments()
        if function is None or arguments is None:
            return None
        return CallExpression(tok, function, arguments)

    def parse_call_arguments(self) -> tuple[Expression, ...] | None:
        args: list[Expression | None] = []

        if self.peek_token_is(TokenType.RPAREN):
            self.next_token()
            return ()

        self.next_token()
        args.append(self.parse_expression(Precedence.LOWEST))

        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            self.next_token()
            args.append(self.parse_expression(Precedence.LOWEST))

        if not self.expect_peek(TokenType.RPAREN):
            return None

        if any(arg is None for arg in args):
            return None
        return tuple(arg for arg in args if arg is not None)


def parse(source: str) -> tuple[Program, list[str]]:
    """Scan and parse `source`, returning the program and the parser's errors."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors()


def parse_or_raise(source: str) -> Program:
    """Like `parse`, but raises `ParseError` if any errors were recorded."""
    program, errors = parse(source)
    if errors:
        raise ParseError(errors)
    return program


__all__ = ["ParseError", "Parser", "Precedence", "parse", "parse_or_raise"]
