"""
Defines the abstract syntax tree (AST) for the Monkey programming language.

The tree is a closed set of immutable node classes in two families plus a root:

Statements:
    LetStatement, ReturnStatement, ExpressionStatement, BlockStatement

Expressions:
    Identifier, IntegerLiteral, Boolean, PrefixExpression, InfixExpression,
    IfExpression, FunctionLiteral, CallExpression

Root:
    Program

`Statement` and `Expression` are `Union` aliases over those variants, so a
type checker flags any rendering or evaluation code that misses one.

Each node tracks:
    token (Token): The token the node was built from.
    token_literal(): The literal text of that token.
    __str__(): A canonical, fully parenthesized rendering used for debugging
        and for checking operator precedence.
    to_dict(): A kind-tagged plain dictionary, suitable for JSON output.

Nodes are frozen dataclasses and every sequence is a tuple in source order,
so a tree cannot change once the parser has built it.

Example:
    The program parsed from `a + b * c` renders as `(a + (b * c))`, and
    `let myVar = anotherVar;` renders back to exactly that text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from monkey.monkey_token import Token


@dataclass(frozen=True)
class Identifier:
    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "Identifier", "value": self.value}


@dataclass(frozen=True)
class IntegerLiteral:
    token: Token
    value: int

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.token.literal

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "IntegerLiteral", "value": self.value}


@dataclass(frozen=True)
class Boolean:
    token: Token
    value: bool

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.token.literal

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "Boolean", "value": self.value}


@dataclass(frozen=True)
class PrefixExpression:
    """A unary operator applied to the expression on its right (`!x`, `-5`)."""

    token: Token
    operator: str
    right: Expression

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "PrefixExpression",
            "operator": self.operator,
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class InfixExpression:
    """A binary operator; `token` is the operator token."""

    token: Token
    left: Expression
    operator: str
    right: Expression

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "InfixExpression",
            "operator": self.operator,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class IfExpression:
    token: Token
    condition: Expression
    consequence: BlockStatement
    alternative: BlockStatement | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        out = f"if{self.condition} {self.consequence}"
        if self.alternative is not None:
            out += f"else {self.alternative}"
        return out

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "IfExpression",
            "condition": self.condition.to_dict(),
            "consequence": self.consequence.to_dict(),
            "alternative": (
                self.alternative.to_dict() if self.alternative is not None else None
            ),
        }


@dataclass(frozen=True)
class FunctionLiteral:
    token: Token
    parameters: tuple[Identifier, ...]
    body: BlockStatement

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.token_literal()}({params}) {self.body}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "FunctionLiteral",
            "parameters": [p.to_dict() for p in self.parameters],
            "body": self.body.to_dict(),
        }


@dataclass(frozen=True)
class CallExpression:
    """Application of `function` (an identifier or function literal) to arguments.

    `token` is the `(` that opened the argument list.
    """

    token: Token
    function: Expression
    arguments: tuple[Expression, ...]

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "CallExpression",
            "function": self.function.to_dict(),
            "arguments": [a.to_dict() for a in self.arguments],
        }


@dataclass(frozen=True)
class LetStatement:
    token: Token
    name: Identifier
    value: Expression

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {self.value};"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "LetStatement",
            "name": self.name.to_dict(),
            "value": self.value.to_dict(),
        }


@dataclass(frozen=True)
class ReturnStatement:
    token: Token
    return_value: Expression

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.return_value};"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "ReturnStatement", "return_value": self.return_value.to_dict()}


@dataclass(frozen=True)
class ExpressionStatement:
    """A statement made of a single expression (`x + 10;`).

    `token` is the first token of the expression.
    """

    token: Token
    expression: Expression

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return str(self.expression)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "ExpressionStatement",
            "expression": self.expression.to_dict(),
        }


@dataclass(frozen=True)
class BlockStatement:
    token: Token
    statements: tuple[Statement, ...]

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "BlockStatement",
            "statements": [s.to_dict() for s in self.statements],
        }


Expression = Union[
    Identifier,
    IntegerLiteral,
    Boolean,
    PrefixExpression,
    InfixExpression,
    IfExpression,
    FunctionLiteral,
    CallExpression,
]

Statement = Union[LetStatement, ReturnStatement, ExpressionStatement, BlockStatement]

Node = Union["Program", Statement, Expression]


@dataclass(frozen=True)
class Program:
    """Root of every parse: the top-level statements in source order."""

    statements: tuple[Statement, ...] = ()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "Program",
            "statements": [s.to_dict() for s in self.statements],
        }


__all__ = [
    "Boolean",
    "BlockStatement",
    "CallExpression",
    "Expression",
    "ExpressionStatement",
    "FunctionLiteral",
    "Identifier",
    "IfExpression",
    "InfixExpression",
    "IntegerLiteral",
    "LetStatement",
    "Node",
    "PrefixExpression",
    "Program",
    "ReturnStatement",
    "Statement",
]
