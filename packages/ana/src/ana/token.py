"""Token model: TokenKind, Token and the keyword table."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Discriminator for the Token tagged union. Values are diagnostic labels."""

    EOF = "eof"
    IDENT = "ident"
    INT = "int"
    ILLEGAL = "illegal"

    ASSIGN = "assign"
    PLUS = "plus"
    MINUS = "minus"
    BANG = "bang"
    ASTERISK = "asterisk"
    SLASH = "slash"
    LT = "lt"
    GT = "gt"
    EQ = "eq"
    NOT_EQ = "noteq"

    COMMA = "comma"
    SEMICOLON = "semicolon"
    LPAREN = "lparen"
    RPAREN = "rparen"
    LBRACE = "lbrace"
    RBRACE = "rbrace"

    FUNCTION = "function"
    LET = "let"
    TRUE = "true"
    FALSE = "false"
    IF = "if"
    ELSE = "else"
    RETURN = "return"


PAYLOAD_KINDS = frozenset({TokenKind.IDENT, TokenKind.INT, TokenKind.ILLEGAL})

FIXED_LITERALS: dict[TokenKind, str] = {
    TokenKind.EOF: "",
    TokenKind.ASSIGN: "=",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.BANG: "!",
    TokenKind.ASTERISK: "*",
    TokenKind.SLASH: "/",
    TokenKind.LT: "<",
    TokenKind.GT: ">",
    TokenKind.EQ: "==",
    TokenKind.NOT_EQ: "!=",
    TokenKind.COMMA: ",",
    TokenKind.SEMICOLON: ";",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.FUNCTION: "fn",
    TokenKind.LET: "let",
    TokenKind.TRUE: "true",
    TokenKind.FALSE: "false",
    TokenKind.IF: "if",
    TokenKind.ELSE: "else",
    TokenKind.RETURN: "return",
}


@dataclass(slots=True, frozen=True)
class Token:
    """A single token. `payload` is set only for IDENT, INT and ILLEGAL."""

    kind: TokenKind
    payload: str | None = None

    @staticmethod
    def ident(text: str) -> Token:
        return Token(kind=TokenKind.IDENT, payload=text)

    @staticmethod
    def integer(text: str) -> Token:
        return Token(kind=TokenKind.INT, payload=text)

    @staticmethod
    def illegal(text: str) -> Token:
        return Token(kind=TokenKind.ILLEGAL, payload=text)

    @staticmethod
    def fixed(kind: TokenKind) -> Token:
        return Token(kind=kind)

    @property
    def literal(self) -> str:
        if self.kind in PAYLOAD_KINDS:
            return self.payload or ""
        return FIXED_LITERALS[self.kind]

    @property
    def label(self) -> str:
        return self.kind.value

    def describe(self) -> str:
        """Render as `{type: "ident", literal: "x"}`, with the literal quoted and escaped."""
        return f'{{type: "{self.label}", literal: {json.dumps(self.literal, ensure_ascii=False)}}}'

    def __str__(self) -> str:
        return self.literal


EOF = Token.fixed(TokenKind.EOF)
ASSIGN = Token.fixed(TokenKind.ASSIGN)
PLUS = Token.fixed(TokenKind.PLUS)
MINUS = Token.fixed(TokenKind.MINUS)
BANG = Token.fixed(TokenKind.BANG)
ASTERISK = Token.fixed(TokenKind.ASTERISK)
SLASH = Token.fixed(TokenKind.SLASH)
LT = Token.fixed(TokenKind.LT)
GT = Token.fixed(TokenKind.GT)
EQ = Token.fixed(TokenKind.EQ)
NOT_EQ = Token.fixed(TokenKind.NOT_EQ)
COMMA = Token.fixed(TokenKind.COMMA)
SEMICOLON = Token.fixed(TokenKind.SEMICOLON)
LPAREN = Token.fixed(TokenKind.LPAREN)
RPAREN = Token.fixed(TokenKind.RPAREN)
LBRACE = Token.fixed(TokenKind.LBRACE)
RBRACE = Token.fixed(TokenKind.RBRACE)
FUNCTION = Token.fixed(TokenKind.FUNCTION)
LET = Token.fixed(TokenKind.LET)
TRUE = Token.fixed(TokenKind.TRUE)
FALSE = Token.fixed(TokenKind.FALSE)
IF = Token.fixed(TokenKind.IF)
ELSE = Token.fixed(TokenKind.ELSE)
RETURN = Token.fixed(TokenKind.RETURN)

KEYWORDS: dict[str, Token] = {
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
}


def lookup_ident(text: str) -> Token:
    return KEYWORDS.get(text) or Token.ident(text)
