"""Scanner turning Ana source text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from ana.token import (
    ASSIGN,
    ASTERISK,
    BANG,
    COMMA,
    EOF,
    EQ,
    GT,
    LBRACE,
    LPAREN,
    LT,
    MINUS,
    NOT_EQ,
    PLUS,
    RBRACE,
    RPAREN,
    SEMICOLON,
    SLASH,
    Token,
    lookup_ident,
)

SINGLE_CHAR_TOKENS = {
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
    "+": PLUS,
    "-": MINUS,
    "*": ASTERISK,
    "/": SLASH,
    "<": LT,
    ">": GT,
    ",": COMMA,
    ";": SEMICOLON,
}

# `=` and `!` become two-character tokens when followed by `=`.
TWO_CHAR_TOKENS = {
    "=": (ASSIGN, EQ),
    "!": (BANG, NOT_EQ),
}

DIGITS = "0123456789"


class Lexer:
    """Produces one token per `next_token()` call over a fixed source string.

    `char` is the character under examination and always sits at
    `position - 1`; it is None once the source is exhausted.
    """

    def __init__(self, source: str):
        self._source = source
        self.position = 0
        self.char: str | None = None
        self._read_char()

    @property
    def source(self) -> str:
        return self._source

    def next_token(self) -> Token:
        self._skip_whitespace()

        char = self.char
        if char is None:
            return EOF

        if char.isalpha():
            return lookup_ident(self._read_identifier())

        if char in DIGITS:
            return Token.integer(self._read_number())

        token = SINGLE_CHAR_TOKENS.get(char)
        if token is not None:
            self._read_char()
            return token

        pair = TWO_CHAR_TOKENS.get(char)
        if pair is not None:
            single, double = pair
            if self.peek_char() == "=":
                self._read_char()
                self._read_char()
                return double
            self._read_char()
            return single

        self._read_char()
        return Token.illegal(char)

    def peek_char(self) -> str | None:
        if self.position >= len(self._source):
            return None
        return self._source[self.position]

    def tokens(self) -> list[Token]:
        """Drain the lexer, including the terminating EOF."""
        result = list(self)
        result.append(EOF)
        return result

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token == EOF:
                return
            yield token

    def _read_char(self) -> None:
        if self.position >= len(self._source):
            self.char = None
            return
        self.char = self._source[self.position]
        self.position += 1

    def _skip_whitespace(self) -> None:
        while self.char is not None and self.char.isspace():
            self._read_char()

    def _read_identifier(self) -> str:
        start = self.position - 1
        while self.char is not None and self.char.isalpha():
            self._read_char()
        return self._source[start:self._end()]

    def _read_number(self) -> str:
        start = self.position - 1
        while self.char is not None and self.char in DIGITS:
            self._read_char()
        return self._source[start:self._end()]

    def _end(self) -> int:
        # Index just past the consumed run: the lookahead is not part of it.
        if self.char is None:
            return len(self._source)
        return self.position - 1


def lex(source: str) -> list[Token]:
    return Lexer(source).tokens()
