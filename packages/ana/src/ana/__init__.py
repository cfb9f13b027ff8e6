"""Ana token model and lexer."""

from ana.lexer import Lexer, lex
from ana.token import EOF, KEYWORDS, Token, TokenKind, lookup_ident

__version__ = "0.1.0"

__all__ = [
    "EOF",
    "KEYWORDS",
    "Lexer",
    "Token",
    "TokenKind",
    "lex",
    "lookup_ident",
]
