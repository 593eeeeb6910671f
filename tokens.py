"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer, the `KEYWORDS` table used to reclassify identifier-shaped lexemes,
and a small `Token` dataclass that holds a token type, an optional payload and
the position of the lexeme's first character. Positions are informational
only: two tokens compare equal when their type and payload match.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


class TokenType(Enum):
    # Literals
    IDENTIFIER = auto()
    INTEGER = auto()

    # Operators
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    GT = auto()
    LT = auto()
    NOT = auto()
    STAR = auto()
    SLASH = auto()
    EQ = auto()
    NEQ = auto()
    GTE = auto()
    LTE = auto()

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    COMMA = auto()
    SEMICOLON = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()

    # Special
    EOF = auto()
    ILLEGAL = auto()
    OVERFLOW = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
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

# Source text of every token kind whose lexeme is fixed.
FIXED_LEXEMES: Mapping[TokenType, str] = MappingProxyType(
    {
        TokenType.ASSIGN: "=",
        TokenType.PLUS: "+",
        TokenType.MINUS: "-",
        TokenType.GT: ">",
        TokenType.LT: "<",
        TokenType.NOT: "!",
        TokenType.STAR: "*",
        TokenType.SLASH: "/",
        TokenType.EQ: "==",
        TokenType.NEQ: "!=",
        TokenType.GTE: ">=",
        TokenType.LTE: "<=",
        TokenType.LPAREN: "(",
        TokenType.RPAREN: ")",
        TokenType.LBRACE: "{",
        TokenType.RBRACE: "}",
        TokenType.COMMA: ",",
        TokenType.SEMICOLON: ";",
        **{kind: word for word, kind in KEYWORDS.items()},
        TokenType.EOF: "",
    }
)


@dataclass
class Token:
    type: TokenType
    value: Optional[str | int] = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    def __str__(self) -> str:
        if self.value is None:
            return str(self.type)
        return f"{self.type}({self.value!r})"

    @property
    def lexeme(self) -> str:
        if self.value is not None:
            return str(self.value)
        return FIXED_LEXEMES[self.type]

    @property
    def is_error(self) -> bool:
        return self.type in (TokenType.ILLEGAL, TokenType.OVERFLOW)
