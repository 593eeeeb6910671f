from lexer import Lexer
from tokens import Token, TokenType


def scan(text: str):
    """Return the tokens a consumer iterating the lexer sees (no EOF)."""
    return list(Lexer(text))


def kinds(text: str):
    return [t.type for t in scan(text)]


def ident(name: str) -> Token:
    return Token(TokenType.IDENTIFIER, name)


def integer(value: int) -> Token:
    return Token(TokenType.INTEGER, value)
