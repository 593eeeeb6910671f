"""
Lexer for the small C-like toy language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`.
- It recognizes the keywords `fn`, `let`, `true`, `false`, `if`, `else` and
    `return`, identifiers, integer literals, single- and two-character
    operators (`==`, `!=`, `<=`, `>=`), delimiters (commas, semicolons,
    parentheses and braces) and skips blanks (space, tab, newline, carriage
    return).

Examples:
    Input:  "let add = fn(x, y) { x + y; };"
    Tokens: [LET, IDENTIFIER('add'), ASSIGN, FUNCTION, LPAREN, IDENTIFIER('x'), ...]

Implementation notes:
- The cursor is `self.position`/`self.ch` plus a one-character lookahead at
    `self.read_position`. The constructor reads the first character, so the
    cursor is always primed. `self.ch` is None before the start and past the
    end of the input.
- The input is a Python `str`, i.e. a sequence of code points, and every
    access is a direct index into it.
- `=`, `>`, `<` and `!` peek at the next character and merge with a
    following `=` into a single token.
- Characters the language does not know become `ILLEGAL` tokens and digit
    runs that do not fit a signed 32-bit integer become `OVERFLOW` tokens.
    Neither stops the scan unless the lexer was created with `strict=True`.
- A `Lexer` is also an iterator over its tokens. Iteration ends when the end
    of the input is reached; the `EOF` token itself is not yielded.
"""

from __future__ import annotations
import logging
from typing import Iterator, List, Optional
from tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)

INT32_MAX = 2**31 - 1

WHITESPACE = frozenset(" \t\n\r")

SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
}

# Operators that become a different token when followed by `=`.
COMPOUND_TOKENS = {
    "=": (TokenType.ASSIGN, TokenType.EQ),
    ">": (TokenType.GT, TokenType.GTE),
    "<": (TokenType.LT, TokenType.LTE),
    "!": (TokenType.NOT, TokenType.NEQ),
}


def is_digit(ch: Optional[str]) -> bool:
    return ch is not None and "0" <= ch <= "9"


def is_letter(ch: Optional[str]) -> bool:
    return ch is not None and ("a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_")


class LexerError(SyntaxError):
    """Raised by a strict lexer on the first illegal or overflowing lexeme."""

    def __init__(self, message: str, token: Token):
        super().__init__(message)
        self.token = token


class Lexer:
    def __init__(self, text: str, strict: bool = False):
        self.text = text
        self.strict = strict
        self.position = 0
        self.read_position = 0
        self.ch: Optional[str] = None
        self.line = 1
        self.line_start = 0
        self._exhausted = False
        self.read_char()

    @property
    def column(self) -> int:
        return self.position - self.line_start + 1

    def error(self, token: Token) -> LexerError:
        if token.type == TokenType.OVERFLOW:
            message = f"integer literal {token.value} does not fit in 32 bits"
        else:
            message = f"unexpected character {token.value!r}"
        return LexerError(
            f"Lexical error at line {token.line}, column {token.column}: {message}",
            token,
        )

    def read_char(self) -> None:
        """Move the cursor one character forward."""
        if self.ch == "\n":
            self.line += 1
            self.line_start = self.read_position

        self.position = self.read_position
        if self.position >= len(self.text):
            self.ch = None
        else:
            self.ch = self.text[self.position]
            self.read_position += 1

    def peek_char(self) -> Optional[str]:
        """Look at the next character without consuming it."""
        if self.read_position >= len(self.text):
            return None
        return self.text[self.read_position]

    def skip_whitespace(self) -> None:
        while self.ch in WHITESPACE:
            self.read_char()

    def read_identifier(self) -> str:
        """Read letters, digits and underscores; stops on the last one."""
        start = self.position
        while is_letter(self.peek_char()) or is_digit(self.peek_char()):
            self.read_char()
        return self.text[start : self.position + 1]

    def read_number(self) -> str:
        """Read a run of digits; stops on the last one."""
        start = self.position
        while is_digit(self.peek_char()):
            self.read_char()
        return self.text[start : self.position + 1]

    def next_token(self) -> Token:
        """Return the next token, or an `EOF` token once the input is used up."""
        self.skip_whitespace()
        line, column = self.line, self.column
        ch = self.ch

        if ch is None:
            return Token(TokenType.EOF, None, line, column)

        if ch in COMPOUND_TOKENS:
            single, double = COMPOUND_TOKENS[ch]
            if self.peek_char() == "=":
                self.read_char()
                token = Token(double, None, line, column)
            else:
                token = Token(single, None, line, column)
        elif ch in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[ch], None, line, column)
        elif is_digit(ch):
            token = self.integer_token(self.read_number(), line, column)
        elif is_letter(ch):
            ident = self.read_identifier()
            if ident in KEYWORDS:
                token = Token(KEYWORDS[ident], None, line, column)
            else:
                token = Token(TokenType.IDENTIFIER, ident, line, column)
        else:
            token = Token(TokenType.ILLEGAL, ch, line, column)

        self.read_char()

        if token.is_error:
            logger.debug("%s at %d:%d", token, line, column)
            if self.strict:
                raise self.error(token)
        return token

    @staticmethod
    def integer_token(digits: str, line: int, column: int) -> Token:
        # Literals carry no sign; only the upper bound can be exceeded.
        # Leading zeros are stripped first: int() refuses very long digit strings.
        significant = digits.lstrip("0") or "0"
        if len(significant) > len(str(INT32_MAX)):
            return Token(TokenType.OVERFLOW, digits, line, column)
        value = int(significant)
        if value > INT32_MAX:
            return Token(TokenType.OVERFLOW, digits, line, column)
        return Token(TokenType.INTEGER, value, line, column)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._exhausted:
            raise StopIteration
        token = self.next_token()
        if token.type == TokenType.EOF:
            self._exhausted = True
            raise StopIteration
        return token

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, ending with `EOF`."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
