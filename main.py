from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from lexer import Lexer, LexerError
from tokens import Token

PROMPT = ">> "

logger = logging.getLogger(__name__)


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def format_tokens(tokens: List[Token]) -> str:
    """Render tokens space-separated, the way the REPL prints them."""
    return " ".join(str(token) for token in tokens)


def repl(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    strict: bool = False,
) -> int:
    """Read lines until `exit` or end of input, printing the tokens of each."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    while True:
        stdout.write(PROMPT)
        stdout.flush()

        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            stdout.write("\n")
            break
        if not line:
            stdout.write("\n")
            break

        text = line.strip()
        if text == "exit":
            break

        try:
            tokens = list(Lexer(text, strict=strict))
        except LexerError as e:
            print(e, file=stdout)
            continue

        print(format_tokens(tokens), file=stdout)

    return 0


def process_file(
    path: str, stdout: Optional[TextIO] = None, strict: bool = False
) -> int:
    """Tokenize a whole file, printing one token per line.

    Returns the process exit status: 1 when the file cannot be read or any
    lexical error was found, 0 otherwise.
    """
    stdout = stdout or sys.stdout
    try:
        with open(path, "r", encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read file {path}: {e}", file=stdout)
        return 1

    errors = 0
    try:
        for token in Lexer(text, strict=strict):
            print(f"{token.line}:{token.column}\t{token}", file=stdout)
            if token.is_error:
                errors += 1
    except LexerError as e:
        print(e, file=stdout)
        return 1

    if errors:
        logger.warning("%s: %d lexical error(s)", path, errors)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Tokenize a file, or print tokens interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to tokenize"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode (default)",
    )
    parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Stop at the first illegal character or oversized integer",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        dest="verbose",
        action="store_true",
        help="Log lexical errors as they are found",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.file:
        return process_file(args.file, strict=args.strict)
    return repl(strict=args.strict)


if __name__ == "__main__":
    sys.exit(main())
