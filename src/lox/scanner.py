"""
Lox scanner.

Turns source text into a flat list of tokens ending in EOF. Bad input
(unknown characters, unterminated strings) goes to the error reporter and
scanning carries on, so callers always get a usable token list back.
"""

from __future__ import annotations

from typing import List, Optional

from .reporting import ConsoleReporter, ErrorReporter
from .tokens import KEYWORDS, Literal, NumberLiteral, TextLiteral, Token, TokenType

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# lead char -> (kind when followed by '=', kind otherwise)
EQUAL_PAIRS = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"


def _is_alnum(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


class Scanner:
    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        self.source = source
        self.length = len(source)
        self.reporter = reporter if reporter is not None else ConsoleReporter()
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self._done = False

    def scan(self) -> List[Token]:
        """Scan the whole source. Later calls return the same tokens."""
        if self._done:
            return self.tokens
        while not self._is_at_end():
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        self._done = True
        return self.tokens

    def _scan_token(self) -> None:
        c = self._advance()

        kind = SINGLE_CHAR_TOKENS.get(c)
        if kind is not None:
            self._add(kind)
            return

        pair = EQUAL_PAIRS.get(c)
        if pair is not None:
            with_equal, alone = pair
            self._add(with_equal if self._match("=") else alone)
            return

        if c == "/":
            if self._match("/"):
                # comment runs to the end of the line
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add(TokenType.SLASH)
            return

        if c in " \t\r":
            return
        if c == "\n":
            self.line += 1
            return

        if c == '"':
            self._string()
        elif _is_digit(c):
            self._number()
        elif _is_alpha(c):
            self._identifier()
        else:
            self.reporter.report(f'Unrecognized character "{c}"', self.line)

    def _string(self) -> None:
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self.reporter.report("Unterminated string literal", self.line)
            return

        self._advance()  # closing quote
        value = self.source[self.start + 1 : self.current - 1]
        self._add(TokenType.STRING, TextLiteral(value))

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()

        # a dot only belongs to the number when digits follow it
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        text = self.source[self.start : self.current]
        self._add(TokenType.NUMBER, NumberLiteral(float(text)))

    def _identifier(self) -> None:
        while _is_alnum(self._peek()):
            self._advance()
        text = self.source[self.start : self.current]
        self._add(KEYWORDS.get(text, TokenType.IDENTIFIER))

    # --- cursor helpers ---
    def _is_at_end(self) -> bool:
        return self.current >= self.length

    def _advance(self) -> str:
        ch = self.source[self.current]
        self.current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= self.length:
            return "\0"
        return self.source[self.current + 1]

    def _add(self, kind: TokenType, literal: Literal = None) -> None:
        lexeme = self.source[self.start : self.current]
        self.tokens.append(Token(kind, lexeme, literal, self.line))


def scan(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """Scan ``source`` with a fresh scanner."""
    return Scanner(source, reporter).scan()


__all__ = ["Scanner", "scan"]
