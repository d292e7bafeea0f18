"""Token vocabulary for the Lox scanner, plus the two ways tokens get displayed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Union


class TokenType(Enum):
    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


@dataclass(frozen=True)
class NumberLiteral:
    value: float


@dataclass(frozen=True)
class TextLiteral:
    value: str


# None means the token carries no decoded value.
Literal = Optional[Union[NumberLiteral, TextLiteral]]


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    literal: Literal
    line: int


def token_to_string(token: Token) -> str:
    """Human-readable log line for a token."""
    lexeme = token.lexeme.replace("\r\n", "\\r\\n", 1)
    return f'Token [{token.type.name}]\t\t"{lexeme}" on line {token.line}.'


def format_token(token: Token) -> Dict[str, str]:
    """Tabular ``{type, value}`` projection of a token.

    Numbers are rendered as text, strings are wrapped in quotes and every
    other kind falls back to its lexeme.
    """
    literal = token.literal
    if isinstance(literal, NumberLiteral):
        value = _number_text(literal.value)
    elif isinstance(literal, TextLiteral):
        value = f'"{literal.value}"'
    else:
        value = token.lexeme
    return {"type": token.type.name, "value": value}


def _number_text(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


__all__ = [
    "TokenType",
    "Token",
    "NumberLiteral",
    "TextLiteral",
    "Literal",
    "KEYWORDS",
    "token_to_string",
    "format_token",
]
