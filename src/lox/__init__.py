from .tokens import (
    KEYWORDS,
    NumberLiteral,
    TextLiteral,
    Token,
    TokenType,
    format_token,
    token_to_string,
)
from .reporting import CollectingReporter, ConsoleReporter, Diagnostic, ErrorReporter
from .scanner import Scanner, scan

__all__ = [
    "Token",
    "TokenType",
    "NumberLiteral",
    "TextLiteral",
    "KEYWORDS",
    "token_to_string",
    "format_token",
    "Diagnostic",
    "ErrorReporter",
    "ConsoleReporter",
    "CollectingReporter",
    "Scanner",
    "scan",
]
