"""
toylang Lexer Package

Implements a hand-written, pull-based lexical analyzer for toylang.

Key Features:
- One-character lookahead for two-character operators
- Maximal-munch identifiers classified against a keyword table
- Integer/float classification without backtracking
- Line and column tracking for diagnostics
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerWarning",
    "tokenize_string",
]
