"""
toylang Front End Package

Lexer and Pratt parser for a small C-like toy language with variable
declarations, return statements, expression statements, prefix and infix
operators, grouping and function calls.

Architecture:
    toylang/
    ├── lexer/           # Tokenization and lexical analysis
    └── parser/          # Syntax analysis and AST generation

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, tokenize_string
from .parser import Parser, Program, parse_string

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "Program",

    # Convenience functions
    "tokenize_string",
    "parse_string",

    # Version info
    "__version__",
    "__license__",
]
