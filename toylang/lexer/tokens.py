"""
Token definitions for the toylang lexer.

This module defines all token types supported by toylang, including:
- Keywords (func, var, if, else, for, return)
- Operators (arithmetic, comparison, logical)
- Literals (integers, floats, strings)
- Identifiers
- Punctuation and delimiters

Each TokenType value is the display name used in parser diagnostics.
"""

from enum import Enum
from dataclasses import dataclass


class TokenType(Enum):
    """
    Enumeration of all token types in toylang.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = "EOF"                     # End of input
    ILLEGAL = "ILLEGAL"             # Unrecognized character

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = "IDENT"            # add, x, _tmp1
    INTEGER = "INT"                 # 42
    FLOAT = "FLOAT"                 # 3.14
    STRING = "STRING"               # "hello" (no escapes)

    # ========================================================================
    # Operators
    # ========================================================================

    # Arithmetic
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    # Assignment
    ASSIGN = "="

    # Comparison
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_EQUAL = "<="
    GREATER_EQUAL = ">="

    # Logical
    LOGICAL_AND = "&&"
    LOGICAL_OR = "||"
    LOGICAL_NOT = "!"

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    SEMICOLON = ";"
    DOT = "."

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNC = "func"
    VAR = "var"
    IF = "if"
    ELSE = "else"
    FOR = "for"
    RETURN = "return"


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the toylang language.

    Contains the token type, the literal text taken from the source
    and the source location of its first character.
    """
    type: TokenType
    literal: str
    location: SourceLocation

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def __str__(self) -> str:
        return f"Token({self.type.value}, {self.literal!r}, {self.line}:{self.column})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r}, {self.location!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {TokenType.INTEGER, TokenType.FLOAT, TokenType.STRING}

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.type in OPERATORS.values()

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Lookup tables used by the lexer for keyword/operator recognition

KEYWORDS = {
    "func": TokenType.FUNC,
    "var": TokenType.VAR,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "for": TokenType.FOR,
    "return": TokenType.RETURN,
}

# Characters that form a token on their own
SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ".": TokenType.DOT,
}

# Operators that may extend by one character: first char -> (second char,
# two-char type, one-char type). A one-char type of None means the first
# character is not a token by itself.
TWO_CHAR_OPERATORS = {
    "=": ("=", TokenType.EQUAL, TokenType.ASSIGN),
    "!": ("=", TokenType.NOT_EQUAL, TokenType.LOGICAL_NOT),
    "<": ("=", TokenType.LESS_EQUAL, TokenType.LESS_THAN),
    ">": ("=", TokenType.GREATER_EQUAL, TokenType.GREATER_THAN),
    "&": ("&", TokenType.LOGICAL_AND, None),
    "|": ("|", TokenType.LOGICAL_OR, None),
}

OPERATORS = {
    **SINGLE_CHAR_TOKENS,
    "=": TokenType.ASSIGN,
    "==": TokenType.EQUAL,
    "!": TokenType.LOGICAL_NOT,
    "!=": TokenType.NOT_EQUAL,
    "<": TokenType.LESS_THAN,
    "<=": TokenType.LESS_EQUAL,
    ">": TokenType.GREATER_THAN,
    ">=": TokenType.GREATER_EQUAL,
    "&&": TokenType.LOGICAL_AND,
    "||": TokenType.LOGICAL_OR,
}
