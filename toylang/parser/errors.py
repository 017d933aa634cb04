"""
Error reporting for the toylang parser.

Syntax problems are never raised. The parser builds a ParseError for each one
and appends it to its ordered error list, then carries on; callers read the
list (or just the plain messages) after parsing.
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic


class ParseError:
    """
    A recorded syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"ParseError({self.code}, {self.message!r}, {self.location})"


def suggest_missing_token(expected: TokenType) -> List[str]:
    """Suggest what token might be missing."""
    token_suggestions = {
        TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
        TokenType.ASSIGN: ["Add an assignment operator '='"],
        TokenType.IDENTIFIER: ["Name the variable after 'var'"],
    }
    return token_suggestions.get(expected, [])


# Helper functions for creating parser errors

def create_unexpected_token_error(expected: TokenType, found: Token) -> ParseError:
    """Create an error for a peek token that does not match the production."""
    return ParseError(
        message=f"expected next token to be {expected.value}, got {found.type.value} instead",
        location=found.location,
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected.value} at this position.",
        suggestions=suggest_missing_token(expected)
    )


def create_missing_prefix_error(found: Token) -> ParseError:
    """Create an error for a token that cannot begin an expression."""
    return ParseError(
        message=f"no prefix parse function for {found.type.value} found",
        location=found.location,
        token=found,
        code="P002",
        help_text=f"'{found.literal}' cannot start an expression.",
        suggestions=["Check for a missing operand", "Ensure all operators have operands"]
    )


def create_invalid_literal_error(token: Token, kind: str) -> ParseError:
    """Create an error for a numeric literal that cannot be converted."""
    return ParseError(
        message=f'could not parse "{token.literal}" as {kind}',
        location=token.location,
        token=token,
        code="P003",
        help_text=f"The literal is out of range for {kind}.",
    )


def create_nesting_error(token: Token) -> ParseError:
    """Create an error for a statement nested deeper than the parser can follow."""
    return ParseError(
        message="expression nested too deeply",
        location=token.location,
        token=token,
        code="P004",
        help_text="The statement exceeds the interpreter's recursion limit.",
        suggestions=["Split the expression into several var statements"]
    )
