"""
Diagnostics for the toylang lexer.

The lexer never fails: malformed input degrades into skipped characters or
truncated tokens. Those gaps are recorded as warnings so tooling can surface
them, while the parser's error list stays unaffected.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base record for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerWarning:
    """
    Represents a lexical gap that doesn't stop tokenization.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

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


def create_dropped_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a lone '&' or '|' that produced no token."""
    return LexerWarning(
        message=f"Dropped lone '{char}'",
        location=location,
        code="L001",
        help_text=f"'{char}' is only meaningful when doubled.",
        suggestions=[f"Use '{char}{char}'"]
    )


def create_unterminated_string_warning(location: SourceLocation) -> LexerWarning:
    """Create a warning for a string literal that runs to end of input."""
    return LexerWarning(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text="The string was read up to the end of the input.",
        suggestions=["Add a closing '\"'"]
    )
