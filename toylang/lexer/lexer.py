"""
toylang Lexer - turns source text into tokens on demand

The parser pulls one token at a time through next_token(). Every decision
needs at most one character of lookahead, so the lexer never backtracks.

Known gaps:
- strings have no escape sequences and an unterminated one runs to the end
- a lone '&' or '|' is skipped without producing a token
- numbers are plain decimal (no exponents, underscores or radix prefixes)
"""

import logging
from typing import List

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS,
    TWO_CHAR_OPERATORS
)
from .errors import (
    LexerWarning, create_dropped_character_warning,
    create_unterminated_string_warning
)

logger = logging.getLogger(__name__)

WHITESPACE = " \t\n\r"
DIGITS = "0123456789"


class Lexer:
    """
    toylang lexical analyzer.

    Converts source code text into a stream of tokens, tracking line and
    column for diagnostics. A lexer is good for one pass over its input;
    build a new one to start over.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.warnings: List[LexerWarning] = []

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns an EOF token once the input is exhausted, and keeps
        returning EOF on every later call.
        """
        while True:
            self._skip_whitespace()

            location = self._location()

            if self.pos >= len(self.source):
                return Token(TokenType.EOF, "", location)

            current_char = self.source[self.pos]

            # Operators that may take a second character
            if current_char in TWO_CHAR_OPERATORS:
                second, double_type, single_type = TWO_CHAR_OPERATORS[current_char]
                if self._peek() == second:
                    self._advance_by(2)
                    return Token(double_type, current_char + second, location)

                self._advance()
                if single_type is None:
                    self._warn(create_dropped_character_warning(current_char, location))
                    continue
                return Token(single_type, current_char, location)

            if current_char in SINGLE_CHAR_TOKENS:
                self._advance()
                return Token(SINGLE_CHAR_TOKENS[current_char], current_char, location)

            if current_char == '"':
                return self._tokenize_string(location)

            if self._is_identifier_start(current_char):
                return self._tokenize_identifier_or_keyword(location)

            if current_char in DIGITS:
                return self._tokenize_number(location)

            self._advance()
            return Token(TokenType.ILLEGAL, current_char, location)

    def _tokenize_identifier_or_keyword(self, location: SourceLocation) -> Token:
        """Scan the longest identifier, then classify it against KEYWORDS."""
        start_pos = self.pos
        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        return Token(token_type, lexeme, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Scan an integer, promoting to float on '.' followed by a digit."""
        start_pos = self.pos
        token_type = TokenType.INTEGER

        self._skip_digits()

        if self._current() == "." and self._peek() in DIGITS:
            token_type = TokenType.FLOAT
            self._advance()
            self._skip_digits()

        return Token(token_type, self.source[start_pos:self.pos], location)

    def _tokenize_string(self, location: SourceLocation) -> Token:
        """Scan a string literal. The literal excludes the quotes."""
        self._advance()  # Skip opening quote
        start_pos = self.pos

        while self.pos < len(self.source) and self.source[self.pos] != '"':
            self._advance()

        literal = self.source[start_pos:self.pos]

        if self.pos >= len(self.source):
            self._warn(create_unterminated_string_warning(location))
        else:
            self._advance()  # Skip closing quote

        return Token(TokenType.STRING, literal, location)

    def _warn(self, warning: LexerWarning):
        logger.debug("%s at %s", warning.message, warning.location)
        self.warnings.append(warning)

    def _is_identifier_start(self, char: str) -> bool:
        """Check if character can start an identifier."""
        return (char.isascii() and char.isalpha()) or char == '_'

    def _is_identifier_continue(self, char: str) -> bool:
        """Check if character can continue an identifier."""
        return self._is_identifier_start(char) or char in DIGITS

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos] in WHITESPACE:
            self._advance()

    def _skip_digits(self):
        while self.pos < len(self.source) and self.source[self.pos] in DIGITS:
            self._advance()

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def _current(self) -> str:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return '\0'

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_warnings(self) -> bool:
        """Check if lexer skipped or truncated any input."""
        return len(self.warnings) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens ending with the first EOF token
    """
    lexer = Lexer(source, filename)
    tokens = []
    while True:
        token = lexer.next_token()
        tokens.append(token)
        if token.type == TokenType.EOF:
            return tokens
