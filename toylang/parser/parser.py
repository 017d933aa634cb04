"""
toylang Pratt Parser Implementation

Implements a top-down operator precedence (Pratt) parser over a two-token
window (current, peek) pulled from a Lexer. Each token type that can begin an
expression has a prefix handler; each that can continue one has an infix
handler. The precedence table decides how far an operand extends.

Syntax errors are collected, not raised. Every failing production records a
ParseError and returns None, and the statement loop always moves forward by
at least one token, so a whole program is parsed in one pass. There is no
resynchronization, so one early mistake can produce follow-on errors.
A statement nested past the recursion limit is reported as a single error
and parsing resumes from wherever the token window stopped.
"""

import logging
import math
from typing import List, Optional, Dict, Callable, Tuple
from enum import IntEnum

from ..lexer.tokens import Token, TokenType
from ..lexer.lexer import Lexer
from .ast_nodes import (
    Program, Statement, Expression, VarStatement, ReturnStatement,
    ExpressionStatement, Identifier, IntegerLiteral, FloatLiteral,
    StringLiteral, PrefixExpression, InfixExpression, CallExpression
)
from .errors import (
    ParseError, create_unexpected_token_error, create_missing_prefix_error,
    create_invalid_literal_error, create_nesting_error
)

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Precedence(IntEnum):
    """Operator precedence levels for Pratt parsing."""
    LOWEST = 1
    EQUALS = 2          # ==, !=
    LESSGREATER = 3     # <, >, <=, >=
    SUM = 4             # +, -
    PRODUCT = 5         # *, /
    PREFIX = 6          # -x, !x
    CALL = 7            # f(x)


# Operator precedence table; anything missing binds at LOWEST
PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.EQUAL: Precedence.EQUALS,
    TokenType.NOT_EQUAL: Precedence.EQUALS,
    TokenType.LESS_THAN: Precedence.LESSGREATER,
    TokenType.GREATER_THAN: Precedence.LESSGREATER,
    TokenType.LESS_EQUAL: Precedence.LESSGREATER,
    TokenType.GREATER_EQUAL: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.MULTIPLY: Precedence.PRODUCT,
    TokenType.DIVIDE: Precedence.PRODUCT,
    TokenType.LEFT_PAREN: Precedence.CALL,
}


class Parser:
    """
    toylang Pratt parser.

    Consumes tokens from a Lexer through a current/peek window and builds a
    Program. Inspect errors() before trusting the returned tree.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize parser with a lexer.

        Args:
            lexer: Lexer positioned at the start of its input
        """
        self.lexer = lexer
        self.diagnostics: List[ParseError] = []

        # Placeholders until the window is primed below
        self.current_token: Optional[Token] = None
        self.peek_token: Optional[Token] = None

        # Initialize parsing tables
        self._init_parsing_tables()

        # Read two tokens so current and peek are both set
        self.advance()
        self.advance()

    def _init_parsing_tables(self):
        """Initialize the prefix and infix handler tables."""

        # Prefix parsing functions (for tokens that can start expressions)
        self.prefix_parsers: Dict[TokenType, Callable[[], Optional[Expression]]] = {
            TokenType.IDENTIFIER: self._parse_identifier,
            TokenType.INTEGER: self._parse_integer_literal,
            TokenType.FLOAT: self._parse_float_literal,
            TokenType.STRING: self._parse_string_literal,
            TokenType.MINUS: self._parse_prefix_expression,
            TokenType.LOGICAL_NOT: self._parse_prefix_expression,
            TokenType.LEFT_PAREN: self._parse_grouped_expression,
        }

        # Infix parsing functions (binary operators and call application)
        self.infix_parsers: Dict[TokenType, Callable[[Optional[Expression]], Optional[Expression]]] = {
            TokenType.PLUS: self._parse_infix_expression,
            TokenType.MINUS: self._parse_infix_expression,
            TokenType.MULTIPLY: self._parse_infix_expression,
            TokenType.DIVIDE: self._parse_infix_expression,
            TokenType.EQUAL: self._parse_infix_expression,
            TokenType.NOT_EQUAL: self._parse_infix_expression,
            TokenType.LESS_THAN: self._parse_infix_expression,
            TokenType.GREATER_THAN: self._parse_infix_expression,
            TokenType.LESS_EQUAL: self._parse_infix_expression,
            TokenType.GREATER_EQUAL: self._parse_infix_expression,
            TokenType.LEFT_PAREN: self._parse_call_expression,
        }

    # Token window

    def advance(self):
        """Shift the window: current takes peek, peek takes the next token."""
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def errors(self) -> List[str]:
        """Recorded error messages, in the order they occurred."""
        return [error.message for error in self.diagnostics]

    def has_errors(self) -> bool:
        """Check if parser recorded any errors."""
        return len(self.diagnostics) > 0

    # Statements

    def parse_program(self) -> Program:
        """
        Parse the whole input into a Program.

        Always runs to end of input. Statements that failed to parse are
        left out; partially built ones are kept.
        """
        program = Program()

        while not self._current_is(TokenType.EOF):
            start_token = self.current_token
            try:
                statement = self.parse_statement()
            except RecursionError:
                self._record(create_nesting_error(start_token))
                statement = None
            if statement is not None:
                program.statements.append(statement)
            self.advance()

        logger.debug(
            "parsed %d statements from %s with %d errors",
            len(program.statements), self.lexer.filename, len(self.diagnostics)
        )
        return program

    def parse_statement(self) -> Optional[Statement]:
        """Dispatch on the current token; anything else is an expression."""
        if self._current_is(TokenType.VAR):
            return self.parse_var_statement()
        elif self._current_is(TokenType.RETURN):
            return self.parse_return_statement()
        else:
            return self.parse_expression_statement()

    def parse_var_statement(self) -> Optional[VarStatement]:
        """Parse var <ident> = <expr> [;]"""
        start_token = self.current_token

        if not self._expect_peek(TokenType.IDENTIFIER):
            return None

        name = Identifier(self.current_token, self.current_token.literal)

        if not self._expect_peek(TokenType.ASSIGN):
            return None

        self.advance()
        value = self.parse_expression(Precedence.LOWEST)

        if self._peek_is(TokenType.SEMICOLON):
            self.advance()

        return VarStatement(start_token, name, value)

    def parse_return_statement(self) -> ReturnStatement:
        """Parse return [<expr>] [;]"""
        start_token = self.current_token

        self.advance()

        value = None
        if not self._current_is(TokenType.SEMICOLON):
            value = self.parse_expression(Precedence.LOWEST)

        if self._peek_is(TokenType.SEMICOLON):
            self.advance()

        return ReturnStatement(start_token, value)

    def parse_expression_statement(self) -> ExpressionStatement:
        """Parse <expr> [;]"""
        start_token = self.current_token
        expression = self.parse_expression(Precedence.LOWEST)

        if self._peek_is(TokenType.SEMICOLON):
            self.advance()

        return ExpressionStatement(start_token, expression)

    # Expressions

    def parse_expression(self, precedence: Precedence) -> Optional[Expression]:
        """Parse expression binding tighter than the given precedence."""
        prefix_parser = self.prefix_parsers.get(self.current_token.type)
        if prefix_parser is None:
            self._record(create_missing_prefix_error(self.current_token))
            return None

        left = prefix_parser()

        while not self._peek_is(TokenType.SEMICOLON) and precedence < self._peek_precedence():
            infix_parser = self.infix_parsers.get(self.peek_token.type)
            if infix_parser is None:
                return left

            self.advance()
            left = infix_parser(left)

        return left

    def _peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def _current_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.current_token.type, Precedence.LOWEST)

    # Prefix parsers (tokens that can start expressions)

    def _parse_identifier(self) -> Identifier:
        return Identifier(self.current_token, self.current_token.literal)

    def _parse_integer_literal(self) -> Optional[IntegerLiteral]:
        """Parse integer literal; must fit in a signed 64-bit integer."""
        token = self.current_token
        try:
            value = int(token.literal)
        except ValueError:
            # Past the interpreter's digit limit for str -> int
            value = None
        if value is None or not INT64_MIN <= value <= INT64_MAX:
            self._record(create_invalid_literal_error(token, "integer"))
            return None
        return IntegerLiteral(token, value)

    def _parse_float_literal(self) -> Optional[FloatLiteral]:
        """Parse float literal; must be finite."""
        token = self.current_token
        value = float(token.literal)
        if math.isinf(value):
            self._record(create_invalid_literal_error(token, "float"))
            return None
        return FloatLiteral(token, value)

    def _parse_string_literal(self) -> StringLiteral:
        return StringLiteral(self.current_token, self.current_token.literal)

    def _parse_prefix_expression(self) -> PrefixExpression:
        """Parse unary operation."""
        operator_token = self.current_token

        self.advance()
        right = self.parse_expression(Precedence.PREFIX)

        return PrefixExpression(operator_token, operator_token.literal, right)

    def _parse_grouped_expression(self) -> Optional[Expression]:
        """Parse parenthesized expression."""
        self.advance()  # Consume (

        expression = self.parse_expression(Precedence.LOWEST)

        if not self._expect_peek(TokenType.RIGHT_PAREN):
            return None

        return expression

    # Infix parsers (binary operators and call application)

    def _parse_infix_expression(self, left: Optional[Expression]) -> InfixExpression:
        """Parse binary operation; same-precedence operators group left."""
        operator_token = self.current_token

        precedence = self._current_precedence()
        self.advance()
        right = self.parse_expression(precedence)

        return InfixExpression(operator_token, left, operator_token.literal, right)

    def _parse_call_expression(self, function: Optional[Expression]) -> Optional[CallExpression]:
        """Parse function call; current token is the opening parenthesis."""
        call_token = self.current_token

        arguments = self._parse_call_arguments()
        if arguments is None:
            return None

        return CallExpression(call_token, function, arguments)

    def _parse_call_arguments(self) -> Optional[List[Optional[Expression]]]:
        arguments: List[Optional[Expression]] = []

        if self._peek_is(TokenType.RIGHT_PAREN):
            self.advance()
            return arguments

        self.advance()
        arguments.append(self.parse_expression(Precedence.LOWEST))

        while self._peek_is(TokenType.COMMA):
            self.advance()
            self.advance()
            arguments.append(self.parse_expression(Precedence.LOWEST))

        if not self._expect_peek(TokenType.RIGHT_PAREN):
            return None

        return arguments

    # Utility methods

    def _current_is(self, token_type: TokenType) -> bool:
        return self.current_token.type == token_type

    def _peek_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def _expect_peek(self, token_type: TokenType) -> bool:
        """Advance if peek matches, otherwise record an error."""
        if self._peek_is(token_type):
            self.advance()
            return True

        self._record(create_unexpected_token_error(token_type, self.peek_token))
        return False

    def _record(self, error: ParseError):
        logger.debug("%s: %s at %s", error.code, error.message, error.location)
        self.diagnostics.append(error)


def parse_string(source: str, filename: str = "<string>") -> Tuple[Program, List[str]]:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        The Program and the list of error messages
    """
    parser = Parser(Lexer(source, filename))
    program = parser.parse_program()
    return program, parser.errors()
