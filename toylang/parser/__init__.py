"""
toylang Parser Package

Implements a Pratt-based recursive descent parser for toylang.
Produces ASTs whose nodes keep their originating tokens for diagnostics.

Key Features:
- Top-down operator precedence (Pratt parsing) with prefix/infix tables
- Two-token lookahead window over a pull-based lexer
- Fully parenthesized canonical reconstruction of every node
- Error accumulation instead of exceptions
"""

from .ast_nodes import *
from .parser import Parser, Precedence, PRECEDENCES, parse_string
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "Precedence", "PRECEDENCES", "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor",
    "Program", "Statement", "Expression",
    "VarStatement", "ReturnStatement", "ExpressionStatement",
    "Identifier", "IntegerLiteral", "FloatLiteral", "StringLiteral",
    "PrefixExpression", "InfixExpression", "CallExpression",

    # Error handling
    "ParseError",
]
