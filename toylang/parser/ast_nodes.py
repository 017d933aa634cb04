"""
Abstract Syntax Tree node definitions for toylang.

Two closed families of nodes hang off the Program root: statements and
expressions. Every node keeps the token it was built from, so diagnostics can
point back at the source, and renders a fully parenthesized canonical string
through to_string(). Re-parsing that string yields the same tree.

A child may be None when the parser recorded an error while building the
node; such children render as the empty string.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any
from enum import Enum

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"

    # Statements
    VAR_STATEMENT = "VarStatement"
    RETURN_STATEMENT = "ReturnStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"

    # Expressions
    IDENTIFIER = "Identifier"
    INTEGER_LITERAL = "IntegerLiteral"
    FLOAT_LITERAL = "FloatLiteral"
    STRING_LITERAL = "StringLiteral"
    PREFIX_EXPRESSION = "PrefixExpression"
    INFIX_EXPRESSION = "InfixExpression"
    CALL_EXPRESSION = "CallExpression"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


def _render(node: Optional['ASTNode']) -> str:
    return node.to_string() if node is not None else ""


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def __init__(self, node_type: ASTNodeType, token: Optional[Token]):
        self.node_type = node_type
        self.token = token

    def token_literal(self) -> str:
        """Text of the token this node was built from."""
        return self.token.literal if self.token is not None else ""

    @abstractmethod
    def to_string(self) -> str:
        """Canonical source reconstruction."""
        pass

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all present child nodes, in source order."""
        pass

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()!r})"


class Statement(ASTNode):
    """Base class for statements."""
    pass


class Expression(ASTNode):
    """Base class for expressions."""
    pass


# ============================================================================
# Top-level nodes
# ============================================================================

class Program(ASTNode):
    """Root AST node; statements are kept in source order."""
    statements: List[Statement]

    def __init__(self, statements: Optional[List[Statement]] = None):
        super().__init__(ASTNodeType.PROGRAM, None)
        self.statements = statements if statements is not None else []

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def to_string(self) -> str:
        return "".join(stmt.to_string() + "\n" for stmt in self.statements)

    def children(self) -> List[ASTNode]:
        return list(self.statements)


# ============================================================================
# Statements
# ============================================================================

class VarStatement(Statement):
    """Variable declaration: var <name> = <value>;"""
    name: 'Identifier'
    value: Optional[Expression]

    def __init__(self, token: Token, name: 'Identifier', value: Optional[Expression]):
        super().__init__(ASTNodeType.VAR_STATEMENT, token)
        self.name = name
        self.value = value

    def to_string(self) -> str:
        return f"{self.token_literal()} {_render(self.name)} = {_render(self.value)};"

    def children(self) -> List[ASTNode]:
        children: List[ASTNode] = [self.name]
        if self.value is not None:
            children.append(self.value)
        return children


class ReturnStatement(Statement):
    """Return statement with optional value."""
    value: Optional[Expression]

    def __init__(self, token: Token, value: Optional[Expression] = None):
        super().__init__(ASTNodeType.RETURN_STATEMENT, token)
        self.value = value

    def to_string(self) -> str:
        if self.value is not None:
            return f"{self.token_literal()} {self.value.to_string()};"
        return f"{self.token_literal()};"

    def children(self) -> List[ASTNode]:
        return [self.value] if self.value is not None else []


class ExpressionStatement(Statement):
    """A bare expression used as a statement."""
    expression: Optional[Expression]

    def __init__(self, token: Token, expression: Optional[Expression]):
        super().__init__(ASTNodeType.EXPRESSION_STATEMENT, token)
        self.expression = expression

    def to_string(self) -> str:
        return _render(self.expression)

    def children(self) -> List[ASTNode]:
        return [self.expression] if self.expression is not None else []


# ============================================================================
# Expressions
# ============================================================================

class Identifier(Expression):
    """Identifier expression."""
    value: str

    def __init__(self, token: Token, value: str):
        super().__init__(ASTNodeType.IDENTIFIER, token)
        self.value = value

    def to_string(self) -> str:
        return self.value

    def children(self) -> List[ASTNode]:
        return []


class IntegerLiteral(Expression):
    """Integer literal; renders as its source text."""
    value: int

    def __init__(self, token: Token, value: int):
        super().__init__(ASTNodeType.INTEGER_LITERAL, token)
        self.value = value

    def to_string(self) -> str:
        return self.token_literal()

    def children(self) -> List[ASTNode]:
        return []


class FloatLiteral(Expression):
    """Float literal; renders as its source text."""
    value: float

    def __init__(self, token: Token, value: float):
        super().__init__(ASTNodeType.FLOAT_LITERAL, token)
        self.value = value

    def to_string(self) -> str:
        return self.token_literal()

    def children(self) -> List[ASTNode]:
        return []


class StringLiteral(Expression):
    """String literal. The value is the raw text between the quotes."""
    value: str

    def __init__(self, token: Token, value: str):
        super().__init__(ASTNodeType.STRING_LITERAL, token)
        self.value = value

    def to_string(self) -> str:
        return f'"{self.value}"'

    def children(self) -> List[ASTNode]:
        return []


class PrefixExpression(Expression):
    """Unary prefix operation, e.g. -x or !ok."""
    operator: str
    right: Optional[Expression]

    def __init__(self, token: Token, operator: str, right: Optional[Expression]):
        super().__init__(ASTNodeType.PREFIX_EXPRESSION, token)
        self.operator = operator
        self.right = right

    def to_string(self) -> str:
        return f"({self.operator}{_render(self.right)})"

    def children(self) -> List[ASTNode]:
        return [self.right] if self.right is not None else []


class InfixExpression(Expression):
    """Binary operation expression."""
    left: Optional[Expression]
    operator: str
    right: Optional[Expression]

    def __init__(self, token: Token, left: Optional[Expression], operator: str,
                 right: Optional[Expression]):
        super().__init__(ASTNodeType.INFIX_EXPRESSION, token)
        self.left = left
        self.operator = operator
        self.right = right

    def to_string(self) -> str:
        return f"({_render(self.left)} {self.operator} {_render(self.right)})"

    def children(self) -> List[ASTNode]:
        return [child for child in (self.left, self.right) if child is not None]


class CallExpression(Expression):
    """Function call; the token is the opening parenthesis."""
    function: Optional[Expression]
    arguments: List[Optional[Expression]]

    def __init__(self, token: Token, function: Optional[Expression],
                 arguments: List[Optional[Expression]]):
        super().__init__(ASTNodeType.CALL_EXPRESSION, token)
        self.function = function
        self.arguments = arguments

    def to_string(self) -> str:
        args = ", ".join(_render(arg) for arg in self.arguments)
        return f"{_render(self.function)}({args})"

    def children(self) -> List[ASTNode]:
        children = [self.function] + list(self.arguments)
        return [child for child in children if child is not None]

