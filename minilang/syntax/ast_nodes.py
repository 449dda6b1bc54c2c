"""
Abstract Syntax Tree node definitions for MiniLang.

Defines the closed set of expression and statement nodes. Every node can
render itself back to source-like text through `unparse(level)`; `level`
only affects statements, which indent by four spaces per level.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Type, TYPE_CHECKING

if TYPE_CHECKING:
    from ..containers.symbol_table import SymbolTable


INDENT_WIDTH = 4


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Expressions
    LITERAL = "Literal"
    VARIABLE = "Variable"

    # Binary operators
    PLUS = "Plus"
    MINUS = "Minus"
    TIMES = "Times"
    FLOAT_DIV = "FloatDiv"
    INT_DIV = "IntDiv"
    MODULUS = "Modulus"
    EXPONENTIATION = "Exponentiation"

    # Statements
    ASSIGNMENT_STMT = "AssignmentStmt"
    RETURN_STMT = "ReturnStmt"
    BLOCK_STMT = "BlockStmt"


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ASTNodeType

    @abstractmethod
    def unparse(self, level: int = 0) -> str:
        """Render the subtree as source-like text."""
        pass

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def __str__(self) -> str:
        return self.unparse()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.unparse()!r})"


# ============================================================================
# Expressions
# ============================================================================

class ExpressionNode(ASTNode):
    """Base class for expressions."""
    pass


class LiteralNode(ExpressionNode):
    """Integer literal."""
    node_type = ASTNodeType.LITERAL

    def __init__(self, value: int):
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def unparse(self, level: int = 0) -> str:
        return str(self._value)

    def children(self) -> List[ASTNode]:
        return []


class VariableNode(ExpressionNode):
    """Variable reference."""
    node_type = ASTNodeType.VARIABLE

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def unparse(self, level: int = 0) -> str:
        return self._name

    def children(self) -> List[ASTNode]:
        return []


class BinaryOperator(ExpressionNode):
    """
    Binary operation expression.

    Owns its two operands. Subclasses only supply the operator symbol, and
    every level of nesting is parenthesized: no precedence is assumed.
    """
    symbol: str

    def __init__(self, left: ExpressionNode, right: ExpressionNode):
        self._left = left
        self._right = right

    @property
    def left(self) -> ExpressionNode:
        return self._left

    @property
    def right(self) -> ExpressionNode:
        return self._right

    def unparse(self, level: int = 0) -> str:
        return f"({self._left.unparse(level)} {self.symbol} {self._right.unparse(level)})"

    def children(self) -> List[ASTNode]:
        return [self._left, self._right]


class PlusNode(BinaryOperator):
    node_type = ASTNodeType.PLUS
    symbol = "+"


class MinusNode(BinaryOperator):
    node_type = ASTNodeType.MINUS
    symbol = "-"


class TimesNode(BinaryOperator):
    node_type = ASTNodeType.TIMES
    symbol = "*"


class FloatDivNode(BinaryOperator):
    node_type = ASTNodeType.FLOAT_DIV
    symbol = "/"


class IntDivNode(BinaryOperator):
    node_type = ASTNodeType.INT_DIV
    symbol = "//"


class ModulusNode(BinaryOperator):
    node_type = ASTNodeType.MODULUS
    symbol = "%"


class ExponentiationNode(BinaryOperator):
    node_type = ASTNodeType.EXPONENTIATION
    symbol = "**"


# Operator lexeme -> node class, in the order the operators are listed
BINARY_OPERATOR_NODES: Dict[str, Type[BinaryOperator]] = {
    node_class.symbol: node_class
    for node_class in (
        PlusNode, MinusNode, TimesNode, FloatDivNode,
        IntDivNode, ModulusNode, ExponentiationNode,
    )
}


# ============================================================================
# Statements
# ============================================================================

class Statement(ASTNode):
    """Base class for statements."""

    @staticmethod
    def get_indentation(level: int) -> str:
        return " " * (level * INDENT_WIDTH)


class AssignmentStmt(Statement):
    """Assignment of an expression to a variable."""
    node_type = ASTNodeType.ASSIGNMENT_STMT

    def __init__(self, variable: VariableNode, expression: ExpressionNode):
        self._variable = variable
        self._expression = expression

    @property
    def variable(self) -> VariableNode:
        return self._variable

    @property
    def expression(self) -> ExpressionNode:
        return self._expression

    def unparse(self, level: int = 0) -> str:
        return (f"{self.get_indentation(level)}{self._variable.unparse(level)} = "
                f"{self._expression.unparse(level)}")

    def children(self) -> List[ASTNode]:
        return [self._variable, self._expression]


class ReturnStmt(Statement):
    """Return statement."""
    node_type = ASTNodeType.RETURN_STMT

    def __init__(self, expression: ExpressionNode):
        self._expression = expression

    @property
    def expression(self) -> ExpressionNode:
        return self._expression

    def unparse(self, level: int = 0) -> str:
        return f"{self.get_indentation(level)}return {self._expression.unparse(level)}"

    def children(self) -> List[ASTNode]:
        return [self._expression]


class BlockStmt(Statement):
    """
    Block statement.

    The block's scope maps statement labels to the statements it contains;
    the statements are rendered in the scope's insertion order, one level
    deeper than the braces.
    """
    node_type = ASTNodeType.BLOCK_STMT

    def __init__(self, scope: 'SymbolTable[str, Statement]'):
        self._scope = scope

    @property
    def scope(self) -> 'SymbolTable[str, Statement]':
        return self._scope

    def statements(self) -> List[Statement]:
        return list(self._scope.values())

    def unparse(self, level: int = 0) -> str:
        indent = self.get_indentation(level)
        lines = [f"{indent}{{"]
        for stmt in self._scope.values():
            lines.append(stmt.unparse(level + 1))
        lines.append(f"{indent}}}")
        return "\n".join(lines)

    def children(self) -> List[ASTNode]:
        return self.statements()
