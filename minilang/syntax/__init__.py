"""
MiniLang Syntax Package

AST node model with unparsing, and the builder strategies a parser uses to
construct nodes.

Key Features:
- Fully parenthesized expression unparsing
- Indented statement and block unparsing
- Swappable builders: default, tracing and null
"""

from .ast_nodes import *
from .builders import (
    NodeFactory, DefaultBuilder, TracingBuilder, NullBuilder, BuilderKind, create_builder,
)
from .errors import BuilderError, InvalidArgumentError

__all__ = [
    # AST nodes
    "ASTNode", "ASTNodeType", "ExpressionNode", "Statement",
    "LiteralNode", "VariableNode", "BinaryOperator",
    "PlusNode", "MinusNode", "TimesNode", "FloatDivNode",
    "IntDivNode", "ModulusNode", "ExponentiationNode",
    "AssignmentStmt", "ReturnStmt", "BlockStmt",
    "BINARY_OPERATOR_NODES", "INDENT_WIDTH",

    # Builders
    "NodeFactory", "DefaultBuilder", "TracingBuilder", "NullBuilder",
    "BuilderKind", "create_builder",

    # Error handling
    "BuilderError", "InvalidArgumentError",
]
