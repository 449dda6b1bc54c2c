"""
Node builders for MiniLang.

A parser asks a NodeFactory for nodes instead of instantiating them, so the
strategy can be swapped without touching call sites:

- DefaultBuilder constructs the real nodes.
- TracingBuilder prints a line describing every request, then delegates to
  a DefaultBuilder.
- NullBuilder constructs nothing and returns None from every operation.
"""

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, TextIO, Union

from ..containers.symbol_table import SymbolTable
from .ast_nodes import (
    ExpressionNode, LiteralNode, VariableNode, PlusNode, MinusNode, TimesNode,
    FloatDivNode, IntDivNode, ModulusNode, ExponentiationNode, BinaryOperator,
    Statement, AssignmentStmt, ReturnStmt, BlockStmt, BINARY_OPERATOR_NODES,
)
from .errors import create_unsupported_literal_error


class NodeFactory(ABC):
    """Capability set every builder strategy implements."""

    @abstractmethod
    def create_plus_node(self, left: ExpressionNode, right: ExpressionNode) -> Optional[PlusNode]:
        pass

    @abstractmethod
    def create_minus_node(self, left: ExpressionNode, right: ExpressionNode) -> Optional[MinusNode]:
        pass

    @abstractmethod
    def create_times_node(self, left: ExpressionNode, right: ExpressionNode) -> Optional[TimesNode]:
        pass

    @abstractmethod
    def create_float_div_node(self, left: ExpressionNode, right: ExpressionNode) -> Optional[FloatDivNode]:
        pass

    @abstractmethod
    def create_int_div_node(self, left: ExpressionNode, right: ExpressionNode) -> Optional[IntDivNode]:
        pass

    @abstractmethod
    def create_modulus_node(self, left: ExpressionNode, right: ExpressionNode) -> Optional[ModulusNode]:
        pass

    @abstractmethod
    def create_exponentiation_node(self, left: ExpressionNode,
                                   right: ExpressionNode) -> Optional[ExponentiationNode]:
        pass

    @abstractmethod
    def create_literal_node(self, value: Any) -> Optional[LiteralNode]:
        pass

    @abstractmethod
    def create_variable_node(self, name: str) -> Optional[VariableNode]:
        pass

    @abstractmethod
    def create_assignment_stmt(self, variable: VariableNode,
                               expression: ExpressionNode) -> Optional[AssignmentStmt]:
        pass

    @abstractmethod
    def create_return_stmt(self, expression: ExpressionNode) -> Optional[ReturnStmt]:
        pass

    @abstractmethod
    def create_block_stmt(self, scope: SymbolTable[str, Statement]) -> Optional[BlockStmt]:
        pass

    def create_binary_node(self, symbol: str, left: ExpressionNode,
                           right: ExpressionNode) -> Optional[BinaryOperator]:
        """
        Create the binary node for an operator lexeme such as "+" or "//".

        Dispatches to the matching create_* operation so every strategy
        handles it the same way as a direct call.

        Raises:
            KeyError: If the symbol is not a MiniLang operator
        """
        creators = {
            PlusNode.symbol: self.create_plus_node,
            MinusNode.symbol: self.create_minus_node,
            TimesNode.symbol: self.create_times_node,
            FloatDivNode.symbol: self.create_float_div_node,
            IntDivNode.symbol: self.create_int_div_node,
            ModulusNode.symbol: self.create_modulus_node,
            ExponentiationNode.symbol: self.create_exponentiation_node,
        }
        if symbol not in BINARY_OPERATOR_NODES:
            raise KeyError(f"Unknown binary operator: {symbol!r}")
        return creators[symbol](left, right)


class DefaultBuilder(NodeFactory):
    """Builder that creates the actual AST nodes."""

    def create_plus_node(self, left, right):
        return PlusNode(left, right)

    def create_minus_node(self, left, right):
        return MinusNode(left, right)

    def create_times_node(self, left, right):
        return TimesNode(left, right)

    def create_float_div_node(self, left, right):
        return FloatDivNode(left, right)

    def create_int_div_node(self, left, right):
        return IntDivNode(left, right)

    def create_modulus_node(self, left, right):
        return ModulusNode(left, right)

    def create_exponentiation_node(self, left, right):
        return ExponentiationNode(left, right)

    def create_literal_node(self, value):
        # bool is an int subclass but not a MiniLang literal
        if isinstance(value, bool) or not isinstance(value, int):
            raise create_unsupported_literal_error(value)
        return LiteralNode(value)

    def create_variable_node(self, name):
        return VariableNode(name)

    def create_assignment_stmt(self, variable, expression):
        return AssignmentStmt(variable, expression)

    def create_return_stmt(self, expression):
        return ReturnStmt(expression)

    def create_block_stmt(self, scope):
        return BlockStmt(scope)


class TracingBuilder(NodeFactory):
    """
    Builder that reports every node it is asked for.

    Each call prints one line to the output stream and then delegates to
    the wrapped builder, so the returned nodes are exactly what the wrapped
    builder produces.
    """

    def __init__(self, stream: Optional[TextIO] = None, delegate: Optional[NodeFactory] = None):
        """
        Args:
            stream: Where trace lines go; sys.stdout (looked up per call) when None
            delegate: Builder doing the construction; a DefaultBuilder when None
        """
        self.stream = stream
        self.delegate = delegate if delegate is not None else DefaultBuilder()

    def _trace(self, message: str):
        print(message, file=self.stream if self.stream is not None else sys.stdout)

    def _trace_binary(self, kind: str, left: ExpressionNode, right: ExpressionNode):
        self._trace(f"Creating {kind} with left: {left.unparse()} and right: {right.unparse()}")

    def create_plus_node(self, left, right):
        self._trace_binary("PlusNode", left, right)
        return self.delegate.create_plus_node(left, right)

    def create_minus_node(self, left, right):
        self._trace_binary("MinusNode", left, right)
        return self.delegate.create_minus_node(left, right)

    def create_times_node(self, left, right):
        self._trace_binary("TimesNode", left, right)
        return self.delegate.create_times_node(left, right)

    def create_float_div_node(self, left, right):
        self._trace_binary("FloatDivNode", left, right)
        return self.delegate.create_float_div_node(left, right)

    def create_int_div_node(self, left, right):
        self._trace_binary("IntDivNode", left, right)
        return self.delegate.create_int_div_node(left, right)

    def create_modulus_node(self, left, right):
        self._trace_binary("ModulusNode", left, right)
        return self.delegate.create_modulus_node(left, right)

    def create_exponentiation_node(self, left, right):
        self._trace_binary("ExponentiationNode", left, right)
        return self.delegate.create_exponentiation_node(left, right)

    def create_literal_node(self, value):
        self._trace(f"Creating LiteralNode with value: {value}")
        return self.delegate.create_literal_node(value)

    def create_variable_node(self, name):
        self._trace(f"Creating VariableNode with name: {name}")
        return self.delegate.create_variable_node(name)

    def create_assignment_stmt(self, variable, expression):
        self._trace(f"Creating AssignmentStmt with variable: {variable.unparse()} "
                    f"and expression: {expression.unparse()}")
        return self.delegate.create_assignment_stmt(variable, expression)

    def create_return_stmt(self, expression):
        self._trace(f"Creating ReturnStmt with expression: {expression.unparse()}")
        return self.delegate.create_return_stmt(expression)

    def create_block_stmt(self, scope):
        self._trace(f"Creating BlockStmt with symbol table: {scope!r}")
        return self.delegate.create_block_stmt(scope)


class NullBuilder(NodeFactory):
    """Builder that returns None for every creation call, without validation."""

    def create_plus_node(self, left, right):
        return None

    def create_minus_node(self, left, right):
        return None

    def create_times_node(self, left, right):
        return None

    def create_float_div_node(self, left, right):
        return None

    def create_int_div_node(self, left, right):
        return None

    def create_modulus_node(self, left, right):
        return None

    def create_exponentiation_node(self, left, right):
        return None

    def create_literal_node(self, value):
        return None

    def create_variable_node(self, name):
        return None

    def create_assignment_stmt(self, variable, expression):
        return None

    def create_return_stmt(self, expression):
        return None

    def create_block_stmt(self, scope):
        return None

    def create_binary_node(self, symbol, left, right):
        return None


class BuilderKind(Enum):
    """Available builder strategies."""
    DEFAULT = "default"
    TRACING = "tracing"
    NULL = "null"


_BUILDERS = {
    BuilderKind.DEFAULT: DefaultBuilder,
    BuilderKind.TRACING: TracingBuilder,
    BuilderKind.NULL: NullBuilder,
}


def create_builder(kind: Union[BuilderKind, str] = BuilderKind.DEFAULT, **options) -> NodeFactory:
    """
    Create a builder strategy by kind.

    Args:
        kind: A BuilderKind or its value ("default", "tracing", "null")
        **options: Passed to the builder constructor (e.g. stream= for tracing)

    Raises:
        ValueError: If kind names no builder
    """
    builder_kind = BuilderKind(kind)
    return _BUILDERS[builder_kind](**options)
