"""
MiniLang Front-End Package

Front-end toolkit for a small expression/statement language: tokenizing,
AST construction through pluggable builders, unparsing, and scope-chained
symbol tables for block-level bindings.

Architecture:
    minilang/
    ├── lexer/           # Tokenization and lexical analysis
    ├── syntax/          # AST nodes, unparsing and node builders
    ├── containers/      # Scope-chained symbol table
    └── cli.py           # Token dump command (mlc)

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, tokenize_string
from .syntax import (
    NodeFactory, DefaultBuilder, TracingBuilder, NullBuilder, create_builder,
)
from .containers import SymbolTable

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "tokenize_string",
    "NodeFactory",
    "DefaultBuilder",
    "TracingBuilder",
    "NullBuilder",
    "create_builder",
    "SymbolTable",

    # Version info
    "__version__",
    "__license__",
]
