"""
tinyscript Package

Front end for tinyscript, a small imperative scripting language.

Architecture:
    tinyscript/
    ├── lexer/           # Tokenization and lexical analysis
    └── log.py           # Diagnostic logging setup

The parser, AST and built-ins consume the lexer's token list and live
outside this package.
"""

__version__ = "0.1.0"
__author__ = "tinyscript developers"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError
from .log import enable_logging, disable_logging

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",

    # Logging
    "enable_logging",
    "disable_logging",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
