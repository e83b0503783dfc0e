"""
tinyscript Lexer Package

Implements the lexical analyzer (tokenizer) for the tinyscript language.
Takes the whole source file as bytes and hands the parser a finished,
ordered list of tokens.

Key Features:
- Priority-ordered recognizers with longest-match operators
- Two-word "else if" keyword
- 32-bit signed integer literals
- Single-character catch-all, so any valid UTF-8 input tokenizes
- Source location tracking for error reporting
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_bytes, tokenize_string, tokenize_file
from .errors import LexerError, IncompleteInputError, MalformedInputError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",
    "IncompleteInputError",
    "MalformedInputError",
    "tokenize_bytes",
    "tokenize_string",
    "tokenize_file",
]
