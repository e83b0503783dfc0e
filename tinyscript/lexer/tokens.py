"""
Token definitions for the tinyscript lexer.

This module defines the closed set of token types the lexer produces:
- Comparison, assignment and arithmetic operators
- Delimiters
- Keywords (including the two-word "else if")
- Literals (identifiers, 32-bit integers, strings)
- Meta tokens (comments and end of input, never handed to the parser)
- Single-character catch-all tokens
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in tinyscript.

    Organized by category, mirroring the lookup tables below.
    """

    # ========================================================================
    # Comparison operators
    # ========================================================================
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESSER = auto()                 # <
    LESSER_EQUAL = auto()           # <=

    # ========================================================================
    # Assignment operators
    # ========================================================================
    ASSIGN = auto()                 # :=
    ADD_ASSIGN = auto()             # +=
    SUB_ASSIGN = auto()             # -=
    MULT_ASSIGN = auto()            # *=
    DIV_ASSIGN = auto()             # /=

    # ========================================================================
    # Arithmetic operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    STAR = auto()                   # *
    SLASH = auto()                  # /
    PERCENT = auto()                # %

    # ========================================================================
    # Delimiters
    # ========================================================================
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )
    OPEN_BRACE = auto()             # {
    CLOSE_BRACE = auto()            # }
    OPEN_BRACKET = auto()           # [
    CLOSE_INDEX = auto()            # ]

    # ========================================================================
    # Keywords
    # ========================================================================
    IF = auto()                     # if
    ELSE_IF = auto()                # else if
    ELSE = auto()                   # else
    FOR = auto()                    # for
    WHILE = auto()                  # while

    # ========================================================================
    # Literals
    # ========================================================================
    IDENT = auto()                  # counter, num_rows_10
    INTEGER = auto()                # 457
    STRING = auto()                 # "Hello friend"

    # ========================================================================
    # Meta tokens (recognized, never emitted)
    # ========================================================================
    COMMENT = auto()                # // to end of line
    EOF = auto()                    # End of input

    # Anything else, one character at a time
    CHAR = auto()                   # @, #, é


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source buffer.

    Used for error reporting and debug output. Line and column are 1-based;
    the column counts bytes, like the offset.
    """
    filename: str
    line: int
    column: int
    offset: int  # Byte offset from start of buffer

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the tinyscript language.

    Only the token type and its payload take part in equality, so
    ``Token(TokenType.IDENT, "x")`` compares equal to an ``x`` identifier
    wherever it appeared in the source.
    """
    type: TokenType
    value: Any = None               # str for IDENT/STRING/CHAR, int for INTEGER
    lexeme: str = field(default="", compare=False)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERALS

    @property
    def is_keyword(self) -> bool:
        return self.type in KEYWORD_TYPES

    @property
    def is_comparison(self) -> bool:
        return self.type in COMPARISON_OPERATORS.values()

    @property
    def is_assignment(self) -> bool:
        return self.type in ASSIGNMENT_OPERATORS.values()

    @property
    def is_arithmetic(self) -> bool:
        return self.type in ARITHMETIC_OPERATORS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is any comparison, assignment or arithmetic operator."""
        return self.is_comparison or self.is_assignment or self.is_arithmetic

    @property
    def is_delimiter(self) -> bool:
        return self.type in DELIMITERS.values()


# Lookup tables used by the lexer. Insertion order is match order, so
# two-character operators sit ahead of their one-character prefixes and
# "else if" sits ahead of "else".

KEYWORDS: Dict[str, TokenType] = {
    "if": TokenType.IF,
    "else if": TokenType.ELSE_IF,
    "else": TokenType.ELSE,
    "for": TokenType.FOR,
    "while": TokenType.WHILE,
}

COMPARISON_OPERATORS: Dict[str, TokenType] = {
    "<=": TokenType.LESSER_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "==": TokenType.EQUAL,
    "<": TokenType.LESSER,
    ">": TokenType.GREATER,
}

ASSIGNMENT_OPERATORS: Dict[str, TokenType] = {
    ":=": TokenType.ASSIGN,
    "+=": TokenType.ADD_ASSIGN,
    "-=": TokenType.SUB_ASSIGN,
    "*=": TokenType.MULT_ASSIGN,
    "/=": TokenType.DIV_ASSIGN,
}

ARITHMETIC_OPERATORS: Dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
}

DELIMITERS: Dict[str, TokenType] = {
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
    "[": TokenType.OPEN_BRACKET,
    "]": TokenType.CLOSE_INDEX,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

LITERALS = frozenset({TokenType.IDENT, TokenType.INTEGER, TokenType.STRING})

# Characters that only ever start a two-character operator; input ending
# on one of these is a truncated lexeme rather than a stray character.
OPERATOR_PREFIXES = frozenset({"=", "!", ":"})

# Insignificant whitespace, never tokenized
WHITESPACE = b" \t\r\n"

# Integer literals are 32-bit signed and never carry a sign
INT32_MAX = 2 ** 31 - 1
INT32_DIGITS = len(str(INT32_MAX))
