"""
Error handling for the tinyscript lexer.

Every lexer failure aborts the whole run and is reported through one of two
exception types:

- ``IncompleteInputError``: the input ends in the middle of a lexeme
  (unterminated string, truncated operator, cut-off UTF-8 sequence).
- ``MalformedInputError``: the input cannot be matched or decoded at all
  (invalid UTF-8, integer literal out of range).

Both carry a ``Diagnostic`` with the source location, so a driver can show
the error to the user with ``str(error)``.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, INT32_MAX


@dataclass
class Diagnostic:
    """
    What went wrong and where. There is one per failed run, since the
    lexer stops at its first error.
    """
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Raised when no token can be recognized at the cursor.

    The run that raised it returns nothing: tokens recognized before the
    failure are discarded along with it.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class IncompleteInputError(LexerError):
    """
    The remaining input is a valid prefix of a longer lexeme.

    ``needed`` is the number of bytes missing to close it.
    """

    def __init__(self, needed: int, message: str, location: SourceLocation, **kwargs):
        super().__init__(message, location, **kwargs)
        self.needed = needed


class MalformedInputError(LexerError):
    """The input can't be matched or decoded, even as a single character."""

    def __init__(self, description: str, location: SourceLocation, **kwargs):
        super().__init__(description, location, **kwargs)
        self.description = description


# Common error codes for categorization
ERROR_CODES = {
    "L002": "Unterminated string literal",
    "L004": "Invalid Unicode sequence",
    "L007": "Number literal overflow",
    "L011": "Truncated operator",
}


# Helper functions for creating common errors
def create_unterminated_string_error(location: SourceLocation) -> IncompleteInputError:
    """Create an error for a string literal with no closing quote."""
    return IncompleteInputError(
        1,
        "Unterminated string literal",
        location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote'],
    )


def create_truncated_operator_error(prefix: str, location: SourceLocation) -> IncompleteInputError:
    """Create an error for input ending on the first half of an operator."""
    return IncompleteInputError(
        1,
        f"Input ends inside an operator starting with '{prefix}'",
        location,
        code="L011",
        help_text="Operators beginning with this character are two characters long.",
        suggestions=[f"Did you mean '{prefix}='?"],
    )


def create_truncated_unicode_error(needed: int, location: SourceLocation) -> IncompleteInputError:
    """Create an error for a UTF-8 sequence cut off by the end of input."""
    return IncompleteInputError(
        needed,
        f"Incomplete UTF-8 sequence, {needed} byte(s) missing",
        location,
        code="L004",
        help_text="The source file appears to be truncated.",
    )


def create_invalid_unicode_error(sequence: bytes, location: SourceLocation) -> MalformedInputError:
    """Create an error for bytes that are not valid UTF-8."""
    return MalformedInputError(
        f"Invalid UTF-8 sequence: {sequence!r}",
        location,
        code="L004",
        help_text="Source text must be valid UTF-8.",
        suggestions=["Check the file encoding"],
    )


def create_integer_overflow_error(lexeme: str, location: SourceLocation) -> MalformedInputError:
    """Create an error for an integer literal that doesn't fit in 32 bits."""
    if len(lexeme) > 24:
        lexeme = f"{lexeme[:20]}... ({len(lexeme)} digits)"
    return MalformedInputError(
        f"Integer literal out of range: '{lexeme}'",
        location,
        code="L007",
        help_text=f"Integer literals must not exceed {INT32_MAX}.",
    )
