"""
tinyscript lexer - turns a source buffer into a list of tokens

Works directly on bytes. Each step skips whitespace and then tries a fixed,
ordered list of recognizers; the first one that matches wins. The order is
what makes "else if" beat "else", "<=" beat "<" and "+=" beat "+", so keep
it in sync with the lookup tables in tokens.py.
"""

import codecs
import logging
import re
from typing import Callable, List, Optional, Tuple, Union

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, COMPARISON_OPERATORS,
    ASSIGNMENT_OPERATORS, ARITHMETIC_OPERATORS, DELIMITERS, OPERATOR_PREFIXES,
    WHITESPACE, INT32_MAX, INT32_DIGITS
)
from .errors import (
    create_unterminated_string_error, create_truncated_operator_error,
    create_truncated_unicode_error, create_invalid_unicode_error,
    create_integer_overflow_error
)

logger = logging.getLogger(__name__)

OperatorTable = List[Tuple[bytes, TokenType]]


class Lexer:
    """
    tinyscript lexical analyzer.

    Holds a cursor over an immutable byte buffer. The cursor only moves
    forward; once ``generate_tokens`` has run to the end, calling it again
    returns an empty list.
    """

    def __init__(self, data: Union[bytes, bytearray, str], filename: str = "<unknown>"):
        """
        Initialize the lexer with a source buffer.

        Args:
            data: Whole file contents. ``str`` input is encoded as UTF-8.
            filename: Name of source file for locations and error reporting
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.data = bytes(data)
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1

        self._compile_patterns()

        # Priority order; the catch-all in next_token runs after all of these
        self._recognizers: List[Callable[[int], Optional[Token]]] = [
            self._match_file_end,
            self._match_string,
            self._match_delimiter,
            self._match_keyword,
            self._match_identifier,
            self._match_comment,
            self._match_comparison_operator,
            self._match_assignment_operator,
            self._match_arithmetic_operator,
            self._match_integer,
        ]

    def _compile_patterns(self):
        """Compile regex patterns and byte-level lookup tables."""
        self.whitespace_pattern = re.compile(rb'[' + re.escape(WHITESPACE) + rb']*')
        self.identifier_pattern = re.compile(rb'[A-Za-z][A-Za-z0-9_]*')
        self.identifier_char_pattern = re.compile(rb'[A-Za-z0-9_]')
        self.integer_pattern = re.compile(rb'[0-9]+')
        self.string_pattern = re.compile(rb'"([^"]*)"')
        self.comment_pattern = re.compile(rb'//[^\r\n]*')

        self.keywords = self._encode_table(KEYWORDS)
        self.comparison_operators = self._encode_table(COMPARISON_OPERATORS)
        self.assignment_operators = self._encode_table(ASSIGNMENT_OPERATORS)
        self.arithmetic_operators = self._encode_table(ARITHMETIC_OPERATORS)
        self.delimiters = self._encode_table(DELIMITERS)

    @staticmethod
    def _encode_table(table) -> OperatorTable:
        return [(text.encode("ascii"), token_type) for text, token_type in table.items()]

    @property
    def remaining(self) -> bytes:
        """Unconsumed part of the buffer."""
        return self.data[self.pos:]

    def generate_tokens(self) -> List[Token]:
        """
        Tokenize the rest of the buffer.

        Returns:
            List of tokens, without comments and without an EOF token

        Raises:
            IncompleteInputError: The input ends inside a lexeme
            MalformedInputError: The input can't be decoded or is out of range
        """
        tokens: List[Token] = []

        while True:
            token = self.next_token()

            if token.type == TokenType.EOF:
                logger.debug("Eof")
                break
            if token.type == TokenType.COMMENT:
                continue

            logger.debug("%s", token)
            tokens.append(token)

        return tokens

    def next_token(self) -> Token:
        """
        Recognize a single token at the cursor.

        Unlike generate_tokens, COMMENT and EOF tokens are returned as-is.
        """
        self._skip_whitespace()
        start = self.pos

        for recognize in self._recognizers:
            token = recognize(start)
            if token is not None:
                return token

        return self._match_any_char(start)

    # ------------------------------------------------------------------
    # Recognizers. Each one looks at the input from ``start`` on and either
    # returns None without moving the cursor, or consumes at least one byte
    # and returns the token.
    # ------------------------------------------------------------------

    def _match_file_end(self, start: int) -> Optional[Token]:
        if start < len(self.data):
            return None
        return self._emit(TokenType.EOF, start, start)

    def _match_string(self, start: int) -> Optional[Token]:
        if self.data[start:start + 1] != b'"':
            return None

        match = self.string_pattern.match(self.data, start)
        if not match:
            raise create_unterminated_string_error(self._location(start))

        content = match.group(1)
        try:
            value = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise create_invalid_unicode_error(content[e.start:e.end], self._location(start)) from e

        return self._emit(TokenType.STRING, start, match.end(), value)

    def _match_delimiter(self, start: int) -> Optional[Token]:
        return self._match_table(self.delimiters, start)

    def _match_keyword(self, start: int) -> Optional[Token]:
        for word, token_type in self.keywords:
            if not self.data.startswith(word, start):
                continue
            end = start + len(word)
            # "elsewhere" and "iffy" are identifiers
            if self.identifier_char_pattern.match(self.data, end):
                continue
            return self._emit(token_type, start, end)
        return None

    def _match_identifier(self, start: int) -> Optional[Token]:
        match = self.identifier_pattern.match(self.data, start)
        if not match:
            return None
        return self._emit(TokenType.IDENT, start, match.end(), match.group(0).decode("ascii"))

    def _match_comment(self, start: int) -> Optional[Token]:
        match = self.comment_pattern.match(self.data, start)
        if not match:
            return None
        return self._emit(TokenType.COMMENT, start, match.end())

    def _match_comparison_operator(self, start: int) -> Optional[Token]:
        return self._match_operator(self.comparison_operators, start)

    def _match_assignment_operator(self, start: int) -> Optional[Token]:
        return self._match_operator(self.assignment_operators, start)

    def _match_arithmetic_operator(self, start: int) -> Optional[Token]:
        return self._match_table(self.arithmetic_operators, start)

    def _match_integer(self, start: int) -> Optional[Token]:
        match = self.integer_pattern.match(self.data, start)
        if not match:
            return None

        lexeme = match.group(0).decode("ascii")
        significant = lexeme.lstrip("0") or "0"
        # Checked by length first so huge digit runs never reach int()
        if len(significant) > INT32_DIGITS or int(significant) > INT32_MAX:
            raise create_integer_overflow_error(lexeme, self._location(start))
        value = int(significant)

        return self._emit(TokenType.INTEGER, start, match.end(), value)

    def _match_any_char(self, start: int) -> Token:
        """Catch-all: one UTF-8 encoded character becomes a CHAR token."""
        lead = self.data[start]
        width = _utf8_width(lead)
        if width == 0:
            raise create_invalid_unicode_error(bytes([lead]), self._location(start))

        end = start + width
        chunk = self.data[start:end]

        if end > len(self.data):
            # Only a prefix that more bytes could still complete is truncated
            try:
                codecs.getincrementaldecoder("utf-8")().decode(chunk, final=False)
            except UnicodeDecodeError as e:
                raise create_invalid_unicode_error(chunk, self._location(start)) from e
            raise create_truncated_unicode_error(end - len(self.data), self._location(start))

        try:
            char = chunk.decode("utf-8")
        except UnicodeDecodeError as e:
            raise create_invalid_unicode_error(chunk, self._location(start)) from e

        return self._emit(TokenType.CHAR, start, end, char)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _match_table(self, table: OperatorTable, start: int) -> Optional[Token]:
        for text, token_type in table:
            if self.data.startswith(text, start):
                return self._emit(token_type, start, start + len(text))
        return None

    def _match_operator(self, table: OperatorTable, start: int) -> Optional[Token]:
        token = self._match_table(table, start)
        if token is not None:
            return token

        # A lone "=", "!" or ":" at the very end can only be half an operator
        rest = self.data[start:]
        if (len(rest) == 1 and rest.decode("ascii", errors="replace") in OPERATOR_PREFIXES
                and any(text.startswith(rest) for text, _ in table)):
            raise create_truncated_operator_error(rest.decode("ascii"), self._location(start))
        return None

    def _emit(self, token_type: TokenType, start: int, end: int, value=None) -> Token:
        """Build the token for data[start:end] and move the cursor past it."""
        location = self._location(start)
        lexeme = self.data[start:end].decode("utf-8", errors="replace")
        self._advance_to(end)
        return Token(token_type, value, lexeme, location)

    def _location(self, offset: int) -> SourceLocation:
        # Only valid for offsets on the current line at or after the cursor
        return SourceLocation(self.filename, self.line, self.column + (offset - self.pos), offset)

    def _skip_whitespace(self):
        match = self.whitespace_pattern.match(self.data, self.pos)
        self._advance_to(match.end())

    def _advance_to(self, end: int):
        """Move the cursor forward to ``end``, updating line/column."""
        if end <= self.pos:
            return
        segment = self.data[self.pos:end]
        newlines = segment.count(b"\n")
        if newlines:
            self.line += newlines
            self.column = end - (self.pos + segment.rindex(b"\n"))
        else:
            self.column += end - self.pos
        self.pos = end


def _utf8_width(lead: int) -> int:
    """Encoded length of a UTF-8 sequence from its first byte, 0 if invalid."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def tokenize_bytes(data: Union[bytes, bytearray], filename: str = "<bytes>") -> List[Token]:
    """
    Convenience function to tokenize a byte buffer.

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(data, filename).generate_tokens()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source.encode("utf-8"), filename).generate_tokens()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'rb') as f:
        data = f.read()

    return tokenize_bytes(data, filepath)
