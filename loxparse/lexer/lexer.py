"""
Lox lexer - turns source text into the token sequence the parser consumes.

Scans the whole Lox token set (keywords included) even though the parser
only understands expressions, so embedders can feed it real programs and
let error recovery stop on statement keywords.
"""

import logging
from typing import List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS,
    EQUAL_SUFFIX_TOKENS
)
from .errors import (
    LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens terminated by EOF.
    Bad characters and unterminated strings are recorded in ``errors``
    and scanning continues after them.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including EOF token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens.clear()
        self.errors.clear()

        while self.pos < len(self.source):
            try:
                self._skip_whitespace_and_comments()

                if self.pos >= len(self.source):
                    break

                token = self._next_token()
                if token:
                    self.tokens.append(token)

            except LexerError as e:
                self.errors.append(e)
                # Recover by skipping the problematic character
                self._advance()

        eof_location = SourceLocation(self.filename, self.line, self.column, self.pos)
        self.tokens.append(Token(TokenType.EOF, "", None, eof_location))

        logger.debug("scanned %d tokens from %s (%d errors)",
                     len(self.tokens), self.filename, len(self.errors))
        return self.tokens

    def _next_token(self) -> Optional[Token]:
        """Get the next token from the source."""
        if self.pos >= len(self.source):
            return None

        start_pos = self.pos
        start_line = self.line
        start_column = self.column
        location = SourceLocation(self.filename, start_line, start_column, start_pos)

        current_char = self.source[self.pos]

        if self._is_digit(current_char):
            return self._tokenize_number(location)

        if self._is_identifier_start(current_char):
            return self._tokenize_identifier_or_keyword(location)

        if current_char == '"':
            return self._tokenize_string(location)

        if current_char in EQUAL_SUFFIX_TOKENS:
            with_equal, alone = EQUAL_SUFFIX_TOKENS[current_char]
            if self._peek() == '=':
                self._advance_by(2)
                return Token(with_equal, self.source[start_pos:self.pos], None, location)
            self._advance()
            return Token(alone, current_char, None, location)

        # '/' only reaches here when it does not start a comment
        if current_char == '/':
            self._advance()
            return Token(TokenType.SLASH, current_char, None, location)

        if current_char in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[current_char], current_char, None, location)

        raise create_unexpected_character_error(current_char, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize a number literal: digits with an optional fractional part."""
        start_pos = self.pos
        while self.pos < len(self.source) and self._is_digit(self.source[self.pos]):
            self._advance()

        # A trailing '.' without digits belongs to the next token
        if (self.pos < len(self.source) and self.source[self.pos] == '.'
                and self._is_digit(self._peek())):
            self._advance()
            while self.pos < len(self.source) and self._is_digit(self.source[self.pos]):
                self._advance()

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.NUMBER, lexeme, float(lexeme), location)

    def _tokenize_identifier_or_keyword(self, location: SourceLocation) -> Token:
        """Tokenize an identifier, promoting reserved words to keyword tokens."""
        start_pos = self.pos
        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        return Token(token_type, lexeme, None, location)

    def _tokenize_string(self, location: SourceLocation) -> Token:
        """Tokenize a string literal. Strings may span lines and have no escapes."""
        start_pos = self.pos
        self._advance()  # Skip opening quote

        while self.pos < len(self.source) and self.source[self.pos] != '"':
            self._advance()

        if self.pos >= len(self.source):
            raise create_unterminated_string_error(location)

        self._advance()  # Skip closing quote

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.STRING, lexeme, lexeme[1:-1], location)

    def _is_digit(self, char: str) -> bool:
        return "0" <= char <= "9"

    def _is_identifier_start(self, char: str) -> bool:
        """ASCII letters and underscore only; other letters are unexpected characters."""
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    def _is_identifier_continue(self, char: str) -> bool:
        return self._is_identifier_start(char) or self._is_digit(char)

    def _skip_whitespace_and_comments(self):
        """Skip whitespace (newlines included) and // comments."""
        while self.pos < len(self.source):
            if self.source[self.pos].isspace():
                self._advance()
                continue

            if self.source[self.pos:self.pos + 2] == '//':
                while self.pos < len(self.source) and self.source[self.pos] != '\n':
                    self._advance()
                continue

            break

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        for _ in range(count):
            self._advance()

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


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
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
