"""
Test suite for the Lox lexer.
"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxparse.lexer.lexer import Lexer, tokenize_string, tokenize_file
from loxparse.lexer.tokens import TokenType, STATEMENT_KEYWORDS
from loxparse.lexer.errors import LexerError


def types_of(source):
    return [token.type for token in Lexer(source).tokenize()]


class TestLexer(unittest.TestCase):
    """Token kinds, literal values and locations."""

    def test_operators(self):
        """Test one and two character operators."""
        self.assertEqual(types_of("! != = == < <= > >="), [
            TokenType.BANG, TokenType.BANG_EQUAL,
            TokenType.EQUAL, TokenType.EQUAL_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.EOF,
        ])

    def test_punctuation(self):
        self.assertEqual(types_of("(){},.-+;*/"), [
            TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
            TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS,
            TokenType.SEMICOLON, TokenType.STAR, TokenType.SLASH,
            TokenType.EOF,
        ])

    def test_numbers(self):
        """Test number literals and their float values."""
        tokens = Lexer("42 3.25 7.").tokenize()

        self.assertEqual([t.type for t in tokens], [
            TokenType.NUMBER, TokenType.NUMBER, TokenType.NUMBER,
            TokenType.DOT, TokenType.EOF,
        ])
        self.assertEqual(tokens[0].value, 42.0)
        self.assertIsInstance(tokens[0].value, float)
        self.assertEqual(tokens[1].value, 3.25)
        self.assertEqual(tokens[1].lexeme, "3.25")

    def test_strings(self):
        """Test string literals, including one spanning lines."""
        tokens = Lexer('"hello" "a\nb" 1').tokenize()

        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].value, "hello")
        self.assertEqual(tokens[0].lexeme, '"hello"')
        self.assertEqual(tokens[1].value, "a\nb")
        self.assertEqual(tokens[2].location.line, 2)

    def test_keywords_and_identifiers(self):
        self.assertEqual(types_of("true false nil and or foo _bar9"), [
            TokenType.TRUE, TokenType.FALSE, TokenType.NIL,
            TokenType.AND, TokenType.OR,
            TokenType.IDENTIFIER, TokenType.IDENTIFIER,
            TokenType.EOF,
        ])

    def test_statement_keywords(self):
        """Test that every recovery keyword scans to its own type."""
        types = types_of("class fun var for if while print return")
        self.assertEqual(set(types[:-1]), set(STATEMENT_KEYWORDS))

    def test_comments_and_locations(self):
        """Test that comments are skipped and lines/columns are tracked."""
        tokens = Lexer("// note\n  1 + 2 // trailing").tokenize()

        self.assertEqual([t.type for t in tokens], [
            TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER, TokenType.EOF,
        ])
        self.assertEqual(tokens[0].location.line, 2)
        self.assertEqual(tokens[0].location.column, 3)
        self.assertEqual(tokens[1].location.column, 5)

    def test_always_ends_with_eof(self):
        self.assertEqual(types_of(""), [TokenType.EOF])
        self.assertEqual(types_of("   \n\t "), [TokenType.EOF])

    def test_unexpected_character(self):
        """Test that bad characters are recorded and skipped."""
        lexer = Lexer("1 @ 2")
        tokens = lexer.tokenize()

        self.assertEqual([t.type for t in tokens],
                         [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF])
        self.assertTrue(lexer.has_errors())
        error = lexer.errors[0]
        self.assertEqual(error.diagnostic.code, "L001")
        self.assertEqual(error.message, "Unexpected character.")
        self.assertEqual(error.location.column, 3)

    def test_unterminated_string(self):
        lexer = Lexer('1 + "open')
        tokens = lexer.tokenize()

        self.assertEqual(tokens[-1].type, TokenType.EOF)
        self.assertEqual(len(lexer.errors), 1)
        self.assertEqual(lexer.errors[0].diagnostic.code, "L002")

    def test_non_ascii_digit_is_unexpected_character(self):
        """Test that a Unicode digit such as '²' is rejected, not converted."""
        lexer = Lexer("1 + ²")
        tokens = lexer.tokenize()

        self.assertEqual(len(lexer.errors), 1)
        self.assertEqual(lexer.errors[0].diagnostic.code, "L001")
        self.assertEqual([t.type for t in tokens],
                         [TokenType.NUMBER, TokenType.PLUS, TokenType.EOF])

    def test_digit_after_number_stops_at_non_ascii(self):
        lexer = Lexer("12٣")
        tokens = lexer.tokenize()

        self.assertEqual(tokens[0].value, 12.0)
        self.assertEqual(len(lexer.errors), 1)

    def test_identifiers_are_ascii_only(self):
        lexer = Lexer("é")
        tokens = lexer.tokenize()

        self.assertEqual(len(lexer.errors), 1)
        self.assertEqual(lexer.errors[0].diagnostic.code, "L001")
        self.assertEqual([t.type for t in tokens], [TokenType.EOF])

        lexer = Lexer("café")
        tokens = lexer.tokenize()
        self.assertEqual(tokens[0].type, TokenType.IDENTIFIER)
        self.assertEqual(tokens[0].lexeme, "caf")
        self.assertEqual(len(lexer.errors), 1)

    def test_tokenize_string_raises_first_error(self):
        with self.assertRaises(LexerError):
            tokenize_string("1 # 2")

    def test_tokenize_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "expr.lox")
            with open(path, "w", encoding="utf-8") as f:
                f.write("1 + 2\n")

            tokens = tokenize_file(path)

        self.assertEqual(len(tokens), 4)
        self.assertEqual(tokens[0].location.filename, path)


if __name__ == '__main__':
    unittest.main(verbosity=2)
