"""
Test suite for the toylang lexer.

Tests cover:
- Operator and punctuation recognition, including two-character operators
- Identifier and keyword classification
- Integer/float boundaries
- String literals and the documented lexical gaps
- Source locations and determinism
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from toylang.lexer.lexer import Lexer, tokenize_string
from toylang.lexer.tokens import TokenType, Token, SourceLocation


class TestLexer(unittest.TestCase):
    """Test cases for the lexer."""

    def _types(self, source: str):
        return [token.type for token in tokenize_string(source)]

    def _pairs(self, source: str):
        return [(token.type, token.literal) for token in tokenize_string(source)]

    def test_single_character_tokens(self):
        """Test every single-character operator and delimiter."""
        self.assertEqual(
            self._types("+ - * / ( ) { } , ; . = ! < >"),
            [
                TokenType.PLUS, TokenType.MINUS, TokenType.MULTIPLY,
                TokenType.DIVIDE, TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
                TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE, TokenType.COMMA,
                TokenType.SEMICOLON, TokenType.DOT, TokenType.ASSIGN,
                TokenType.LOGICAL_NOT, TokenType.LESS_THAN,
                TokenType.GREATER_THAN, TokenType.EOF,
            ]
        )

    def test_two_character_operators(self):
        """Test one-character lookahead for compound operators."""
        self.assertEqual(
            self._pairs("== != <= >= && ||"),
            [
                (TokenType.EQUAL, "=="),
                (TokenType.NOT_EQUAL, "!="),
                (TokenType.LESS_EQUAL, "<="),
                (TokenType.GREATER_EQUAL, ">="),
                (TokenType.LOGICAL_AND, "&&"),
                (TokenType.LOGICAL_OR, "||"),
                (TokenType.EOF, ""),
            ]
        )

    def test_adjacent_operators_without_spaces(self):
        """Test that '=' followed by '=' and '=' alone are split correctly."""
        self.assertEqual(
            self._pairs("a==b=!c"),
            [
                (TokenType.IDENTIFIER, "a"),
                (TokenType.EQUAL, "=="),
                (TokenType.IDENTIFIER, "b"),
                (TokenType.ASSIGN, "="),
                (TokenType.LOGICAL_NOT, "!"),
                (TokenType.IDENTIFIER, "c"),
                (TokenType.EOF, ""),
            ]
        )

    def test_keywords_and_identifiers(self):
        """Test maximal-munch identifiers classified against the keyword table."""
        self.assertEqual(
            self._pairs("func var if else for return variable _tmp1 return2"),
            [
                (TokenType.FUNC, "func"),
                (TokenType.VAR, "var"),
                (TokenType.IF, "if"),
                (TokenType.ELSE, "else"),
                (TokenType.FOR, "for"),
                (TokenType.RETURN, "return"),
                (TokenType.IDENTIFIER, "variable"),
                (TokenType.IDENTIFIER, "_tmp1"),
                (TokenType.IDENTIFIER, "return2"),
                (TokenType.EOF, ""),
            ]
        )

    def test_integer_literal(self):
        """Test that plain digits lex as an integer."""
        self.assertEqual(self._pairs("10"), [(TokenType.INTEGER, "10"), (TokenType.EOF, "")])

    def test_float_literal(self):
        """Test that a dot followed by a digit promotes to float."""
        self.assertEqual(self._pairs("10.5"), [(TokenType.FLOAT, "10.5"), (TokenType.EOF, "")])

    def test_trailing_dot_is_not_part_of_number(self):
        """Test '10.' followed by a non-digit."""
        self.assertEqual(
            self._pairs("10.x"),
            [
                (TokenType.INTEGER, "10"),
                (TokenType.DOT, "."),
                (TokenType.IDENTIFIER, "x"),
                (TokenType.EOF, ""),
            ]
        )
        self.assertEqual(
            self._pairs("10."),
            [(TokenType.INTEGER, "10"), (TokenType.DOT, "."), (TokenType.EOF, "")]
        )

    def test_no_exponent_notation(self):
        """Test that exponents are not folded into numbers."""
        self.assertEqual(
            self._pairs("1e5"),
            [(TokenType.INTEGER, "1"), (TokenType.IDENTIFIER, "e5"), (TokenType.EOF, "")]
        )

    def test_string_literal(self):
        """Test string literal text excludes the quotes."""
        self.assertEqual(
            self._pairs('"hello world";'),
            [(TokenType.STRING, "hello world"), (TokenType.SEMICOLON, ";"), (TokenType.EOF, "")]
        )

    def test_string_has_no_escape_processing(self):
        """Test that backslashes are kept verbatim."""
        tokens = tokenize_string(r'"a\nb"')
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].literal, r"a\nb")

    def test_unterminated_string_runs_to_end(self):
        """Test that an unterminated string consumes the rest of the input."""
        lexer = Lexer('x = "abc; y')
        tokens = [lexer.next_token() for _ in range(4)]

        self.assertEqual(tokens[2].type, TokenType.STRING)
        self.assertEqual(tokens[2].literal, "abc; y")
        self.assertEqual(tokens[3].type, TokenType.EOF)
        self.assertTrue(lexer.has_warnings())
        self.assertEqual(lexer.warnings[0].code, "L002")

    def test_lone_ampersand_and_pipe_are_dropped(self):
        """Test that '&' and '|' alone produce no token."""
        lexer = Lexer("a & b | c")
        tokens = []
        while True:
            token = lexer.next_token()
            tokens.append((token.type, token.literal))
            if token.type == TokenType.EOF:
                break

        self.assertEqual(
            tokens,
            [
                (TokenType.IDENTIFIER, "a"),
                (TokenType.IDENTIFIER, "b"),
                (TokenType.IDENTIFIER, "c"),
                (TokenType.EOF, ""),
            ]
        )
        self.assertEqual([w.code for w in lexer.warnings], ["L001", "L001"])

    def test_unknown_character_is_illegal(self):
        """Test that unrecognized characters become ILLEGAL tokens."""
        self.assertEqual(
            self._pairs("a @ b"),
            [
                (TokenType.IDENTIFIER, "a"),
                (TokenType.ILLEGAL, "@"),
                (TokenType.IDENTIFIER, "b"),
                (TokenType.EOF, ""),
            ]
        )

    def test_non_ascii_letters_are_not_identifiers(self):
        """Test that identifier scanning is ASCII only."""
        self.assertEqual(self._types("é"), [TokenType.ILLEGAL, TokenType.EOF])

    def test_source_locations(self):
        """Test 1-based line and column tracking across lines."""
        tokens = tokenize_string("var x = 10;\n  return x;")
        positions = [(t.literal, t.line, t.column) for t in tokens]

        self.assertEqual(
            positions,
            [
                ("var", 1, 1), ("x", 1, 5), ("=", 1, 7), ("10", 1, 9), (";", 1, 11),
                ("return", 2, 3), ("x", 2, 10), (";", 2, 11), ("", 2, 12),
            ]
        )

    def test_location_carries_filename_and_offset(self):
        """Test that locations record the filename and character offset."""
        lexer = Lexer("a\nbc", filename="main.toy")
        lexer.next_token()
        token = lexer.next_token()

        self.assertEqual(token.location, SourceLocation("main.toy", 2, 1, 2))
        self.assertEqual(str(token.location), "main.toy:2:1")

    def test_eof_is_sticky(self):
        """Test that next_token keeps returning EOF after the input ends."""
        lexer = Lexer("x")
        lexer.next_token()
        for _ in range(3):
            self.assertEqual(lexer.next_token().type, TokenType.EOF)

    def test_empty_and_whitespace_input(self):
        """Test that blank input yields only EOF."""
        self.assertEqual(self._types(""), [TokenType.EOF])
        self.assertEqual(self._types(" \t\r\n "), [TokenType.EOF])

    def test_token_stream_is_deterministic(self):
        """Test that two independent lexers agree on the same input."""
        source = 'var total = add(1, 2.5) * -3 >= "s"; return total != x;'
        self.assertEqual(tokenize_string(source), tokenize_string(source))

    def test_token_predicates_and_str(self):
        """Test token helper properties and display form."""
        tokens = tokenize_string("var x = 42")

        self.assertTrue(tokens[0].is_keyword)
        self.assertTrue(tokens[1].is_identifier)
        self.assertTrue(tokens[2].is_operator)
        self.assertTrue(tokens[3].is_literal)
        self.assertFalse(tokens[3].is_keyword)
        self.assertEqual(str(tokens[3]), "Token(INT, '42', 1:9)")

    def test_tokens_are_immutable(self):
        """Test that tokens cannot be modified after creation."""
        token = Token(TokenType.IDENTIFIER, "x", SourceLocation("<input>", 1, 1, 0))
        with self.assertRaises(AttributeError):
            token.literal = "y"


if __name__ == '__main__':
    unittest.main()
