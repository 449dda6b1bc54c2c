"""
Test suite for the MiniLang lexer.

Tests cover:
- Token equality and textual form
- Integer, float, identifier and keyword scanning
- Operator, assignment and bracket scanning
- Whitespace handling
- Error detection and reporting
"""

import os
import sys
import tempfile
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilang.lexer.lexer import Lexer, LexResult, tokenize_string, tokenize_file
from minilang.lexer.tokens import Token, TokenType, SourceLocation
from minilang.lexer.errors import InvalidInputError, LexerError


class TestToken(unittest.TestCase):
    """Test cases for the token value type."""

    def test_str_format(self):
        token = Token(TokenType.VARIABLE, "test")
        self.assertEqual(str(token), "(test, VARIABLE)")

    def test_equal_when_text_and_type_match(self):
        self.assertEqual(Token(TokenType.INTEGER, "42"), Token(TokenType.INTEGER, "42"))

    def test_location_does_not_affect_equality(self):
        first = Token(TokenType.INTEGER, "42", SourceLocation("a", 1, 1, 0))
        second = Token(TokenType.INTEGER, "42", SourceLocation("b", 3, 7, 19))
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))

    def test_not_equal_on_different_text(self):
        self.assertNotEqual(Token(TokenType.INTEGER, "42"), Token(TokenType.INTEGER, "43"))

    def test_not_equal_on_different_type(self):
        self.assertNotEqual(Token(TokenType.INTEGER, "42"), Token(TokenType.FLOAT, "42"))

    def test_not_equal_to_other_objects(self):
        token = Token(TokenType.INTEGER, "42")
        self.assertNotEqual(token, "42")
        self.assertNotEqual(token, None)

    def test_is_immutable(self):
        token = Token(TokenType.INTEGER, "42")
        with self.assertRaises(AttributeError):
            token.text = "43"

    def test_predicates(self):
        self.assertTrue(Token(TokenType.FLOAT, "1.5").is_literal)
        self.assertTrue(Token(TokenType.OPERATOR, "**").is_operator)
        self.assertTrue(Token(TokenType.LEFT_CURLY, "{").is_bracket)
        self.assertFalse(Token(TokenType.VARIABLE, "x").is_literal)


class TestLexer(unittest.TestCase):
    """Test cases for tokenizing valid input."""

    def _tokenize(self, source: str):
        return tokenize_string(source)

    def _texts(self, source: str):
        return [token.text for token in self._tokenize(source)]

    def _types(self, source: str):
        return [token.type for token in self._tokenize(source)]

    def test_empty_source(self):
        self.assertEqual(self._tokenize(""), [])
        self.assertEqual(self._tokenize("   \t "), [])

    def test_single_integers(self):
        for source in ["0", "42", "999", "100000", "007"]:
            with self.subTest(source=source):
                self.assertEqual(self._tokenize(source), [Token(TokenType.INTEGER, source)])

    def test_multiple_integers(self):
        tokens = self._tokenize("42 100 999")
        self.assertEqual([t.text for t in tokens], ["42", "100", "999"])
        self.assertTrue(all(t.type == TokenType.INTEGER for t in tokens))

    def test_single_floats(self):
        for source in ["0.0", "3.14", "42.5", "0.999"]:
            with self.subTest(source=source):
                self.assertEqual(self._tokenize(source), [Token(TokenType.FLOAT, source)])

    def test_trailing_decimal_point_is_float(self):
        self.assertEqual(self._tokenize("42."), [Token(TokenType.FLOAT, "42.")])

    def test_float_followed_by_operator(self):
        self.assertEqual(self._texts("42.+1"), ["42.", "+", "1"])

    def test_second_decimal_point_is_rejected(self):
        with self.assertRaises(InvalidInputError):
            self._tokenize("1.2.3")

    def test_variables(self):
        for source in ["x", "abc", "MyVariable"]:
            with self.subTest(source=source):
                self.assertEqual(self._tokenize(source), [Token(TokenType.VARIABLE, source)])

    def test_identifier_stops_at_digit(self):
        self.assertEqual(
            self._tokenize("var123"),
            [Token(TokenType.VARIABLE, "var"), Token(TokenType.INTEGER, "123")]
        )

    def test_underscore_is_not_part_of_identifier(self):
        with self.assertRaises(InvalidInputError):
            self._tokenize("_var")

    def test_return_keyword(self):
        self.assertEqual(self._tokenize("return"), [Token(TokenType.RETURN, "return")])

    def test_return_keyword_is_case_sensitive(self):
        for source in ["Return", "RETURN", "reTurn"]:
            with self.subTest(source=source):
                self.assertEqual(self._tokenize(source), [Token(TokenType.VARIABLE, source)])

    def test_return_prefix_is_variable(self):
        self.assertEqual(self._tokenize("returns"), [Token(TokenType.VARIABLE, "returns")])

    def test_return_statement(self):
        self.assertEqual(self._types("return x"), [TokenType.RETURN, TokenType.VARIABLE])

    def test_single_character_operators(self):
        for source in ["+", "-", "*", "/", "%"]:
            with self.subTest(source=source):
                self.assertEqual(self._tokenize(source), [Token(TokenType.OPERATOR, source)])

    def test_two_character_operators(self):
        for source in ["//", "**"]:
            with self.subTest(source=source):
                self.assertEqual(self._tokenize(source), [Token(TokenType.OPERATOR, source)])

    def test_only_double_slash_and_star_are_combined(self):
        self.assertEqual(self._texts("++"), ["+", "+"])
        self.assertEqual(self._texts("--"), ["-", "-"])
        self.assertEqual(self._texts("%%"), ["%", "%"])

    def test_two_character_match_is_greedy(self):
        self.assertEqual(self._texts("***"), ["**", "*"])
        self.assertEqual(self._texts("///"), ["//", "/"])

    def test_all_operators_in_expression(self):
        tokens = self._tokenize("a + b - c * d / e // f % g ** h")
        self.assertEqual(len(tokens), 15)
        operators = [t.text for t in tokens if t.type == TokenType.OPERATOR]
        self.assertEqual(operators, ["+", "-", "*", "/", "//", "%", "**"])

    def test_assignment(self):
        self.assertEqual(self._tokenize(":="), [Token(TokenType.ASSIGNMENT, ":=")])

    def test_assignment_statement(self):
        self.assertEqual(
            self._types("x := 10"),
            [TokenType.VARIABLE, TokenType.ASSIGNMENT, TokenType.INTEGER]
        )

    def test_brackets(self):
        expected = {
            "(": TokenType.LEFT_PAREN,
            ")": TokenType.RIGHT_PAREN,
            "{": TokenType.LEFT_CURLY,
            "}": TokenType.RIGHT_CURLY,
        }
        for source, token_type in expected.items():
            with self.subTest(source=source):
                self.assertEqual(self._tokenize(source), [Token(token_type, source)])

    def test_code_block_without_spaces(self):
        self.assertEqual(
            self._types("{x+42}"),
            [TokenType.LEFT_CURLY, TokenType.VARIABLE, TokenType.OPERATOR,
             TokenType.INTEGER, TokenType.RIGHT_CURLY]
        )

    def test_mixed_expression(self):
        self.assertEqual(
            self._types("x+3.14+2*y"),
            [TokenType.VARIABLE, TokenType.OPERATOR, TokenType.FLOAT, TokenType.OPERATOR,
             TokenType.INTEGER, TokenType.OPERATOR, TokenType.VARIABLE]
        )

    def test_whitespace_is_ignored(self):
        self.assertEqual(self._texts("   42"), ["42"])
        self.assertEqual(self._texts("42   "), ["42"])
        self.assertEqual(self._texts("42\t+\t100"), ["42", "+", "100"])
        self.assertEqual(self._texts("42+100"), ["42", "+", "100"])

    def test_multiline_block(self):
        source = "{\n    x := 10\n    return x\n}"
        self.assertEqual(self._texts(source), ["{", "x", ":=", "10", "return", "x", "}"])

    def test_locations_are_tracked(self):
        tokens = self._tokenize("x\n  := 5")
        self.assertEqual(tokens[1].location.line, 2)
        self.assertEqual(tokens[1].location.column, 3)
        self.assertEqual(tokens[2].location.offset, 7)

    def test_lexer_can_be_reused(self):
        lexer = Lexer("a + b")
        self.assertEqual(lexer.tokenize(), lexer.tokenize())

    def test_tokenize_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".ml", delete=False, encoding="utf-8") as f:
            f.write("y := y ** 2\n")
            path = f.name
        try:
            tokens = tokenize_file(path)
        finally:
            os.remove(path)
        self.assertEqual([t.text for t in tokens], ["y", ":=", "y", "**", "2"])
        self.assertEqual(tokens[0].location.filename, path)


class TestLexerErrors(unittest.TestCase):
    """Test cases for rejected input."""

    def test_lone_colon(self):
        with self.assertRaises(InvalidInputError) as ctx:
            tokenize_string(":")
        self.assertEqual(ctx.exception.character, ":")
        self.assertEqual(ctx.exception.diagnostic.code, "L002")

    def test_colon_followed_by_other_character(self):
        with self.assertRaises(InvalidInputError):
            tokenize_string("x : 5")

    def test_bare_decimal_point(self):
        with self.assertRaises(InvalidInputError) as ctx:
            tokenize_string(".5")
        self.assertEqual(ctx.exception.character, ".")

    def test_unknown_characters(self):
        for source in ["$", "x = 5", "a & b", "[1]", "é"]:
            with self.subTest(source=source):
                with self.assertRaises(InvalidInputError):
                    tokenize_string(source)

    def test_error_identifies_character_and_location(self):
        with self.assertRaises(InvalidInputError) as ctx:
            tokenize_string("x := 4 $ 2", filename="prog.ml")
        error = ctx.exception
        self.assertEqual(error.character, "$")
        self.assertIn("'$'", error.message)
        self.assertIn("U+0024", error.message)
        self.assertEqual(str(error.location), "prog.ml:1:8")
        self.assertIn("ERROR:", str(error))

    def test_error_is_lexer_error(self):
        with self.assertRaises(LexerError):
            tokenize_string("#")

    def test_equals_sign_suggests_assignment(self):
        with self.assertRaises(InvalidInputError) as ctx:
            tokenize_string("x = 1")
        self.assertEqual(ctx.exception.diagnostic.suggestions, [":="])

    def test_try_tokenize_success(self):
        result = Lexer("1 + 2").try_tokenize()
        self.assertIsInstance(result, LexResult)
        self.assertFalse(result.has_errors())
        self.assertEqual(len(result.tokens), 3)

    def test_try_tokenize_failure_has_no_partial_tokens(self):
        result = Lexer("1 + 2 ?").try_tokenize()
        self.assertTrue(result.has_errors())
        self.assertIsInstance(result.error, InvalidInputError)
        self.assertEqual(result.tokens, [])


if __name__ == '__main__':
    unittest.main()
