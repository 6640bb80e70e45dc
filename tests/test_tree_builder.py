"""
Test suite for the Delta tree builder.

Tests cover:
- Building statement trees from postfix sequences
- The prefix/infix decision for '-'
- Every structural error the builder reports

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from delta.lexer import TokenType
from delta.parser import (
    TreeBuilder, ParseError, parse_string, compile_string, build_tree,
    Assignment, BinaryOp, UnaryOp, NumberLiteral, Identifier,
    BooleanLiteral, StringLiteral, ASTNodeType
)


def build_one(source):
    statements = parse_string(source)
    return TreeBuilder().build(statements[0])


class TestTreeBuilder(unittest.TestCase):
    """Successful builds."""

    def setUp(self):
        self.builder = TreeBuilder()

    def test_program_trees(self):
        """Two statements, the second starting with a prefix minus."""
        source = "z = 1 - 1 * 7 - 4 / 3\nl = -z + 7 - 2 + 1 / 3"
        trees = self.builder.build_all(parse_string(source))

        self.assertEqual(len(trees), 2)
        self.assertEqual(str(trees[0]), "z = ((1 - (1 * 7)) - (4 / 3))")
        self.assertEqual(str(trees[1]), "l = ((((-z) + 7) - 2) + (1 / 3))")

    def test_structural_equality(self):
        tree = build_one("z = 1 - 1 * 7 - 4 / 3")
        expected = Assignment(
            "z",
            BinaryOp(
                TokenType.MINUS,
                BinaryOp(
                    TokenType.MINUS,
                    NumberLiteral(1.0),
                    BinaryOp(TokenType.MULTIPLY, NumberLiteral(1.0), NumberLiteral(7.0)),
                ),
                BinaryOp(TokenType.DIVIDE, NumberLiteral(4.0), NumberLiteral(3.0)),
            ),
        )
        self.assertEqual(tree, expected)

    def test_prefix_minus_on_identifier(self):
        tree = build_one("x = -y")
        self.assertEqual(tree, Assignment("x", UnaryOp(TokenType.MINUS, Identifier("y"))))

    def test_prefix_minus_on_boolean(self):
        tree = build_one("x = -true")
        self.assertEqual(tree, Assignment("x", UnaryOp(TokenType.MINUS, BooleanLiteral(True))))

    def test_prefix_minus_over_prefix_expression(self):
        """'!a' is already on the stack when '-' is classified."""
        tree = build_one("x = -!a")
        self.assertEqual(
            tree,
            Assignment("x", UnaryOp(TokenType.MINUS,
                                    UnaryOp(TokenType.LOGICAL_NOT, Identifier("a"))))
        )

    def test_minus_after_string_is_subtraction(self):
        tree = build_one('x = "a" - b')
        self.assertEqual(
            tree,
            Assignment("x", BinaryOp(TokenType.MINUS, StringLiteral("a"), Identifier("b")))
        )

    def test_long_chain_renders(self):
        """Printing a long left-leaning chain does not recurse per level."""
        tree = build_one("x = " + " + ".join(["1"] * 5000))
        text = str(tree)
        self.assertTrue(text.startswith("x = " + "(" * 4999 + "1 + 1) + 1)"))
        self.assertEqual(text.count("+"), 4999)

    def test_minus_after_number_is_subtraction(self):
        tree = build_one("x = 5 - b")
        self.assertEqual(
            tree,
            Assignment("x", BinaryOp(TokenType.MINUS, NumberLiteral(5.0), Identifier("b")))
        )

    def test_logical_not(self):
        tree = build_one("x = !true")
        self.assertEqual(tree, Assignment("x", UnaryOp(TokenType.LOGICAL_NOT,
                                                       BooleanLiteral(True))))

    def test_chained_assignment(self):
        tree = build_one("a = b = 1")
        self.assertEqual(tree, Assignment("a", Assignment("b", NumberLiteral(1.0))))
        self.assertEqual(str(tree), "a = b = 1")

    def test_string_literal(self):
        tree = build_one('s = "say \\"hi\\"" + 1')
        self.assertEqual(tree.value.left, StringLiteral('say "hi"'))
        self.assertEqual(str(tree), 's = ("say \\"hi\\"" + 1)')

    def test_locations_do_not_affect_equality(self):
        first = compile_string("x = 1")[0]
        second = compile_string("\n\n   x  =  1")[0]
        self.assertEqual(first, second)
        self.assertNotEqual(first.location, second.location)

    def test_location_is_the_operator_token(self):
        tree = build_one("x = 1 + 2")
        self.assertEqual(tree.location.column, 2)
        self.assertEqual(tree.value.location.column, 6)

    def test_labels_and_children(self):
        tree = build_one("x = -y + 2")
        self.assertEqual(tree.node_type, ASTNodeType.ASSIGNMENT)
        self.assertEqual(tree.label, "Assignment x")
        product = tree.children()[0]
        self.assertEqual(product.label, "BinaryOp +")
        self.assertEqual([child.label for child in product.children()],
                         ["UnaryOp -", "NumberLiteral 2"])

    def test_build_all_skips_empty_statements(self):
        trees = compile_string("// header\na = 1\n\nb = 2;")
        self.assertEqual([str(tree) for tree in trees], ["a = 1", "b = 2"])

    def test_builder_is_reusable(self):
        statements = parse_string("a = 1; b = a + 1")
        self.assertEqual(self.builder.build_all(statements),
                         self.builder.build_all(statements))


class TestTreeBuilderErrors(unittest.TestCase):
    """Failed builds."""

    def assertParseError(self, source, code):
        with self.assertRaises(ParseError) as ctx:
            compile_string(source)
        self.assertEqual(ctx.exception.code, code)
        return ctx.exception

    def test_assign_to_number(self):
        error = self.assertParseError("1 = 2", "P003")
        self.assertIn("Cannot assign to non-identifier", error.message)

    def test_assign_to_expression(self):
        self.assertParseError("a + b = 1", "P003")

    def test_bare_expression_is_not_a_statement(self):
        error = self.assertParseError("1 + 1", "P006")
        self.assertIn("(1 + 1)", error.message)

    def test_long_bare_expression_is_not_a_statement(self):
        error = self.assertParseError(" + ".join(["1"] * 5000), "P006")
        self.assertTrue(error.message.startswith("Expression is not a statement: " + "(" * 4999))

    def test_bare_identifier_is_not_a_statement(self):
        self.assertParseError("x", "P006")

    def test_two_roots(self):
        error = self.assertParseError("x = a b", "P005")
        self.assertIn("found 2", error.message)

    def test_empty_sequence(self):
        with self.assertRaises(ParseError) as ctx:
            build_tree([])
        self.assertEqual(ctx.exception.code, "P005")
        self.assertIsNone(ctx.exception.location)

    def test_identifier_minus_identifier(self):
        """Every operand is unary-ready, so '-' is read as negation of b."""
        self.assertParseError("x = a - b", "P005")

    def test_negative_number_literal(self):
        """'-' after x is subtraction, which leaves '=' one operand short."""
        self.assertParseError("x = -3", "P002")

    def test_dangling_operator(self):
        """'+' folds x and 1 together, leaving nothing for '='."""
        error = self.assertParseError("x = 1 +", "P002")
        self.assertIn("'='", error.message)

    def test_prefix_without_operand(self):
        self.assertParseError("!", "P002")

    def test_undefined_token(self):
        error = self.assertParseError("x = @", "P004")
        self.assertEqual(error.token.type, TokenType.UNDEFINED)

    def test_reserved_keyword(self):
        error = self.assertParseError("x = let", "P004")
        self.assertIn("reserved", error.diagnostic.help_text)

    def test_punctuation(self):
        self.assertParseError("x = a , b", "P004")

    def test_unclosed_paren(self):
        error = self.assertParseError("(", "P004")
        self.assertEqual(error.token.type, TokenType.LEFT_PAREN)

    def test_first_error_aborts(self):
        """A bad first statement stops the build before later ones."""
        self.assertParseError("1 = 2\nx = @", "P003")

    def test_error_text(self):
        error = self.assertParseError("1 + 1", "P006")
        text = str(error)
        self.assertTrue(text.startswith("ERROR: Expression is not a statement"))
        self.assertIn("--> <string>:1:0", text)


if __name__ == '__main__':
    unittest.main()
