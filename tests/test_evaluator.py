"""
Test suite for the Delta evaluator.

Author: xwest
"""

import math
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from delta.parser import compile_string, Assignment, Expression
from delta.evaluator import Evaluator, EvaluationError, Value, ValueKind, evaluate_string


def run(source):
    return [str(value) for value in evaluate_string(source)]


class Placeholder(Expression):
    """A node kind the evaluator has no rule for."""

    def children(self):
        return []

    def _format(self, *operands):
        return "?"


class TestArithmetic(unittest.TestCase):
    """Numeric operators."""

    def test_precedence(self):
        self.assertEqual(run("x = 2 + 3 * 4"), ["14"])

    def test_grouping(self):
        self.assertEqual(run("x = (2 + 3) * 4"), ["20"])

    def test_left_associative_subtraction(self):
        self.assertEqual(run("x = 10 - 4 - 3"), ["3"])

    def test_fractions(self):
        self.assertEqual(run("x = 7 / 2"), ["3.5"])

    def test_remainder(self):
        self.assertEqual(run("x = 7 % 3"), ["1"])

    def test_prefix_minus(self):
        self.assertEqual(run("a = 4; b = -a + 1"), ["4", "-3"])

    def test_division_by_zero(self):
        values = evaluate_string("x = 1 / 0; y = 0 / 0; z = 1 % 0")
        self.assertEqual(values[0].data, math.inf)
        self.assertTrue(math.isnan(values[1].data))
        self.assertTrue(math.isnan(values[2].data))
        self.assertEqual(str(values[0]), "inf")


class TestOtherKinds(unittest.TestCase):
    """Strings, booleans and names."""

    def test_string_concatenation(self):
        self.assertEqual(run('s = "a" + 1'), ["a1"])
        self.assertEqual(run('s = 2 + "b"'), ["2b"])
        self.assertEqual(run('s = "x" + true'), ["xtrue"])

    def test_logical_not(self):
        self.assertEqual(run("f = !true"), ["false"])

    def test_assignment_value_is_kept(self):
        evaluator = Evaluator()
        evaluator.evaluate(compile_string("x = 2"))
        values = evaluator.evaluate(compile_string("y = x * x"))
        self.assertEqual(values, [Value.numeric(4)])
        self.assertEqual(evaluator.environment["y"].kind, ValueKind.NUMERIC)

    def test_chained_assignment(self):
        evaluator = Evaluator()
        evaluator.evaluate(compile_string("a = b = 5"))
        self.assertEqual(evaluator.environment["a"], Value.numeric(5))
        self.assertEqual(evaluator.environment["b"], Value.numeric(5))

    def test_unbound_name(self):
        self.assertEqual(run("x = y"), ["UNDEFINED"])

    def test_shared_environment(self):
        environment = {"n": Value.numeric(10)}
        values = Evaluator(environment).evaluate(compile_string("m = n + 1"))
        self.assertEqual(str(values[0]), "11")
        self.assertIn("m", environment)


class TestEvaluationErrors(unittest.TestCase):
    """Operations the evaluator rejects."""

    def assertEvaluationError(self, source, code):
        with self.assertRaises(EvaluationError) as ctx:
            evaluate_string(source)
        self.assertEqual(ctx.exception.code, code)
        return ctx.exception

    def test_subtracting_a_string(self):
        error = self.assertEvaluationError('x = 1 - "a"', "E002")
        self.assertEqual(error.message, "Cannot apply operation '-' to Numeric and String")

    def test_adding_booleans(self):
        self.assertEvaluationError("x = true + false", "E002")

    def test_negating_a_string(self):
        self.assertEvaluationError('s = "a"; x = -s', "E002")

    def test_not_on_number(self):
        self.assertEvaluationError("x = !1", "E002")

    def test_comparison_is_unsupported(self):
        error = self.assertEvaluationError("x = 1 < 2", "E001")
        self.assertIn("'<'", error.message)

    def test_bitwise_not_is_unsupported(self):
        self.assertEvaluationError("x = ~1", "E001")

    def test_deep_expression(self):
        """A long chain is reported, not raised as RecursionError."""
        error = self.assertEvaluationError("x = " + " + ".join(["1"] * 5000), "E003")
        self.assertIn("nests too deeply", str(error))

    def test_deep_expression_leaves_evaluator_usable(self):
        evaluator = Evaluator()
        with self.assertRaises(EvaluationError):
            evaluator.evaluate(compile_string("x = " + " + ".join(["1"] * 5000)))
        self.assertEqual(evaluator.evaluate(compile_string("y = 2 * 3")), [Value.numeric(6)])

    def test_unrecognized_node(self):
        with self.assertRaises(EvaluationError) as ctx:
            Evaluator().evaluate([Assignment("x", Placeholder())])
        self.assertEqual(ctx.exception.code, "E004")
        self.assertIn("Placeholder", ctx.exception.message)


if __name__ == '__main__':
    unittest.main()
