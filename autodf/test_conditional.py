#!/usr/bin/env python3

import unittest
import warnings

import numpy as np

from testutils import ExprTestCase
from .numexpr import ExpressionWarning
from .basics import Variable, Constant, SqrtExpression
from .conditional import IfPositiveExpression
from .ops import if_positive


class TestIfPositive(ExprTestCase):
    def test_branches(self):
        x, y = Variable(0), Variable(1)
        f = IfPositiveExpression(x, y, 2.0 * y)
        self.assertEqual(f.evaluate([1.0, 3.0]), 3.0)
        self.assertEqual(f.evaluate([-1.0, 3.0]), 6.0)
        # Zero is not positive.
        self.assertEqual(f.evaluate([0.0, 3.0]), 6.0)
        self.assertEqual(f.evaluate([1e-300, 3.0]), 3.0)

    def test_derivatives(self):
        x, y = Variable(0), Variable(1)
        f = IfPositiveExpression(x, y, 2.0 * y)
        self.assertEqual(f.partial_derivative(1, [1.0, 3.0]), 1.0)
        self.assertEqual(f.partial_derivative(1, [-1.0, 3.0]), 2.0)
        # The jump at x=0 does not contribute.
        for a in (-1.0, 0.0, 1.0):
            self.assertEqual(f.partial_derivative(0, [a, 3.0]), 0.0)

    def test_abs(self):
        x = Variable(0)
        f = if_positive(x, x, -x)
        for t in np.linspace(-2, 2, 9):
            self.assertEqual(f.evaluate([t]), abs(t))
            self.assertEqual(f.partial_derivative(0, [t]), 1.0 if t > 0 else -1.0)

    def test_selection_property(self):
        rng = np.random.RandomState(42)
        x, y, z = Variable(0), Variable(1), Variable(2)
        cond = x * y - z
        a = x + z
        b = y * z
        f = IfPositiveExpression(cond, a, b)
        for _ in range(50):
            pt = rng.uniform(-1, 1, 3)
            expected = a if cond.evaluate(pt) > 0 else b
            self.assertEqual(f.evaluate(pt), expected.evaluate(pt))
            for i in range(3):
                self.assertEqual(f.partial_derivative(i, pt),
                                 expected.partial_derivative(i, pt))

    def test_max_index(self):
        f = IfPositiveExpression(Variable(0), Constant(1.0), Variable(4))
        self.assertEqual(f.max_variable_index, 4)
        f = IfPositiveExpression(Variable(5), Variable(1), 2.0)
        self.assertEqual(f.max_variable_index, 5)
        with self.assertRaises(IndexError):
            f.evaluate([1.0, 1.0])

    def test_scalar(self):
        self.assertEqual(if_positive(1.0, 2.0, 3.0), 2.0)
        self.assertEqual(if_positive(0.0, 2.0, 3.0), 3.0)
        self.assertEqual(if_positive(-1, 2, 3), 3.0)
        self.assertIsType(if_positive(1, 2, 3), float)
        self.assertIsType(if_positive(Constant(1.0), 2.0, 3.0), IfPositiveExpression)
        self.assertIsType(if_positive(1.0, Variable(0), 3.0), IfPositiveExpression)

    def test_nan_condition(self):
        x = Variable(0)
        f = IfPositiveExpression(SqrtExpression(x), 1.0, 2.0)
        with self.assertWarns(ExpressionWarning):
            self.assertEqual(f.evaluate([-1.0]), 2.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertEqual(f.evaluate([4.0]), 1.0)


if __name__ == '__main__':
    unittest.main()
