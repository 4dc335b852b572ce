#!/usr/bin/env python3
r"""@package autodf.test_trig

Trigonometric expression test suite.
"""

import unittest
import math

import numpy as np

from testutils import ExprTestCase
from .basics import Variable, Constant
from .trig import SinExpression, CosExpression, AsinExpression, Atan2Expression


class TestSin(ExprTestCase):
    r"""Test the SinExpression class."""
    def test_at_zero(self):
        x = Variable(0)
        f = SinExpression(x)
        self.assertEqual(f.evaluate([0.0]), 0.0)
        self.assertEqual(f.partial_derivative(0, [0.0]), 1.0)
        self.assertEqual(f.partial_derivative(1, [0.0]), 0.0)
        self.assertEqual(f.max_variable_index, 0)

    def test_derivatives(self):
        x = Variable(0)
        f = SinExpression(2.0 * x)
        space = np.linspace(-3, 3, 10)
        self.assertListAlmostEqual([f.evaluate([t]) for t in space],
                                   [math.sin(2*t) for t in space], delta=1e-14)
        self.assertListAlmostEqual([f.partial_derivative(0, [t]) for t in space],
                                   [2*math.cos(2*t) for t in space], delta=1e-14)

    def test_product_argument(self):
        x, y = Variable(0), Variable(1)
        f = SinExpression(x * y)
        for a, b in [(0.3, 1.2), (-2.0, 0.5), (1.0, 0.0)]:
            self.assertAlmostEqual(f.partial_derivative(0, [a, b]), b*math.cos(a*b))
            self.assertAlmostEqual(f.partial_derivative(1, [a, b]), a*math.cos(a*b))


class TestCos(ExprTestCase):
    r"""Test the CosExpression class."""
    def test_derivatives(self):
        x = Variable(0)
        f = CosExpression(x)
        self.assertEqual(f.evaluate([0.0]), 1.0)
        self.assertAlmostEqual(f.partial_derivative(0, [math.pi/2]), -1.0)
        space = np.linspace(-3, 3, 10)
        f = CosExpression(x * x)
        self.assertListAlmostEqual([f.partial_derivative(0, [t]) for t in space],
                                   [-2*t*math.sin(t**2) for t in space], delta=1e-13)

    def test_pythagoras(self):
        x = Variable(0)
        f = SinExpression(x) * SinExpression(x) + CosExpression(x) * CosExpression(x)
        for t in np.linspace(-3, 3, 7):
            self.assertAlmostEqual(f.evaluate([t]), 1.0, delta=1e-14)
            self.assertAlmostEqual(f.partial_derivative(0, [t]), 0.0, delta=1e-14)


class TestAsin(ExprTestCase):
    r"""Test the AsinExpression class."""
    def test_values(self):
        x = Variable(0)
        f = AsinExpression(x)
        self.assertEqual(f.evaluate([0.0]), 0.0)
        self.assertAlmostEqual(f.evaluate([1.0]), math.pi/2)
        self.assertAlmostEqual(f.partial_derivative(0, [0.5]), 1/math.sqrt(0.75))
        self.assertEqual(f.partial_derivative(0, [0.0]), 1.0)

    def test_outside_domain(self):
        x = Variable(0)
        f = AsinExpression(x)
        self.assertIsNan(f.evaluate([2.0]))
        self.assertIsNan(f.partial_derivative(0, [2.0]))
        self.assertEqual(f.partial_derivative(0, [1.0]), math.inf)

    def test_inverse(self):
        x = Variable(0)
        f = AsinExpression(SinExpression(x))
        for t in np.linspace(-1.5, 1.5, 7):
            self.assertAlmostEqual(f.evaluate([t]), t, delta=1e-14)
            self.assertAlmostEqual(f.partial_derivative(0, [t]), 1.0, delta=1e-12)


class TestAtan2(ExprTestCase):
    r"""Test the Atan2Expression class."""
    def test_values(self):
        x, y = Variable(0), Variable(1)
        f = Atan2Expression(y, x)
        self.assertEqual(f.max_variable_index, 1)
        self.assertAlmostEqual(f.evaluate([1.0, 1.0]), math.pi/4)
        self.assertAlmostEqual(f.evaluate([-1.0, 0.0]), math.pi)
        self.assertAlmostEqual(f.evaluate([0.0, -2.0]), -math.pi/2)
        self.assertIs(f.y, y)
        self.assertIs(f.x, x)

    def test_derivatives(self):
        x, y = Variable(0), Variable(1)
        f = Atan2Expression(y, x)
        self.assertEqual(f.partial_derivative(0, [1.0, 1.0]), -0.5)
        self.assertEqual(f.partial_derivative(1, [1.0, 1.0]), 0.5)
        for a, b in [(0.3, 1.2), (-2.0, 0.5), (1.0, -4.0)]:
            n = a**2 + b**2
            self.assertAlmostEqual(f.partial_derivative(0, [a, b]), -b/n)
            self.assertAlmostEqual(f.partial_derivative(1, [a, b]), a/n)

    def test_origin(self):
        x, y = Variable(0), Variable(1)
        f = Atan2Expression(y, x)
        self.assertEqual(f.evaluate([0.0, 0.0]), 0.0)
        self.assertIsNan(f.partial_derivative(0, [0.0, 0.0]))
        self.assertIsNan(f.partial_derivative(1, [0.0, 0.0]))

    def test_composite_arguments(self):
        t = Variable(0)
        f = Atan2Expression(SinExpression(t), CosExpression(t))
        for v in np.linspace(-3, 3, 7):
            self.assertAlmostEqual(f.evaluate([v]), v, delta=1e-14)
            self.assertAlmostEqual(f.partial_derivative(0, [v]), 1.0, delta=1e-14)
        f = Atan2Expression(Constant(1.0), t)
        self.assertAlmostEqual(f.partial_derivative(0, [2.0]), -1/5.0)


if __name__ == '__main__':
    unittest.main()
