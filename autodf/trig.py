r"""@package autodf.trig

Trigonometric functions of expressions.

Each expression here wraps one or two sub-expressions and applies the chain
rule to compute its partial derivatives. Values outside the domain of a
function (e.g. `asin` of numbers larger than one) lead to `nan` results
instead of exceptions.
"""

import numpy as np

from .numexpr import NumericExpression


__all__ = [
    "SinExpression",
    "CosExpression",
    "AsinExpression",
    "Atan2Expression",
    "Sin",
    "Cos",
    "Asin",
    "Atan2",
]


class SinExpression(NumericExpression):
    r"""Sine of an expression, \f$ f = \sin(g) \f$."""
    def __init__(self, expr, name='sin'):
        super(SinExpression, self).__init__(e=expr, name=name)

    def _eval(self, x):
        return np.sin(self.e._eval(x))

    def _diff(self, x, index):
        e = self.e
        return e._diff(x, index) * np.cos(e._eval(x))


class CosExpression(NumericExpression):
    r"""Cosine of an expression, \f$ f = \cos(g) \f$."""
    def __init__(self, expr, name='cos'):
        super(CosExpression, self).__init__(e=expr, name=name)

    def _eval(self, x):
        return np.cos(self.e._eval(x))

    def _diff(self, x, index):
        e = self.e
        return -e._diff(x, index) * np.sin(e._eval(x))


class AsinExpression(NumericExpression):
    r"""Inverse sine of an expression, \f$ f = \arcsin(g) \f$.

    The derivative is \f$ \partial_i g / \sqrt{1 - g^2} \f$, which diverges at
    \f$ g = \pm 1 \f$ and is `nan` outside \f$ [-1, 1] \f$.
    """
    def __init__(self, expr, name='asin'):
        super(AsinExpression, self).__init__(e=expr, name=name)

    def _eval(self, x):
        return np.arcsin(self.e._eval(x))

    def _diff(self, x, index):
        e = self.e
        ex = e._eval(x)
        return e._diff(x, index) / np.sqrt(1.0 - ex**2)


class Atan2Expression(NumericExpression):
    r"""Two-argument arctangent \f$ f = \mathrm{atan2}(y, x) \f$.

    Here, `y` and `x` are sub-expressions (not necessarily variables). With
    \f$ n = y^2 + x^2 \f$, the derivative is
    \f[
        \partial_i f = \frac{x\,\partial_i y - y\,\partial_i x}{n},
    \f]
    which is `nan` at the origin.
    """
    def __init__(self, y, x, name='atan2'):
        r"""Init function.

        Args:
            y:      Expression for the first argument (the "numerator").
            x:      Expression for the second argument.
            name:   Name of the expression (e.g. for traverse_tree()).
        """
        super(Atan2Expression, self).__init__(y=y, x=x, name=name)

    def _eval(self, x):
        return np.arctan2(self.y._eval(x), self.x._eval(x))

    def _diff(self, x, index):
        ey, ex = self.y, self.x
        yx = ey._eval(x)
        xx = ex._eval(x)
        n = yx**2 + xx**2
        return (xx * ey._diff(x, index) - yx * ex._diff(x, index)) / n


Sin = SinExpression
Cos = CosExpression
Asin = AsinExpression
Atan2 = Atan2Expression
