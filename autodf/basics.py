r"""@package autodf.basics

Collection of basic numexpr.NumericExpression subclasses.

These are the leaves of expression trees (constants and variables) and the
four arithmetic operations. The short aliases (`Constant`, `Variable`, `Sum`,
`Sub`, `Mul`, `Div`, `Sqrt`) refer to the same classes.
"""

import numpy as np

from .common import _check_variable_index
from .numexpr import NumericExpression


__all__ = [
    "ConstantExpression",
    "VariableExpression",
    "SumExpression",
    "DifferenceExpression",
    "ProductExpression",
    "DivisionExpression",
    "SqrtExpression",
    "Constant",
    "Variable",
    "Sum",
    "Sub",
    "Mul",
    "Div",
    "Sqrt",
]


class ConstantExpression(NumericExpression):
    r"""Represent an expression that is a constant.

    Represents an expression of the form \f$ f(\mathbf{x}) = c \f$.

    The value of the constant can be accessed through the `c` property.
    Constants reference no variable and hence can be evaluated on any input
    vector, including an empty one.
    """

    def __init__(self, value=0.0, name='const'):
        r"""Init function.

        Args:
            value:  The constant value.
            name:   Name of the expression (e.g. for traverse_tree()).
        """
        super(ConstantExpression, self).__init__(name=name)
        # Kept as numpy scalar so that e.g. `1/0` yields `inf` instead of
        # raising.
        self.__c = np.float64(value)

    @property
    def c(self):
        r"""The constant value this expression represents."""
        return float(self.__c)

    @property
    def nice_name(self):
        return "%s (%r)" % (self.name, self.c)

    def is_zero_expression(self):
        return bool(self.__c == 0)

    def _eval(self, x):
        return self.__c

    def _diff(self, x, index):
        return np.float64(0.0)


class VariableExpression(NumericExpression):
    r"""Variable reading one element of the input vector.

    Represents an expression of the form \f$ f(\mathbf{x}) = x_i \f$.

    Two variables with the same `id` refer to the same input and evaluate
    identically.
    """
    def __init__(self, id=0, name=None):
        r"""Init function.

        Args:
            id:     Non-negative index of the input vector element.
            name:   Name of the expression. Default is ``'x<id>'``.
        """
        # pylint: disable=redefined-builtin
        id = _check_variable_index(id)
        super(VariableExpression, self).__init__(
            name=name if name else "x%d" % id
        )
        self.__id = id

    @property
    def id(self):
        r"""Index of the input vector element this variable reads."""
        return self.__id

    @property
    def max_variable_index(self):
        return self.__id

    def _variable_ids(self):
        return set([self.__id])

    def _eval(self, x):
        return x[self.__id]

    def _diff(self, x, index):
        return np.float64(1.0 if index == self.__id else 0.0)


class SumExpression(NumericExpression):
    r"""Sum of two expressions.

    Represents an expression of the form \f$ f = g + h \f$.
    """
    def __init__(self, expr1, expr2, name='add'):
        r"""Init function.

        Args:
            expr1:  First expression (or number).
            expr2:  Second expression (or number).
            name:   Name of the expression (e.g. for traverse_tree()).
        """
        super(SumExpression, self).__init__(e1=expr1, e2=expr2, name=name)

    @property
    def nice_name(self):
        return "%s (e1 + e2)" % self.name

    def _eval(self, x):
        return self.e1._eval(x) + self.e2._eval(x)

    def _diff(self, x, index):
        return self.e1._diff(x, index) + self.e2._diff(x, index)


class DifferenceExpression(NumericExpression):
    r"""Difference of two expressions.

    Represents an expression of the form \f$ f = g - h \f$. Unary negation of
    an expression is represented as \f$ 0 - h \f$.
    """
    def __init__(self, expr1, expr2, name='sub'):
        super(DifferenceExpression, self).__init__(e1=expr1, e2=expr2, name=name)

    @property
    def nice_name(self):
        return "%s (e1 - e2)" % self.name

    def _eval(self, x):
        return self.e1._eval(x) - self.e2._eval(x)

    def _diff(self, x, index):
        return self.e1._diff(x, index) - self.e2._diff(x, index)


class ProductExpression(NumericExpression):
    r"""Multiply two expressions.

    Represents an expression of the form \f$ f = g h \f$, with
    \f$ \partial_i f = (\partial_i g) h + (\partial_i h) g \f$.
    """
    def __init__(self, expr1, expr2, name='mult'):
        r"""Init function.

        Args:
            expr1:  First expression.
            expr2:  Second expression.
            name:   Name of the expression (e.g. for traverse_tree()).
        """
        super(ProductExpression, self).__init__(e1=expr1, e2=expr2, name=name)

    def _eval(self, x):
        return self.e1._eval(x) * self.e2._eval(x)

    def _diff(self, x, index):
        e1, e2 = self.e1, self.e2
        return e1._diff(x, index) * e2._eval(x) + e2._diff(x, index) * e1._eval(x)


class DivisionExpression(NumericExpression):
    r"""Divide one expression by another.

    Represents an expression of the form \f$ f = g / h \f$, with
    \f$ \partial_i f = ((\partial_i g) h - (\partial_i h) g) / h^2 \f$.

    Points where \f$ h = 0 \f$ are not treated specially. The results are the
    usual floating point `inf` or `nan` values.
    """
    def __init__(self, expr1, expr2, name='divide'):
        r"""Init function.

        Args:
            expr1:  Numerator expression.
            expr2:  Denominator expression.
            name:   Name of the expression (e.g. for traverse_tree()).
        """
        super(DivisionExpression, self).__init__(e1=expr1, e2=expr2, name=name)

    def _eval(self, x):
        return self.e1._eval(x) / self.e2._eval(x)

    def _diff(self, x, index):
        e1, e2 = self.e1, self.e2
        e1x = e1._eval(x)
        e2x = e2._eval(x)
        return (e1._diff(x, index) * e2x - e2._diff(x, index) * e1x) / e2x**2


class SqrtExpression(NumericExpression):
    r"""Square root of an expression.

    Represents \f$ f = \sqrt{g} \f$ with
    \f$ \partial_i f = \frac{1}{2} \partial_i g / \sqrt{g} \f$.

    For negative values of \f$ g \f$, value and derivative are `nan`.
    """
    def __init__(self, expr, name='sqrt'):
        super(SqrtExpression, self).__init__(e=expr, name=name)

    def _eval(self, x):
        return np.sqrt(self.e._eval(x))

    def _diff(self, x, index):
        e = self.e
        return 0.5 * e._diff(x, index) / np.sqrt(e._eval(x))


Constant = ConstantExpression
Variable = VariableExpression
Sum = SumExpression
Sub = DifferenceExpression
Mul = ProductExpression
Div = DivisionExpression
Sqrt = SqrtExpression
