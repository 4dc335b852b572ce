r"""@package autodf.ops

Functions for building and evaluating expressions.

The arithmetic operators `+`, `-`, `*`, `/` are directly available on
numexpr.NumericExpression objects. This module provides the same operations
as plain functions together with the elementary functions, e.g.:

~~~.py
x, y = Variable(0), Variable(1)
r = sqrt(x*x + y*y)
phi = atan2(y, x)
f = if_positive(x, r, -r)
~~~

Any argument may also be a real number, which is converted to a
basics.ConstantExpression. Every call creates a new expression; no
simplification takes place (e.g. `add(1, 2)` is a sum of two constants).
"""

import numbers

from .numexpr import _ensure_expr
from .basics import SumExpression, DifferenceExpression, ProductExpression
from .basics import DivisionExpression, SqrtExpression
from .trig import SinExpression, CosExpression, AsinExpression, Atan2Expression
from .conditional import IfPositiveExpression


__all__ = [
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "sin",
    "cos",
    "asin",
    "sqrt",
    "atan2",
    "if_positive",
    "evaluate",
    "partial_derivative",
    "gradient",
]


def add(a, b):
    r"""Return the expression `a + b`."""
    return SumExpression(_ensure_expr(a), _ensure_expr(b))


def sub(a, b):
    r"""Return the expression `a - b`."""
    return DifferenceExpression(_ensure_expr(a), _ensure_expr(b))


def mul(a, b):
    r"""Return the expression `a * b`."""
    return ProductExpression(_ensure_expr(a), _ensure_expr(b))


def div(a, b):
    r"""Return the expression `a / b`."""
    return DivisionExpression(_ensure_expr(a), _ensure_expr(b))


def neg(a):
    r"""Return the expression `0 - a`."""
    return DifferenceExpression(0.0, _ensure_expr(a), name='neg')


def sin(a):
    return SinExpression(_ensure_expr(a))


def cos(a):
    return CosExpression(_ensure_expr(a))


def asin(a):
    return AsinExpression(_ensure_expr(a))


def sqrt(a):
    return SqrtExpression(_ensure_expr(a))


def atan2(y, x):
    r"""Return the two-argument arctangent expression of `y` and `x`."""
    return Atan2Expression(_ensure_expr(y), _ensure_expr(x))


def if_positive(cond, a, b):
    r"""Select `a` where `cond > 0` and `b` elsewhere.

    If all three arguments are plain real numbers, the selected number is
    returned directly as `float` instead of an expression. In all other cases
    the result is a conditional.IfPositiveExpression.
    """
    if all(_is_number(v) for v in (cond, a, b)):
        return float(a) if cond > 0 else float(b)
    return IfPositiveExpression(_ensure_expr(cond), _ensure_expr(a),
                                _ensure_expr(b))


def evaluate(expr, inputs):
    r"""Evaluate an expression (or number) at the input vector."""
    return _ensure_expr(expr).evaluate(inputs)


def partial_derivative(expr, index, inputs):
    r"""Partial derivative of an expression w.r.t. the variable `index`."""
    return _ensure_expr(expr).partial_derivative(index, inputs)


def gradient(expr, inputs):
    r"""All partial derivatives of an expression at the input vector."""
    return _ensure_expr(expr).gradient(inputs)


def _is_number(v):
    return isinstance(v, numbers.Real) and not isinstance(v, bool)
