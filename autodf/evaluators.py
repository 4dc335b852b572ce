r"""@package autodf.evaluators

Callable evaluator objects for numexpr.NumericExpression objects.

An evaluator binds an expression and provides a function-like interface to
its value and partial derivatives. Since expressions are immutable, creating
an evaluator is cheap and no state is copied.
"""

import logging

from .common import _zero_function, _check_variable_index


__all__ = [
    "Evaluator",
]


logger = logging.getLogger(__name__)


class Evaluator(object):
    r"""Callable object evaluating an expression and its derivatives.

    Evaluators are callable, which evaluates the expression at an input
    vector and returns a float. The diff() method evaluates partial
    derivatives, gradient() all of them at once, and function() returns plain
    callables for the value or one of the partial derivatives.

    Each evaluator (and each callable created by function()) has a
    `max_variable_index` attribute, populated with the expression's
    value at initialization time.

    If the expression's `verbosity` is `2` or higher, each evaluation is
    logged at debug level using the `autodf.evaluators` logger. The setting
    is read on each call, so it may be changed after creating the evaluator.
    """
    def __init__(self, expr):
        r"""Create an evaluator for the given expression.

        @param expr
            The expression object for which this evaluator is created.
        """
        self._expr = expr
        ## Largest variable index the expression references (or `None`).
        self.max_variable_index = expr.max_variable_index

    def _verbose(self):
        return self._expr.verbosity >= 2

    @property
    def expr(self):
        r"""Expression this evaluator was created for."""
        return self._expr

    def __call__(self, x):
        r"""Evaluate the expression at an input vector x."""
        value = self._expr.evaluate(x)
        if self._verbose():
            logger.debug("%s at %s: %r", self._expr.name, x, value)
        return value

    def diff(self, x, index=0):
        r"""Evaluate the partial derivative w.r.t. variable `index` at x."""
        value = self._expr.partial_derivative(index, x)
        if self._verbose():
            logger.debug("d%s/dx%d at %s: %r", self._expr.name, index, x, value)
        return value

    def gradient(self, x):
        r"""Evaluate all partial derivatives at x (see NumericExpression.gradient())."""
        value = self._expr.gradient(x)
        if self._verbose():
            logger.debug("grad %s at %s: %s", self._expr.name, x, value)
        return value

    def is_zero_function(self, index):
        r"""Return whether the partial derivative w.r.t. `index` vanishes identically."""
        index = _check_variable_index(index)
        return index not in self._expr.variables()

    def function(self, index=None):
        r"""Return a callable for the value or a partial derivative.

        @param index
            `None` (default) to get a callable for the expression itself.
            Otherwise, the index of the variable to differentiate w.r.t. If
            the expression does not depend on that variable, a zero function
            is returned (see common.is_zero_function()). It still raises a
            common.VariableIndexError for input vectors that are too short.
        """
        if index is None:
            f = lambda x: self(x)
        elif self.is_zero_function(index):
            f = _zero_function(self.max_variable_index)
        else:
            f = lambda x: self.diff(x, index)
        f.max_variable_index = self.max_variable_index
        return f

