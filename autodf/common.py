r"""@package autodf.common

Utils used by multiple modules in autodf.
"""

import numbers

import numpy as np


__all__ = [
    "VariableIndexError",
    "is_zero_function",
]


class VariableIndexError(IndexError):
    r"""Raised when an input vector is too short for an expression.

    An expression referencing the variable with index `i` requires input
    vectors of at least `i+1` elements. Vectors are never padded or
    truncated.
    """
    def __init__(self, required, supplied):
        super(VariableIndexError, self).__init__(
            "Input vector too short: expression needs at least %d values, "
            "got %d." % (required, supplied)
        )
        ## Minimum number of input values the expression needs.
        self.required = required
        ## Number of input values actually supplied.
        self.supplied = supplied


def _zero_function(max_index):
    r"""Create a constant function 0 for expressions up to `max_index`.

    This is used by evaluators to indicate the zero function, such that
    callers know a partial derivative vanishes for all inputs. Input vectors
    too short for the expression are still rejected.
    """
    def zero(x):
        _check_input_length(max_index, _as_input_vector(x))
        return 0.0
    zero.zero_function = True
    return zero


def is_zero_function(func):
    r"""Check whether a given function is the zero function.

    This checks for the marker set by _zero_function(), which evaluators
    use when they know a derivative vanishes identically.
    """
    return getattr(func, "zero_function", False)


def _max_index(*indices):
    r"""Maximum of variable indices, where `None` means 'no variable'."""
    indices = [i for i in indices if i is not None]
    if not indices:
        return None
    return max(indices)


def _as_input_vector(inputs):
    r"""Convert a sequence of input values to a 1-D float array."""
    x = np.asarray(inputs, dtype=float)
    if x.ndim != 1:
        raise ValueError("Input values must form a one-dimensional sequence "
                         "(got shape %s)." % (x.shape,))
    return x


def _check_input_length(max_index, x):
    r"""Raise a VariableIndexError if `x` cannot serve an expression."""
    if max_index is not None and len(x) <= max_index:
        raise VariableIndexError(required=max_index + 1, supplied=len(x))


def _check_variable_index(index):
    r"""Validate a variable index and return it as plain `int`."""
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise TypeError("Variable index must be an integer, got %r." % (index,))
    if index < 0:
        raise ValueError("Variable index must be non-negative, got %r." % (index,))
    return int(index)
