r"""@package autodf.numexpr

Base of the NumericExpression system.

The idea is to have a notion of a numeric expression which is 'self aware'
and can produce exact partial derivatives of itself. Composite expressions are
built out of other, more basic expressions, and each of them implements its
value and its first partial derivatives in terms of the values and partial
derivatives of its sub-expressions (i.e. forward mode differentiation).

Expressions are functions of an input vector \f$ \mathbf{x} \f$. The leaves
of an expression tree are either constants or variables
\f$ x_i \f$ reading the `i`'th element of the input vector. An expression
knows the largest variable index it references, so that input vectors that
are too short are rejected before anything gets evaluated.

As a simple example, let's build
\f$ f(x, y) = (x - 1)(x + 1) + \sin(y) \f$ and compute
\f$ \partial_x f \f$ at \f$ (1, 0) \f$:

~~~.py
x, y = Variable(0), Variable(1)
f = (x - 1) * (x + 1) + sin(y)
print("f(1, 0) =", f.evaluate([1.0, 0.0]))
print("df/dx(1, 0) =", f.partial_derivative(0, [1.0, 0.0]))
~~~

Expressions are immutable once constructed. Sub-expressions may hence be
shared freely between different trees and evaluated from several threads at
once.
"""

from abc import ABCMeta, abstractmethod
import numbers

import numpy as np

from .common import _max_index, _as_input_vector, _check_input_length
from .common import _check_variable_index
from .evaluators import Evaluator


__all__ = [
    "NumericExpression",
    "ExpressionWarning",
    "isclose",
]


class ExpressionWarning(UserWarning):
    """Warning issued when expressions might not evaluate as expected."""
    pass


def isclose(a, b, rel_tol=None, abs_tol=None):
    r"""Test if two numbers agree within an absolute/relative tolerance.

    The default relative tolerance is `1e-9` and the absolute one `0.0`.
    """
    if rel_tol is None:
        rel_tol = 1e-9
    if abs_tol is None:
        abs_tol = 0.0
    return abs(a-b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)


def _ensure_expr(expr):
    """Ensure an object is an expression, converting it if necessary.

    Real numbers are converted to a `ConstantExpression`. Anything else raises
    a `TypeError`.
    """
    if isinstance(expr, NumericExpression):
        return expr
    if isinstance(expr, numbers.Real) and not isinstance(expr, bool):
        from .basics import ConstantExpression
        return ConstantExpression(expr)
    raise TypeError("Cannot use %r (of type %s) as expression."
                    % (expr, type(expr).__name__))


def _is_operand(obj):
    r"""Whether `obj` may take part in an arithmetic operation."""
    return (isinstance(obj, NumericExpression)
            or (isinstance(obj, numbers.Real) and not isinstance(obj, bool)))


class _ExpressionMeta(ABCMeta):
    r"""Metaclass freezing expression objects once they are constructed."""
    def __call__(cls, *args, **kwargs):
        obj = super(_ExpressionMeta, cls).__call__(*args, **kwargs)
        obj._freeze()
        return obj


class NumericExpression(object, metaclass=_ExpressionMeta):
    """Parent class for numeric expressions.

    Expressions can be evaluated at an input vector using evaluate() and
    differentiated w.r.t. one of the input variables using
    partial_derivative(). Both check that the input vector is long enough for
    all variables used in the expression and then delegate to the _eval() and
    _diff() methods implemented by child classes.

    The methods a child has to override are:
        * _eval(x) returning the value at the (validated) input array `x`
        * _diff(x, index) returning the partial derivative w.r.t. the
          variable with the given index

    Both methods are called inside a `numpy.errstate(all='ignore')` context,
    so that divisions by zero and functions evaluated outside their domain
    silently produce `inf` or `nan`.
    """

    # Make numpy defer binary operations to the reflected methods below.
    __array_ufunc__ = None

    ## Attributes that may still be set after construction.
    _mutable_attrs = frozenset([
        "name", "verbosity",
        "_NumericExpression__name", "_NumericExpression__verbosity",
    ])

    def __init__(self, name=None, verbosity=1, **sub_exprs):
        r"""Base class init for numeric expressions.

        The ``**sub_exprs`` sub expressions given as keyword arguments here
        are stored in this object and can be accessed as attributes with the
        keys used here. They are used when traversing through a complete
        expression hierarchy in e.g. traverse_tree().

        Args:
            name: (string, optional)
                Name for the expression. Can be useful to label expressions in
                a more complex expression tree to indicate their role/meaning.
                By default, the current class name is used as name.
            verbosity: (int, optional)
                Verbosity used by evaluators of this expression. At `2` or
                higher, every evaluation is logged at debug level. Default is
                `1`.
        """
        self.__frozen = False
        self.__verbosity = verbosity
        self.__name = name if name else self.__class__.__name__
        self.__sub_expressions = dict()
        self.__set_sub_exprs(**sub_exprs)
        self.__max_index = _max_index(*[
            e.max_variable_index for e in self.__sub_expressions.values()
        ])
        self.__variable_ids = frozenset().union(*[
            e._variable_ids() for e in self.__sub_expressions.values()
        ])

    def _freeze(self):
        r"""Disallow any further modification (called after construction)."""
        self.__frozen = True

    def __setattr__(self, attr, value):
        if (self.__dict__.get("_NumericExpression__frozen", False)
                and attr not in self._mutable_attrs):
            raise AttributeError("Cannot set %r: expressions are immutable."
                                 % attr)
        super(NumericExpression, self).__setattr__(attr, value)

    def __delattr__(self, attr):
        raise AttributeError("Cannot delete %r: expressions are immutable."
                             % attr)

    @property
    def name(self):
        r"""Name given to this instance of the expression."""
        return self.__name
    @name.setter
    def name(self, name):
        self.__name = name

    @property
    def verbosity(self):
        r"""Verbosity setting used by evaluators of this expression."""
        return self.__verbosity
    @verbosity.setter
    def verbosity(self, verbosity):
        self.__verbosity = verbosity

    @property
    def nice_name(self):
        r"""More descriptive name, which may be overridden by sub classes."""
        return self.__name

    @property
    def max_variable_index(self):
        r"""Largest variable index used in this expression (or `None`).

        Input vectors need at least `max_variable_index+1` elements. Leaf
        expressions override this.
        """
        return self.__max_index

    def sub_expressions(self):
        r"""Return the `(key, expr)` pairs of all direct sub-expressions."""
        return tuple(self.__sub_expressions.items())

    def traverse_tree(self, include_root=False, parents=None):
        r"""Generator that walks through a complete expression tree.

        In each iteration, the returned values represent the current node's
        parents (as a list from root to immediate parent), its key under which
        it is stored in its parent, and the node itself.

        Args:
            include_root: Whether to include the root as first item. Default
                is `False`.
            parents: Optional list of parents of the root. Normally only used
                internally for the recursion.

        @b Examples
        \code
            for parents, name, expr in root_expr.traverse_tree():
                print("-"*len(parents), name)
        \endcode
        """
        if parents is None:
            parents = []
        if include_root:
            yield parents, "", self
        parents = parents + [self]
        for name, expr in self.__sub_expressions.items():
            yield parents, name, expr
            for node in expr.traverse_tree(include_root=False,
                                           parents=parents):
                yield node

    def variables(self):
        r"""Sorted tuple of the distinct variable indices used."""
        return tuple(sorted(self._variable_ids()))

    def _variable_ids(self):
        r"""Set of variable indices used in this expression tree."""
        return self.__variable_ids

    def is_zero_expression(self):
        r"""Return whether this expression is zero and constant.

        Child classes should override this if they can determine whether
        they're zero. By default, all expressions will deny being zero.
        """
        return False

    def __repr__(self):
        r"""Return a short string naming the class and expression name."""
        return "<%s %r>" % (self.__class__.__name__, self.__name)

    def evaluate(self, inputs):
        r"""Evaluate the expression at the given input vector.

        Args:
            inputs: Sequence (list, tuple, or 1-D array) of input values.
                Needs to contain at least `max_variable_index+1` elements.

        @return The value as `float`.

        @raise common.VariableIndexError if `inputs` is too short.
        """
        x = self._prepare_inputs(inputs)
        with np.errstate(all='ignore'):
            return float(self._eval(x))

    def partial_derivative(self, index, inputs):
        r"""Evaluate the partial derivative w.r.t. one input variable.

        Args:
            index: Index of the variable to differentiate w.r.t. For indices
                of variables not used in this expression, the result is
                exactly zero, even where the tree's other derivatives are
                `inf` or `nan`.
            inputs: Sequence of input values (see evaluate()).

        @return The partial derivative as `float`.
        """
        index = _check_variable_index(index)
        x = self._prepare_inputs(inputs)
        if index not in self._variable_ids():
            return 0.0
        with np.errstate(all='ignore'):
            return float(self._diff(x, index))

    def gradient(self, inputs):
        r"""Evaluate all partial derivatives at the given input vector.

        The result has the same length as `inputs` (not just
        `max_variable_index+1`). Each element for a variable used in the
        expression is computed with a separate forward sweep through the
        expression tree. All other elements are zero.

        @return `numpy` array of partial derivatives.
        """
        x = self._prepare_inputs(inputs)
        result = np.zeros(len(x), dtype=float)
        with np.errstate(all='ignore'):
            for i in self._variable_ids():
                result[i] = self._diff(x, i)
        return result

    def _prepare_inputs(self, inputs):
        r"""Convert and validate the inputs prior to evaluation."""
        x = _as_input_vector(inputs)
        _check_input_length(self.max_variable_index, x)
        return x

    def evaluator(self):
        r"""Create a callable evaluator object for this expression."""
        return Evaluator(self)

    @abstractmethod
    def _eval(self, x):
        r"""Child classes need to implement this and return their value.

        `x` is a 1-D float array known to be long enough for this expression.
        """
        pass

    @abstractmethod
    def _diff(self, x, index):
        r"""Child classes need to implement this and return their derivative.

        `x` is as in _eval() and `index` is a non-negative `int`.
        """
        pass

    def __set_sub_exprs(self, **sub_exprs):
        r"""Store sub expressions under public attributes of this object.

        Each of the ``**sub_exprs`` keyword arguments will be stored on this
        object such that it is accessible via the key name used here as
        attribute name on the object.

        Numeric values given here will be converted to ConstantExpression
        objects.
        """
        sub_exprs = dict((k, _ensure_expr(e)) for k, e in sub_exprs.items())
        for k, e in sub_exprs.items():
            setattr(self, k, e)
        self.__sub_expressions.update(sub_exprs)

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from .basics import SumExpression
        return SumExpression(self, other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from .basics import SumExpression
        return SumExpression(other, self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from .basics import DifferenceExpression
        return DifferenceExpression(self, other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from .basics import DifferenceExpression
        return DifferenceExpression(other, self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from .basics import ProductExpression
        return ProductExpression(self, other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from .basics import ProductExpression
        return ProductExpression(other, self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from .basics import DivisionExpression
        return DivisionExpression(self, other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from .basics import DivisionExpression
        return DivisionExpression(other, self)

    def __neg__(self):
        from .basics import DifferenceExpression
        return DifferenceExpression(0.0, self, name='neg')

    def __pos__(self):
        return self

