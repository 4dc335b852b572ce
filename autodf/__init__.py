r"""@package autodf

Expression system for exact first derivatives of scalar functions.

The idea is to have each expression represent either a leaf (a constant or
one element \f$ x_i \f$ of an input vector) or a composite expression of one
or more sub-expressions (like \f$ f_1 + f_2 \f$ or \f$ \sin(f_1) \f$).
By implementing the partial derivatives of each expression in terms of the
values and derivatives of its sub-expressions, exact derivatives of arbitrary
expression trees are computed in forward mode.

@b Examples

```
    >>> x, y = Variable(0), Variable(1)
    >>> f = (x - 1) * (x + 1) + (y - 1) * (y + 1)
    >>> f.evaluate([1.0, 0.0])
    -1.0
    >>> f.partial_derivative(0, [1.0, 0.0])
    2.0
```

Expressions are immutable. See numexpr.NumericExpression for the common
interface and the `ops` module for the functions used to build expressions.
"""

from .common import VariableIndexError
from .numexpr import NumericExpression, ExpressionWarning, isclose
from .evaluators import Evaluator
from .basics import ConstantExpression, VariableExpression, SumExpression
from .basics import DifferenceExpression, ProductExpression
from .basics import DivisionExpression, SqrtExpression
from .basics import Constant, Variable, Sum, Sub, Mul, Div, Sqrt
from .trig import SinExpression, CosExpression, AsinExpression, Atan2Expression
from .trig import Sin, Cos, Asin, Atan2
from .conditional import IfPositiveExpression, IfPositive
from .ops import add, sub, mul, div, neg, sin, cos, asin, sqrt, atan2
from .ops import if_positive, evaluate, partial_derivative, gradient
