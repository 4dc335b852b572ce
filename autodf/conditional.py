r"""@package autodf.conditional

Branch selection expression.
"""

import warnings

import numpy as np

from .numexpr import NumericExpression, ExpressionWarning


__all__ = [
    "IfPositiveExpression",
    "IfPositive",
]


class IfPositiveExpression(NumericExpression):
    r"""Select one of two expressions based on the sign of a third.

    Represents the expression
    \f[
        f = \begin{cases}
            g & \text{if } c > 0 \\
            h & \text{otherwise.}
        \end{cases}
    \f]

    The partial derivatives are those of the selected branch. The jump at
    \f$ c = 0 \f$ does not contribute, i.e. the expression is treated as
    differentiable everywhere with the derivative of the currently active
    branch.

    A condition evaluating to `nan` selects the second branch and issues a
    numexpr.ExpressionWarning.
    """
    def __init__(self, cond, expr1, expr2, name='if_positive'):
        r"""Init function.

        Args:
            cond:   Expression whose sign selects the branch.
            expr1:  Expression used where `cond` is strictly positive.
            expr2:  Expression used elsewhere.
            name:   Name of the expression (e.g. for traverse_tree()).
        """
        super(IfPositiveExpression, self).__init__(
            cond=cond, e1=expr1, e2=expr2, name=name
        )

    def _branch(self, x):
        r"""Return the sub-expression selected at the input `x`."""
        c = self.cond._eval(x)
        if np.isnan(c):
            warnings.warn(
                "Condition of %r evaluated to nan; using second branch." % self,
                ExpressionWarning
            )
        return self.e1 if c > 0 else self.e2

    def _eval(self, x):
        return self._branch(x)._eval(x)

    def _diff(self, x, index):
        return self._branch(x)._diff(x, index)


IfPositive = IfPositiveExpression
