"""Shape functions: normalized progress ``x`` in, eased progress out.

Every shape maps 0 to 0 and 1 to 1 and is defined for all ``x`` in
``[0, 1]``.  Piecewise curves use ``where`` rather than ``if`` so the same
formula runs on NumPy scalars, NumPy arrays and traced JAX values.  Square
root arguments are floored at zero; the unselected branch of a ``where``
is still evaluated.

Multiply-adds are grouped as ``a * b + c`` in the order a fused
multiply-add would take them.
"""

from __future__ import annotations

import chex

from easer.numeric import array_namespace


def _half_pi(x: chex.Array) -> chex.Array:
    """pi/2 computed in the dtype of *x*, so ``longdouble`` keeps its precision."""
    xp = array_namespace(x)
    return xp.arccos(xp.zeros_like(x))


def linear(x: chex.Array) -> chex.Array:
    return x


def quad_in(x: chex.Array) -> chex.Array:
    return x * x


def quad_out(x: chex.Array) -> chex.Array:
    return -(x * (x - 2.0))


def quad_inout(x: chex.Array) -> chex.Array:
    xp = array_namespace(x)
    return xp.where(x < 0.5, 2.0 * x * x, -2.0 * x * x + (x * 4.0 - 1.0))


def cubic_in(x: chex.Array) -> chex.Array:
    return x * x * x


def cubic_out(x: chex.Array) -> chex.Array:
    y = x - 1.0
    return y * y * y + 1.0


def cubic_inout(x: chex.Array) -> chex.Array:
    xp = array_namespace(x)
    y = x * 2.0 - 2.0
    return xp.where(x < 0.5, 4.0 * x * x * x, (y * y * y) * 0.5 + 1.0)


def quartic_in(x: chex.Array) -> chex.Array:
    return x * x * x * x


def quartic_out(x: chex.Array) -> chex.Array:
    # (x - 1)^3 * (1 - x) + 1, i.e. 1 - (x - 1)^4
    y = x - 1.0
    return (y * y * y) * (1.0 - x) + 1.0


def quartic_inout(x: chex.Array) -> chex.Array:
    xp = array_namespace(x)
    y = x - 1.0
    return xp.where(x < 0.5, 8.0 * x * x * x * x, (y * y * y * y) * -8.0 + 1.0)


def sin_in(x: chex.Array) -> chex.Array:
    xp = array_namespace(x)
    return xp.sin((x - 1.0) * _half_pi(x)) + 1.0


def sin_out(x: chex.Array) -> chex.Array:
    xp = array_namespace(x)
    return xp.sin(x * _half_pi(x))


def sin_inout(x: chex.Array) -> chex.Array:
    """Circular arc pair meeting at ``x = 0.5``."""
    xp = array_namespace(x)
    lower = 0.5 * (1.0 - xp.sqrt(xp.maximum((x * x) * -4.0 + 1.0, 0.0)))
    upper = 0.5 * (xp.sqrt(xp.maximum((x * -2.0 + 3.0) * (x * 2.0 - 1.0), 0.0)) + 1.0)
    return xp.where(x < 0.5, lower, upper)


def exp_in(x: chex.Array) -> chex.Array:
    xp = array_namespace(x)
    return xp.where(x == 0.0, 0.0, xp.exp2(10.0 * (x - 1.0)))


def exp_out(x: chex.Array) -> chex.Array:
    xp = array_namespace(x)
    return xp.where(x == 1.0, 1.0, 1.0 - xp.exp2(-10.0 * x))


def exp_inout(x: chex.Array) -> chex.Array:
    xp = array_namespace(x)
    lower = xp.exp2(x * 20.0 - 10.0) * 0.5
    upper = xp.exp2(x * -20.0 + 10.0) * -0.5 + 1.0
    eased = xp.where(x < 0.5, lower, upper)
    return xp.where(x == 1.0, 1.0, xp.where(x == 0.0, 0.0, eased))
