"""The curve catalog.

Each :class:`Curve` pairs a name with a shape from :mod:`easer.shapes`.
Calling a curve builds a sequential :class:`~easer.progression.Easer`;
:meth:`Curve.evaluate` computes one value at any step without state.

Usage::

    from easer import exp_in, get_curve

    list(exp_in(0.0, 10_000.0, 10))          # [19.53125, 39.0625, ..., 10000.0]
    exp_in.evaluate(0.0, 10_000.0, 10, 5)    # 312.5
    get_curve("sin_inout").evaluate(0.0, 1.0, 4, 2)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from easer import shapes
from easer.numeric import as_value, resolve_dtype
from easer.progression import Easer, eased_value
from easer.types import DTypeLike, Shape, Step, Value


@dataclass(frozen=True)
class Curve:
    """A named easing shape."""

    name: str
    shape: Shape

    def __call__(
        self,
        start: Value,
        end: Value,
        total_steps: Step,
        dtype: DTypeLike | None = None,
    ) -> Easer:
        return Easer(self, start, end, total_steps, dtype=dtype)

    def evaluate(
        self,
        start: Value,
        end: Value,
        total_steps: Step,
        step: Step,
        dtype: DTypeLike | None = None,
    ) -> Any:
        """Eased value at *step* of *total_steps*.

        No bounds check: steps past ``total_steps`` or below zero evaluate
        the shape outside ``[0, 1]``.  *step* may be a NumPy array, in
        which case an array of values is returned.
        """
        resolved = resolve_dtype(start, end, dtype=dtype)
        start = as_value(start, resolved)
        distance = as_value(end, resolved) - start
        return eased_value(self.shape, start, distance, step, total_steps, resolved)


# ---- Catalog ----

linear = Curve("linear", shapes.linear)
quad_in = Curve("quad_in", shapes.quad_in)
quad_out = Curve("quad_out", shapes.quad_out)
quad_inout = Curve("quad_inout", shapes.quad_inout)
cubic_in = Curve("cubic_in", shapes.cubic_in)
cubic_out = Curve("cubic_out", shapes.cubic_out)
cubic_inout = Curve("cubic_inout", shapes.cubic_inout)
quartic_in = Curve("quartic_in", shapes.quartic_in)
quartic_out = Curve("quartic_out", shapes.quartic_out)
quartic_inout = Curve("quartic_inout", shapes.quartic_inout)
sin_in = Curve("sin_in", shapes.sin_in)
sin_out = Curve("sin_out", shapes.sin_out)
sin_inout = Curve("sin_inout", shapes.sin_inout)
exp_in = Curve("exp_in", shapes.exp_in)
exp_out = Curve("exp_out", shapes.exp_out)
exp_inout = Curve("exp_inout", shapes.exp_inout)

CURVES: dict[str, Curve] = {
    c.name: c
    for c in (
        linear,
        quad_in,
        quad_out,
        quad_inout,
        cubic_in,
        cubic_out,
        cubic_inout,
        quartic_in,
        quartic_out,
        quartic_inout,
        sin_in,
        sin_out,
        sin_inout,
        exp_in,
        exp_out,
        exp_inout,
    )
}


def get_curve(name: str) -> Curve:
    """Look up a catalog curve by name."""
    if name not in CURVES:
        available = ", ".join(sorted(CURVES))
        raise KeyError(f"Unknown curve {name!r}. Available: {available}")
    return CURVES[name]


def evaluate(
    curve: Curve | str,
    start: Value,
    end: Value,
    total_steps: Step,
    step: Step,
    dtype: DTypeLike | None = None,
) -> Any:
    """Direct evaluation by curve object or catalog name."""
    if isinstance(curve, str):
        curve = get_curve(curve)
    return curve.evaluate(start, end, total_steps, step, dtype=dtype)
