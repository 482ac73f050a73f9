"""Sequential progression through an easing curve.

:class:`Easer` is a lazy, one-directional, non-restartable walk from
``start`` to ``end`` in ``total_steps`` steps.  The first value produced is
at step 1, the last at step ``total_steps``; after that the walk is
exhausted for good.

Usage::

    from easer import quad_in

    walk = quad_in(0.0, 10_000.0, 10)
    walk.advance_by()      # 100.0
    walk.advance_by(2)     # 900.0 (skips step 2)
    list(walk)             # remaining values, steps 4..10
    walk.advance_by()      # None
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from easer.numeric import array_namespace, as_value, resolve_dtype, step_zero
from easer.types import DTypeLike, Shape, Step, Value

if TYPE_CHECKING:
    from easer.curves import Curve

logger = logging.getLogger(__name__)


def eased_value(
    shape: Shape,
    start: Value,
    distance: Value,
    step: Step,
    total_steps: Step,
    dtype: DTypeLike,
) -> Any:
    """Shared computation behind sequential and direct access.

    Both *step* and *total_steps* are promoted to *dtype* before dividing,
    then the shaped progress is rescaled as ``shape(x) * distance + start``.
    *start* and *distance* must already be in *dtype*; they also pick the
    array namespace, so JAX step counters feed a NumPy walk unchanged.
    """
    xp = array_namespace(start, distance)
    x = as_value(step, dtype, xp) / as_value(total_steps, dtype, xp)
    return as_value(shape(x) * distance + start, dtype, xp)


class Easer:
    """Stateful walk over one curve.

    Parameters
    ----------
    curve:
        Catalog entry whose shape drives the walk.
    start, end:
        Values at progress 0 and 1.  Converted to the value dtype once;
        ``distance = end - start`` is fixed from then on.
    total_steps:
        Number of steps across the transition, in any step type.  Not
        validated: zero or negative counts exhaust immediately.
    dtype:
        Floating value dtype.  Inferred from *start*/*end* when omitted.
    """

    def __init__(
        self,
        curve: Curve,
        start: Value,
        end: Value,
        total_steps: Step,
        dtype: DTypeLike | None = None,
    ) -> None:
        self.curve = curve
        self.dtype = resolve_dtype(start, end, dtype=dtype)
        self.start = as_value(start, self.dtype)
        self.distance = as_value(end, self.dtype) - self.start
        self.total_steps = total_steps
        self.current_step = step_zero(total_steps)
        logger.debug(
            "Created %s easer: start=%s distance=%s total_steps=%s dtype=%s",
            curve.name,
            self.start,
            self.distance,
            total_steps,
            self.dtype,
        )

    @property
    def exhausted(self) -> bool:
        return bool(self.current_step > self.total_steps)

    def advance_by(self, delta: Step = 1) -> Any | None:
        """Move *delta* steps forward and return the value there.

        Returns ``None`` once the step count passes ``total_steps``.
        """
        previous = self.current_step
        self.current_step += delta
        if self.current_step > self.total_steps:
            if not previous > self.total_steps:
                logger.debug(
                    "%s easer exhausted at step %s of %s",
                    self.curve.name,
                    self.current_step,
                    self.total_steps,
                )
            return None
        return eased_value(
            self.curve.shape,
            self.start,
            self.distance,
            self.current_step,
            self.total_steps,
            self.dtype,
        )

    def at(self, step: Step) -> Any:
        """Value at *step* with this walk's parameters; does not advance."""
        return eased_value(
            self.curve.shape,
            self.start,
            self.distance,
            step,
            self.total_steps,
            self.dtype,
        )

    def __iter__(self) -> Easer:
        return self

    def __next__(self) -> Any:
        value = self.advance_by()
        if value is None:
            raise StopIteration
        return value

    def __repr__(self) -> str:
        return (
            f"Easer({self.curve.name}, start={self.start}, "
            f"distance={self.distance}, step={self.current_step}/{self.total_steps})"
        )
