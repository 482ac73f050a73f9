"""Pure-function easing schedules for use inside ``jax.jit``.

All schedules follow the signature ``schedule(step) -> value`` and are
compatible with JIT compilation and ``jax.vmap`` (no Python-side state).

Usage::

    from easer.schedule import ease_schedule

    schedule = ease_schedule("cubic_out", start=1.0, end=0.01, steps=10_000)
    lr = schedule(step)          # works inside @jax.jit
"""

from __future__ import annotations

import jax.numpy as jnp

from easer.curves import Curve, get_curve
from easer.progression import eased_value
from easer.types import DTypeLike, Schedule, Step


def ease_schedule(
    curve: Curve | str,
    start: float,
    end: float,
    steps: Step,
    dtype: DTypeLike = jnp.float32,
) -> Schedule:
    """Return a pure function that eases from *start* to *end* along *curve*.

    The returned callable maps ``step -> value`` and is safe to use
    inside ``jax.jit``.

    Parameters
    ----------
    curve:
        Catalog curve or its name.
    start:
        Value at step 0.
    end:
        Value at step *steps*.
    steps:
        Number of steps over which to interpolate.  Steps outside
        ``[0, steps]`` are not clamped, and ``steps=0`` divides by zero.
    dtype:
        JAX floating dtype of the result.

    Returns
    -------
    A callable ``(step: int | Array) -> Array``.
    """
    if isinstance(curve, str):
        curve = get_curve(curve)
    if not jnp.issubdtype(dtype, jnp.floating):
        raise TypeError(f"Schedule dtype must be floating point, got {dtype}")
    _start = jnp.asarray(start, dtype=dtype)
    _distance = jnp.asarray(end, dtype=dtype) - _start
    _steps = jnp.asarray(steps, dtype=dtype)

    def _schedule(step: Step) -> jnp.ndarray:
        return eased_value(curve.shape, _start, _distance, step, _steps, dtype)

    return _schedule
