"""Numeric policy: value dtypes, step counters and array namespaces.

Two independent roles drive every curve:

* the **value dtype**, a floating dtype in which start, distance and the
  eased result live (``float16`` through ``longdouble`` on the NumPy path,
  any JAX floating dtype under ``jax.jit``);
* the **step type**, whatever the caller counts steps with (``int``,
  ``float``, ``Fraction``, NumPy scalars).  Steps are only converted to the
  value dtype at the moment progress is computed.

Division by a zero ``total_steps`` is not guarded: the result is whatever
the value dtype produces (``nan`` / ``inf``), and NumPy emits its usual
``RuntimeWarning``.
"""

from __future__ import annotations

from types import ModuleType
from typing import Any

import jax
import jax.numpy as jnp
import numpy as np

from easer.types import DTypeLike, Step

DEFAULT_DTYPE = np.dtype(np.float64)


def resolve_dtype(*values: Any, dtype: DTypeLike | None = None) -> np.dtype:
    """Pick the value dtype for *values*.

    An explicit *dtype* must be floating point, otherwise ``TypeError``.
    When omitted the dtype is inferred with :func:`numpy.result_type`; plain
    Python ints (or any non-floating result) fall back to ``float64``.
    """
    if dtype is None:
        inferred = np.result_type(*values)
        if not np.issubdtype(inferred, np.floating):
            return DEFAULT_DTYPE
        return inferred
    resolved = np.dtype(dtype)
    if not np.issubdtype(resolved, np.floating):
        raise TypeError(f"Value dtype must be floating point, got {resolved}")
    return resolved


def array_namespace(*arrays: Any) -> ModuleType:
    """Return ``jax.numpy`` if any argument is a JAX array, else ``numpy``."""
    if any(isinstance(a, jax.Array) for a in arrays):
        return jnp
    return np


def as_value(x: Any, dtype: DTypeLike, xp: ModuleType = np) -> Any:
    """Convert *x* to the value dtype in namespace *xp*.

    NumPy results are unwrapped to scalars when zero-dimensional so that
    scalar in means scalar out.
    """
    arr = xp.asarray(x, dtype=dtype)
    if xp is np:
        return arr[()]
    return arr


def step_zero(total_steps: Step) -> Step:
    """The zero value of *total_steps*'s own type.

    ``total_steps * 0`` keeps the type for Python numbers, ``Fraction``,
    NumPy scalars and JAX scalars alike.
    """
    return total_steps * 0
