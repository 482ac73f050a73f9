"""Type aliases shared across easer.

Values are numpy scalars/arrays on the eager path and ``jax.Array`` under
``jax.jit``; ``chex.Array`` covers both.
"""

from __future__ import annotations

from collections.abc import Callable
from fractions import Fraction
from typing import TypeAlias, Union

import chex
import numpy as np

# ---------------------------------------------------------------------------
# Numeric roles
# ---------------------------------------------------------------------------
Value: TypeAlias = Union[float, np.floating, chex.Array]
Step: TypeAlias = Union[int, float, Fraction, np.integer, np.floating, chex.Array]
DTypeLike: TypeAlias = Union[np.dtype, type, str]

# ---------------------------------------------------------------------------
# Function signatures
# ---------------------------------------------------------------------------
Shape = Callable[[chex.Array], chex.Array]
Schedule = Callable[[Step], chex.Array]
