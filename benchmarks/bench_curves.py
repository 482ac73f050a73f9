"""Benchmark: eager NumPy evaluation vs a jit-compiled, vmapped schedule.

Evaluates every catalog curve over a grid of steps.

Usage::

    python benchmarks/bench_curves.py
"""

from __future__ import annotations

import time

import jax
import jax.numpy as jnp
import numpy as np

from easer import CURVES, ease_schedule

STEPS = 10_000


def _time_fn(fn, *args, warmup: int = 3, repeats: int = 50, **kwargs) -> float:
    """Time a function, returning seconds per call (excluding warmup)."""
    for _ in range(warmup):
        result = fn(*args, **kwargs)
        # Force completion for JAX async dispatch
        jax.tree.map(lambda x: x.block_until_ready() if hasattr(x, "block_until_ready") else x, result)

    start = time.perf_counter()
    for _ in range(repeats):
        result = fn(*args, **kwargs)
        jax.tree.map(lambda x: x.block_until_ready() if hasattr(x, "block_until_ready") else x, result)
    elapsed = time.perf_counter() - start
    return elapsed / repeats


def bench_curves() -> None:
    print("=" * 60)
    print(f"Curve evaluation over {STEPS} steps")
    print("=" * 60)

    np_steps = np.arange(STEPS + 1)
    jax_steps = jnp.arange(STEPS + 1)

    for name, curve in CURVES.items():
        t_numpy = _time_fn(curve.evaluate, 0.0, 1.0, STEPS, np_steps, dtype=np.float32)
        jitted = jax.jit(jax.vmap(ease_schedule(curve, 0.0, 1.0, STEPS)))
        t_jit = _time_fn(jitted, jax_steps)
        print(f"  {name:<14} numpy: {t_numpy * 1e6:8.1f} us | jit+vmap: {t_jit * 1e6:8.1f} us")


if __name__ == "__main__":
    bench_curves()
