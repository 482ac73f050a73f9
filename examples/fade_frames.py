"""Ease an opacity fade over 30 frames, then a jitted learning-rate warmup."""

import jax
import jax.numpy as jnp

from easer import ease_schedule, setup_logging, sin_inout


def main() -> None:
    setup_logging()

    fade = sin_inout(0.0, 1.0, 30, dtype="float32")
    for frame, opacity in enumerate(fade, start=1):
        print(f"frame {frame:2d}: opacity={opacity:.3f}")

    warmup = jax.jit(jax.vmap(ease_schedule("quad_in", start=0.0, end=3e-4, steps=1_000)))
    lrs = warmup(jnp.arange(0, 1_001, 100))
    print("warmup lr:", [f"{float(lr):.2e}" for lr in lrs])


if __name__ == "__main__":
    main()
