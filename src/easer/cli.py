"""Command-line front end.

Walk a curve and print every value, or evaluate a single step::

    easer --curve quad_in --start 0 --end 10000 --steps 10
    easer --curve exp_out --steps 60 --step 15 --dtype float32
    easer --list-curves
    easer --curve sin_in --steps 4 --log-level info
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

import tyro

from easer.curves import CURVES, get_curve
from easer.log import LogLevel, setup_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EaseConfig:
    """Print eased values of one catalog curve."""

    # Curve
    curve: str = "linear"
    start: float = 0.0
    end: float = 1.0
    steps: int = 10

    # Value precision
    dtype: Literal["float16", "float32", "float64", "longdouble"] = "float64"

    # Output
    step: int | None = None  # evaluate this step only instead of walking
    precision: int | None = None  # round printed values
    list_curves: bool = False  # print catalog names and exit
    # Logging
    log_level: LogLevel = "warning"
    verbose: bool = False  # shorthand for --log-level debug


def run(config: EaseConfig) -> list[float]:
    """Compute the values *config* asks for, as Python floats."""
    curve = get_curve(config.curve)
    if config.step is not None:
        values = [
            curve.evaluate(config.start, config.end, config.steps, config.step, dtype=config.dtype)
        ]
    else:
        values = list(curve(config.start, config.end, config.steps, dtype=config.dtype))
    logger.info("%s: %d value(s) over %s steps", curve.name, len(values), config.steps)
    result = [float(v) for v in values]
    if config.precision is not None:
        result = [round(v, config.precision) for v in result]
    return result


def main(config: EaseConfig | None = None) -> None:
    if config is None:
        config = tyro.cli(EaseConfig)
    setup_logging(config.log_level, verbose=config.verbose)

    if config.list_curves:
        for name in CURVES:
            print(name)
        return

    for value in run(config):
        print(value)


if __name__ == "__main__":
    main()
