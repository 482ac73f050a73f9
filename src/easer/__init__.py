"""easer — stepped easing curves with NumPy and JAX."""

from easer.curves import (
    CURVES,
    Curve,
    cubic_in,
    cubic_inout,
    cubic_out,
    evaluate,
    exp_in,
    exp_inout,
    exp_out,
    get_curve,
    linear,
    quad_in,
    quad_inout,
    quad_out,
    quartic_in,
    quartic_inout,
    quartic_out,
    sin_in,
    sin_inout,
    sin_out,
)
from easer.log import setup_logging
from easer.progression import Easer, eased_value
from easer.schedule import ease_schedule

__all__ = [
    "CURVES",
    "Curve",
    "Easer",
    "cubic_in",
    "cubic_inout",
    "cubic_out",
    "ease_schedule",
    "eased_value",
    "evaluate",
    "exp_in",
    "exp_inout",
    "exp_out",
    "get_curve",
    "linear",
    "quad_in",
    "quad_inout",
    "quad_out",
    "quartic_in",
    "quartic_inout",
    "quartic_out",
    "setup_logging",
    "sin_in",
    "sin_inout",
    "sin_out",
]
