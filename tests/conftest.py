"""Root test configuration.

Snapshots the ``easer`` logger around every test so that
:func:`easer.setup_logging` (called by the CLI) cannot leak handlers or
``propagate=False`` into tests that rely on ``caplog``.
"""

import logging

import numpy as np
import pytest

FLOAT_DTYPES = [np.float16, np.float32, np.float64, np.longdouble]


@pytest.fixture(autouse=True)
def _restore_easer_logger():
    logger = logging.getLogger("easer")
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture(params=FLOAT_DTYPES, ids=lambda d: np.dtype(d).name)
def float_dtype(request):
    return request.param
