"""Logging and timing helpers.

All package loggers live under the ``hemitrace`` logger. The package only
installs a ``NullHandler``; applications (see ``examples/render_studio.py``)
attach their own handler and level.
"""

import functools
import logging
from datetime import datetime

logger = logging.getLogger("hemitrace")
logger.addHandler(logging.NullHandler())


def timed(func):
    """Log the wall-clock duration of each call at INFO level."""

    @functools.wraps(func)
    def decorated(*args, **kwargs):
        s = datetime.now()
        ret = func(*args, **kwargs)
        logger.info("%s - %.4f", func.__name__, (datetime.now() - s).total_seconds())
        return ret

    return decorated
