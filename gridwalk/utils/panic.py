"""Fatal-error primitive.

``panic`` is reserved for contract violations (for instance reading an
invalid coordinate from a grid in checked mode). It is not an error channel:
the process is terminated.
"""

import logging
import os
import sys
from typing import NoReturn

logger = logging.getLogger(__name__)


def panic(msg: object = "") -> NoReturn:
    """Print ``msg`` to stderr and abort the process."""
    logger.critical("panic: %s", msg)
    print(msg, file=sys.stderr, flush=True)
    os.abort()
