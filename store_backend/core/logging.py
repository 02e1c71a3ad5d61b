# File: store_backend/core/logging.py

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once for the whole process.

    Repeated calls only adjust the level, so building several applications
    (as the tests do) does not stack handlers.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    root.setLevel(level)
