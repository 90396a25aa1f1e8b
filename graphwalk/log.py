"""Logging setup for GraphWalk.

Events are structlog key/value events routed through the standard
library ``logging`` tree under the ``graphwalk`` logger. A NullHandler
keeps the library silent until the application configures handlers.
"""

import logging

import structlog

logging.getLogger("graphwalk").addHandler(logging.NullHandler())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
