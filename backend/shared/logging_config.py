"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; this only configures
the root handler once for the process.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging if nothing else has done so yet."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    else:
        root.setLevel(level.upper())


def mask_token(token: str) -> str:
    """Shorten a bearer token for log output."""
    if not token:
        return "<empty>"
    return f"{token[:6]}..."
