"""
Shared CLI helpers.
"""

import logging

_LOGGING_CONFIGURED = False


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure CLI-wide logging.

    Handlers are installed once. Later calls can still lower the root
    level, e.g. when ``--verbose`` is given to a later command in the
    same process; they never raise it.
    """
    global _LOGGING_CONFIGURED
    root = logging.getLogger()

    if not _LOGGING_CONFIGURED:
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        _LOGGING_CONFIGURED = True

    if level < root.level:
        root.setLevel(level)
