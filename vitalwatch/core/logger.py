import logging
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ENV_LEVEL = "VITALWATCH_LOG_LEVEL"

_HANDLER_NAME = "vitalwatch"


def configure_logging(level=None) -> logging.Logger:
    """
    One stream handler on the "vitalwatch" logger.
    Level: argument, else $VITALWATCH_LOG_LEVEL, else INFO.
    Safe to call more than once.
    """
    if level is None:
        level = os.getenv(ENV_LEVEL, "INFO").strip().upper() or "INFO"
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger("vitalwatch")
    root.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    return root
