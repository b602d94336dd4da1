import logging
import sys
from typing import Optional, Union

from soundcloudfield.config import LOG_LEVEL


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging for the renderer and the API.

    - Logs go to stdout
    - Level comes from SOUNDCLOUDFIELD_LOG_LEVEL unless given explicitly
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()

    # Uvicorn or a test runner may have configured handlers already
    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root.addHandler(handler)
    root.setLevel(level)
