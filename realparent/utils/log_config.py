# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import sys
from typing import Any, Optional

from loguru import logger

from realparent.configmanager import ConfigManager, validate_level

LOGGER_NAME = "realparent"


def configure_logging(level: Optional[str] = None, sink: Any = sys.stderr) -> Optional[int]:
    """Turn on realparent's log output, which is disabled when the package is imported.

    With an explicit level, logging is enabled unconditionally. Without one, the
    ``[logging]`` table of the realparent config file decides: nothing happens unless
    ``enabled`` is true, and ``level`` defaults to INFO.

    Args:
        level (Optional[str]): A loguru level name such as "DEBUG" or "TRACE".
        sink (Any): Anything loguru accepts as a sink. (Default: sys.stderr)

    Returns:
        Optional[int]: The loguru handler id, for ``logger.remove()``, or None if logging
        stayed off.

    Raises:
        ValueError: If the level, given or configured, is not a loguru level.
    """
    if level is None:
        settings = ConfigManager().logging_settings()
        if not settings.enabled:
            return None
        level = settings.level
    else:
        level = validate_level(level)

    logger.enable(LOGGER_NAME)
    return logger.add(sink, level=level, filter=LOGGER_NAME)
