# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Logging setup for the issuer identity tools.

Library modules only obtain named loggers; the CLI entry point installs a
handler on the root logger. Records go to stderr so that command output on
stdout stays machine-readable.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional

from issuer_identity.config import LOG_FORMAT, LOG_LEVEL

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter.

    Produces one JSON object per log line with fields:

    * ``timestamp``: ISO 8601 timestamp with UTC offset.
    * ``level``: Log level name (INFO, WARNING, ERROR, etc.).
    * ``logger``: Logger name.
    * ``message``: The formatted log message.
    * ``module``: Source module name.
    * ``funcName``: Source function name.

    If the log record carries an exception, it is serialized as an
    ``exception`` field containing the formatted traceback string.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
        }
        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Install a single stderr handler on the root logger.

    Existing handlers are removed first so repeated calls do not duplicate
    output. *level* and *fmt* default to ``LOG_LEVEL`` and ``LOG_FORMAT``.
    """
    level = level or LOG_LEVEL
    fmt = fmt or LOG_FORMAT

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if fmt.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
