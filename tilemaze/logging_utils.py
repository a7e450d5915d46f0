"""Minimal structured logging helper.

Emits one ``key=value`` line per event with a timestamp, level and logger
name, or a compact JSON object when ``TILEMAZE_LOG_JSON`` is truthy. Lines go to
stderr so they never mix with a map written to stdout. Generation
phases log at debug; the CLI and the pipeline summary log at info.

Usage:
    from tilemaze.logging_utils import get_logger
    log = get_logger("tilemaze.pipeline")
    log.info(event="maze_generated", seed=42, width=66)

Non-numeric values are stringified with spaces replaced by underscores.
Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("TILEMAZE_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("TILEMAZE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def set_level(name: str) -> None:
    global CURRENT_LEVEL
    if name.lower() not in LEVELS:
        raise ValueError(f"unknown log level {name!r}")
    CURRENT_LEVEL = LEVELS[name.lower()]


def set_json(enabled: bool) -> None:
    global JSON_MODE
    JSON_MODE = bool(enabled)


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "tilemaze"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        print(_format(lvl, **fields), file=sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("tilemaze")
