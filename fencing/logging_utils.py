"""fencing.logging_utils
=========================

Simple logging utilities, mainly for recording rejected inputs so they can be
inspected after a run.
"""

from __future__ import annotations

import json
from pathlib import Path

from .constants import FAIL_LOG


def log_malformed(path: str, error: BaseException, log_path: str = FAIL_LOG) -> None:
    """Append a JSON line describing why ``path`` could not be loaded.

    An empty ``log_path`` disables logging.
    """

    if not log_path:
        return
    entry = {
        "path": str(path),
        "kind": type(error).__name__,
        "error": str(error),
    }
    with Path(log_path).open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["log_malformed"]
