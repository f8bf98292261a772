"""Call-site capture for records logged with `report_caller` enabled."""

from __future__ import annotations

import functools
import os
import sys
from dataclasses import dataclass

# Upper bound on frames inspected per log call.
MAXIMUM_CALLER_DEPTH = 25

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


@dataclass(frozen=True)
class Frame:
    """The first stack frame outside fieldlog."""

    file: str
    line: int
    function: str


@functools.lru_cache(maxsize=256)
def _is_internal(filename: str) -> bool:
    return os.path.abspath(filename).startswith(_PACKAGE_DIR)


def get_caller() -> Frame | None:
    """Return the nearest frame whose code lives outside this package.

    Returns None when no such frame is found within `MAXIMUM_CALLER_DEPTH`.
    """
    frame = sys._getframe(1)
    depth = 0
    while frame is not None and depth < MAXIMUM_CALLER_DEPTH:
        code = frame.f_code
        if not _is_internal(code.co_filename):
            module = frame.f_globals.get("__name__", "")
            qualname = getattr(code, "co_qualname", code.co_name)
            function = f"{module}.{qualname}" if module else qualname
            return Frame(file=code.co_filename, line=frame.f_lineno, function=function)
        frame = frame.f_back
        depth += 1
    return None
