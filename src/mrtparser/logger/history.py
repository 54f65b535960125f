from __future__ import annotations

import time
from collections import deque
from typing import Deque, Tuple

from mrtparser.logger.format import _long_formater

MAX_HISTORY: int = 20

_history: Deque[Tuple[str, str, str, float]] = deque(maxlen=MAX_HISTORY)


def history() -> str:
    return '\n'.join(_long_formater(msg, src, lvl, time.localtime(ts)) for msg, src, lvl, ts in _history)


def record(message: str, source: str, level: str, timestamp: float) -> None:
    _history.append((message, source, level, timestamp))


def clear() -> None:
    _history.clear()
