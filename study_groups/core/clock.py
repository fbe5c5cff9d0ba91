"""
Host clock used for message timestamps.
"""

import time
from typing import Callable

# Returns wall time as integer milliseconds
Clock = Callable[[], int]


def now_millis() -> int:
    """Current wall time truncated to milliseconds."""
    return time.time_ns() // 1_000_000
