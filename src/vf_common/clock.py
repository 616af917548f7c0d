"""Wall-clock sources for the generator.

The generator only ever asks for "now" in Unix milliseconds; anything with a
``now_ms()`` method can stand in, which is how tests freeze or rewind time.
"""

import time
from typing import Protocol


class Clock(Protocol):
    def now_ms(self) -> int: ...


class SystemClock:
    """Reads the host wall clock. Not monotonic: NTP steps show up as regressions."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)
