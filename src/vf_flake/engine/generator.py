"""Snowflake-style ID generator with configurable bit layout.

One FlakeGenerator per node per process. allocate() is serialized by an
instance lock that is also held while waiting for the clock, so a caller
stuck waiting for the next millisecond blocks every other caller on the
same instance.
"""

import logging
import threading

from src.vf_common.clock import Clock, SystemClock
from src.vf_common.errors import ClockMovedBackwardError, InvalidNodeIdError
from src.vf_flake.domain.configuration import FlakeConfiguration, build_configuration
from src.vf_flake.domain.layout import BitLayout

logger = logging.getLogger(__name__)


class FlakeGenerator:
    def __init__(
        self,
        node_id: int,
        configuration: FlakeConfiguration | None = None,
        clock: Clock | None = None,
    ) -> None:
        if configuration is None:
            configuration = build_configuration()
        if not (0 <= node_id <= configuration.max_node_id):
            raise InvalidNodeIdError(node_id, configuration.max_node_id)
        self._node_id = node_id
        self._configuration = configuration
        self._layout = BitLayout.from_configuration(configuration)
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._sequence = 0
        self._last_timestamp_ms = -1
        self._lock = threading.Lock()

    @property
    def node_id(self) -> int:
        return self._node_id

    @property
    def configuration(self) -> FlakeConfiguration:
        return self._configuration

    @property
    def layout(self) -> BitLayout:
        return self._layout

    @property
    def last_timestamp(self) -> int:
        return self._last_timestamp_ms

    @property
    def sequence(self) -> int:
        return self._sequence

    def allocate(self) -> int:
        """Return the next id. Raises ClockMovedBackwardError in strict mode only."""
        with self._lock:
            ts = self._clock.now_ms()
            if ts < self._last_timestamp_ms:
                if self._configuration.strict_mode:
                    logger.warning(
                        "Clock moved backward on node %d: last=%d now=%d, rejecting",
                        self._node_id, self._last_timestamp_ms, ts,
                    )
                    raise ClockMovedBackwardError(self._last_timestamp_ms, ts)
                logger.warning(
                    "Clock moved backward on node %d by %dms, waiting for it to catch up",
                    self._node_id, self._last_timestamp_ms - ts,
                )
                ts = self._wait_next_ms(self._last_timestamp_ms)

            if ts == self._last_timestamp_ms:
                self._sequence = (self._sequence + 1) & self._layout.sequence_mask
                if self._sequence == 0:
                    logger.debug(
                        "Sequence exhausted at %d on node %d, waiting for next ms",
                        ts, self._node_id,
                    )
                    ts = self._wait_next_ms(ts)
            else:
                self._sequence = 0

            self._last_timestamp_ms = ts
            return self._layout.compose(ts, self._node_id, self._sequence)

    next_id = allocate

    def next_id_str(self) -> str:
        return str(self.allocate())

    def _wait_next_ms(self, last_ts: int) -> int:
        ts = self._clock.now_ms()
        while ts <= last_ts:
            ts = self._clock.now_ms()
        return ts
