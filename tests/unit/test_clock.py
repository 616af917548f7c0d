"""Tests for vf_common.clock and vf_common.datetime_utils."""

import time
from datetime import datetime, timezone

from src.vf_common.clock import SystemClock
from src.vf_common.datetime_utils import ms_to_datetime


class TestSystemClock:
    def test_returns_unix_ms(self) -> None:
        before = int(time.time() * 1000)
        now = SystemClock().now_ms()
        after = int(time.time() * 1000)
        assert isinstance(now, int)
        assert before <= now <= after


class TestMsToDatetime:
    def test_is_utc(self) -> None:
        dt = ms_to_datetime(0)
        assert dt == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert dt.tzinfo == timezone.utc

    def test_keeps_milliseconds(self) -> None:
        dt = ms_to_datetime(1_735_689_600_999)
        assert dt == datetime(2025, 1, 1, 0, 0, 0, 999000, tzinfo=timezone.utc)
