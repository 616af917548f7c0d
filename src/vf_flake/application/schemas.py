"""Pydantic schemas for decoded ids.

ids are emitted both as int and as a decimal string: JS clients lose
precision above 2^53, so consumers outside Python should read id_str.
"""

from datetime import datetime

from pydantic import BaseModel

from src.vf_common.datetime_utils import ms_to_datetime
from src.vf_flake.domain.models import IdParts


def _to_datetime_or_none(ms: int) -> datetime | None:
    """Wide timestamp fields can encode years past 9999; those have no datetime."""
    try:
        return ms_to_datetime(ms)
    except (OverflowError, ValueError, OSError):
        return None


class DecodedIdOut(BaseModel):
    id: int
    id_str: str
    timestamp_ms: int
    generated_at: datetime | None  # None when timestamp_ms is outside the datetime range
    node_id: int
    sequence: int

    @classmethod
    def from_parts(cls, value: int, parts: IdParts) -> "DecodedIdOut":
        return cls(
            id=value,
            id_str=str(value),
            timestamp_ms=parts.timestamp_ms,
            generated_at=_to_datetime_or_none(parts.timestamp_ms),
            node_id=parts.node_id,
            sequence=parts.sequence,
        )
