from dataclasses import dataclass


@dataclass(frozen=True)
class IdParts:
    """Fields recovered from an allocated id."""

    timestamp_ms: int  # Unix ms (epoch added back)
    node_id: int
    sequence: int
