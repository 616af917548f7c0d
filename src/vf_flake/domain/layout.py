"""Shift/mask constants derived from a FlakeConfiguration, plus pack/unpack.

    | unused (1+) | timestamp | node_id | sequence |
                   ^ timestamp_shift    ^ node_id_shift

Timestamp overflow: compose() masks elapsed time to timestamp_bits. Once the
clock passes capacity_until_ms the field wraps to 0 and new ids can collide
with ids issued one full cycle earlier. This is not checked at runtime; pick
epoch and timestamp_bits so the deployment retires first.
"""

from dataclasses import dataclass

from src.vf_common.errors import InvalidIdError
from src.vf_flake.domain.configuration import FlakeConfiguration
from src.vf_flake.domain.models import IdParts


@dataclass(frozen=True)
class BitLayout:
    epoch_ms: int
    timestamp_bits: int
    node_id_bits: int
    sequence_bits: int
    node_id_shift: int
    timestamp_shift: int
    sequence_mask: int
    node_id_mask: int
    timestamp_mask: int

    @classmethod
    def from_configuration(cls, cfg: FlakeConfiguration) -> "BitLayout":
        return cls(
            epoch_ms=cfg.epoch_ms,
            timestamp_bits=cfg.timestamp_bits,
            node_id_bits=cfg.node_id_bits,
            sequence_bits=cfg.sequence_bits,
            node_id_shift=cfg.sequence_bits,
            timestamp_shift=cfg.node_id_bits + cfg.sequence_bits,
            sequence_mask=(1 << cfg.sequence_bits) - 1,
            node_id_mask=(1 << cfg.node_id_bits) - 1,
            timestamp_mask=(1 << cfg.timestamp_bits) - 1,
        )

    @property
    def total_bits(self) -> int:
        return self.timestamp_shift + self.timestamp_bits

    @property
    def capacity_until_ms(self) -> int:
        """Last Unix millisecond that encodes without wrapping."""
        return self.epoch_ms + self.timestamp_mask

    def compose(self, timestamp_ms: int, node_id: int, sequence: int) -> int:
        time_field = (timestamp_ms - self.epoch_ms) & self.timestamp_mask
        return (
            (time_field << self.timestamp_shift)
            | (node_id << self.node_id_shift)
            | sequence
        )

    def decompose(self, value: int) -> IdParts:
        """Split an id back into its fields.

        The timestamp is exact only for ids allocated before the field wrapped.
        """
        if value < 0:
            raise InvalidIdError(value, "ids are non-negative")
        if value >> self.total_bits:
            raise InvalidIdError(value, f"uses more than {self.total_bits} bits")
        return IdParts(
            timestamp_ms=(value >> self.timestamp_shift) + self.epoch_ms,
            node_id=(value >> self.node_id_shift) & self.node_id_mask,
            sequence=value & self.sequence_mask,
        )
