"""ID layout configuration: immutable, validated once, shared by reference.

Layout (default, 63 usable bits; bit 63 is never set so ids stay non-negative):
  - 41 bits: milliseconds since epoch (about 69 years)
  - 10 bits: node_id (0-1023)
  - 12 bits: sequence (0-4095 per millisecond)
"""

from dataclasses import dataclass

from config.settings import Settings
from src.vf_common.errors import InvalidBitConfigurationError

MAX_TOTAL_BITS = 63

DEFAULT_EPOCH_MS = 1_735_689_600_000  # 2025-01-01T00:00:00Z
DEFAULT_TIMESTAMP_BITS = 41
DEFAULT_NODE_ID_BITS = 10
DEFAULT_SEQUENCE_BITS = 12
DEFAULT_STRICT_MODE = False


@dataclass(frozen=True)
class FlakeConfiguration:
    """Bit widths, epoch and clock-regression policy for a set of generators.

    Fewer timestamp bits shorten the time range before the field wraps,
    fewer node bits allow fewer nodes, fewer sequence bits mean more
    same-millisecond waits.
    """

    epoch_ms: int
    timestamp_bits: int
    node_id_bits: int
    sequence_bits: int
    strict_mode: bool = False

    def __post_init__(self) -> None:
        total = self.timestamp_bits + self.node_id_bits + self.sequence_bits
        if total > MAX_TOTAL_BITS:
            raise InvalidBitConfigurationError(
                f"total bits (timestamp: {self.timestamp_bits} + node_id: {self.node_id_bits}"
                f" + sequence: {self.sequence_bits} = {total}) cannot exceed {MAX_TOTAL_BITS}"
            )
        if self.timestamp_bits <= 0 or self.node_id_bits <= 0 or self.sequence_bits <= 0:
            raise InvalidBitConfigurationError(
                "timestamp bits, node_id bits and sequence bits must all be greater than 0"
            )

    @property
    def total_bits(self) -> int:
        return self.timestamp_bits + self.node_id_bits + self.sequence_bits

    @property
    def max_node_id(self) -> int:
        return (1 << self.node_id_bits) - 1

    @property
    def max_sequence(self) -> int:
        return (1 << self.sequence_bits) - 1


def build_configuration(
    epoch_ms: int = DEFAULT_EPOCH_MS,
    timestamp_bits: int = DEFAULT_TIMESTAMP_BITS,
    node_id_bits: int = DEFAULT_NODE_ID_BITS,
    sequence_bits: int = DEFAULT_SEQUENCE_BITS,
    strict_mode: bool = DEFAULT_STRICT_MODE,
) -> FlakeConfiguration:
    """Validate and return a configuration. Raises InvalidBitConfigurationError."""
    return FlakeConfiguration(
        epoch_ms=epoch_ms,
        timestamp_bits=timestamp_bits,
        node_id_bits=node_id_bits,
        sequence_bits=sequence_bits,
        strict_mode=strict_mode,
    )


def configuration_from_settings(settings: Settings) -> FlakeConfiguration:
    return build_configuration(
        epoch_ms=settings.FLAKE_EPOCH_MS,
        timestamp_bits=settings.FLAKE_TIMESTAMP_BITS,
        node_id_bits=settings.FLAKE_NODE_ID_BITS,
        sequence_bits=settings.FLAKE_SEQUENCE_BITS,
        strict_mode=settings.FLAKE_STRICT_MODE,
    )
