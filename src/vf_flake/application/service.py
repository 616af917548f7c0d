"""Process-wide ID service built from settings.

Most callers only need generate_id(); the default generator is created on
first use from FLAKE_* settings and lives for the rest of the process.
"""

import logging
import threading

from config.settings import settings
from src.vf_common.errors import InvalidIdError
from src.vf_flake.application.schemas import DecodedIdOut
from src.vf_flake.domain.configuration import (
    FlakeConfiguration,
    configuration_from_settings,
)
from src.vf_flake.domain.layout import BitLayout
from src.vf_flake.engine.generator import FlakeGenerator

logger = logging.getLogger(__name__)

MAX_ID_DIGITS = 20  # 2^63 - 1 has 19 digits; allow one leading zero

_default_generator: FlakeGenerator | None = None
_default_lock = threading.Lock()


def get_default_generator() -> FlakeGenerator:
    global _default_generator
    with _default_lock:
        if _default_generator is None:
            cfg = configuration_from_settings(settings)
            _default_generator = FlakeGenerator(settings.FLAKE_NODE_ID, cfg)
            logger.info(
                "ID generator ready: node=%d bits=%d/%d/%d strict=%s",
                settings.FLAKE_NODE_ID,
                cfg.timestamp_bits,
                cfg.node_id_bits,
                cfg.sequence_bits,
                cfg.strict_mode,
            )
        return _default_generator


def reset_default_generator() -> None:
    """Forget the cached default; the next call rebuilds it from settings."""
    global _default_generator
    with _default_lock:
        _default_generator = None


def generate_id() -> int:
    return get_default_generator().allocate()


def generate_id_str() -> str:
    """Generate a unique id as a decimal string (for VARCHAR keys)."""
    return get_default_generator().next_id_str()


def decode_id(
    value: int | str, configuration: FlakeConfiguration | None = None
) -> DecodedIdOut:
    """Decode an id using the given configuration, or the settings one.

    Decoding needs only the layout, not a generator, so ids from any node of
    the deployment can be inspected.
    """
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidIdError(value, "not a decimal integer")
        if len(text) > MAX_ID_DIGITS:
            raise InvalidIdError(value, f"longer than {MAX_ID_DIGITS} digits")
        value = int(text)
    if configuration is None:
        configuration = configuration_from_settings(settings)
    parts = BitLayout.from_configuration(configuration).decompose(value)
    return DecodedIdOut.from_parts(value, parts)
