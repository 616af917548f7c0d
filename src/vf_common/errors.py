"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Configuration
  2xxx: Generator construction
  3xxx: Allocation (clock)
  4xxx: Decoding
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Configuration ---

class InvalidBitConfigurationError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, f"Invalid bit configuration: {detail}")


# --- 2xxx: Generator ---

class InvalidNodeIdError(AppError):
    def __init__(self, node_id: int, max_node_id: int) -> None:
        self.node_id = node_id
        self.max_node_id = max_node_id
        super().__init__(
            2001, f"node_id must be between 0 and {max_node_id}, got {node_id}"
        )


# --- 3xxx: Allocation ---

class ClockMovedBackwardError(AppError):
    def __init__(self, last_timestamp: int, current_timestamp: int) -> None:
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp
        super().__init__(
            3001,
            f"System clock moved backward. Last timestamp: {last_timestamp}, "
            f"current timestamp: {current_timestamp}",
        )


# --- 4xxx: Decoding ---

class InvalidIdError(AppError):
    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        super().__init__(4001, f"Invalid id {value!r}: {reason}")
