from idmanager.core.manager import IDManager
from idmanager.core.types import (
    ID,
    BorrowError,
    IDSpaceExhausted,
    InvariantViolation,
)
from idmanager.core.diagnostics import (
    WarningSink,
    logging_sink,
    silent_sink,
    stderr_sink,
)

__all__ = [
    "IDManager",
    "ID",
    "BorrowError",
    "IDSpaceExhausted",
    "InvariantViolation",
    # Warning channel
    "WarningSink",
    "logging_sink",
    "silent_sink",
    "stderr_sink",
]
