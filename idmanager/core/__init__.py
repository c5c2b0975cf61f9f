from idmanager.core.diagnostics import WarningSink, logging_sink, silent_sink, stderr_sink
from idmanager.core.generator import IDGenerator
from idmanager.core.handle import SharedHandle
from idmanager.core.manager import IDManager
from idmanager.core.types import ID, BorrowError, IDSpaceExhausted, InvariantViolation

__all__ = [
    "BorrowError",
    "ID",
    "IDGenerator",
    "IDManager",
    "IDSpaceExhausted",
    "InvariantViolation",
    "SharedHandle",
    "WarningSink",
    "logging_sink",
    "silent_sink",
    "stderr_sink",
]
