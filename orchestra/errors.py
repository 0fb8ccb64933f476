"""Error codes and exceptions raised by the orchestra engine.

Every check runs before the engine writes any state, so a raised error means
the orchestra is exactly as it was before the call.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Engine error codes."""

    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INSUFFICIENT_EXPERIENCE = "INSUFFICIENT_EXPERIENCE"
    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    NOT_FOUND = "NOT_FOUND"


class OrchestraError(Exception):
    """Base engine error with code and user-safe message."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InsufficientFundsError(OrchestraError):
    """Raised when a price exceeds the current budget."""

    code = ErrorCode.INSUFFICIENT_FUNDS

    def __init__(self, price: int, budget: int) -> None:
        super().__init__(f"Price {price} exceeds budget {budget}")
        self.price = price
        self.budget = budget


class InsufficientExperienceError(OrchestraError):
    """Raised when a concert requires more experience than the orchestra has."""

    code = ErrorCode.INSUFFICIENT_EXPERIENCE

    def __init__(self, required: int, experience: int) -> None:
        super().__init__(f"Concert requires {required} experience, orchestra has {experience}")
        self.required = required
        self.experience = experience


class InsufficientCapacityError(OrchestraError):
    """Raised when a practice room cannot hold the current roster."""

    code = ErrorCode.INSUFFICIENT_CAPACITY

    def __init__(self, size: int, musicians: int) -> None:
        super().__init__(f"Room for {size} cannot hold {musicians} musicians")
        self.size = size
        self.musicians = musicians


class ScheduleOutOfRangeError(OrchestraError):
    """Raised when a day index falls outside the schedule."""

    code = ErrorCode.OUT_OF_RANGE

    def __init__(self, day: int, days: int) -> None:
        super().__init__(f"Day {day} is outside the {days}-day schedule")
        self.day = day
        self.days = days


class ActivityNotFoundError(OrchestraError):
    """Raised when an activity is not in the unused pool."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, activity_id) -> None:
        super().__init__("Activity is not among the unused activities")
        self.activity_id = activity_id
