"""Global enums — must match DB CHECK constraints exactly.

User status is deliberately absent: the upstream vocabulary is open and is
kept as a plain string.
"""

from enum import Enum


class WithdrawalStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]
