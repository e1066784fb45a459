"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: User
  2xxx: Withdrawal
  9xxx: System / stores

Cache faults never appear here: the cache port fails open and logs instead.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: User ---

class UserNotFoundError(AppError):
    def __init__(self, user_id: str) -> None:
        super().__init__(1001, f"User not found: {user_id}", 404)


# --- 2xxx: Withdrawal ---

class InvalidWithdrawalStatusError(AppError):
    def __init__(self, status: str, allowed: list[str]) -> None:
        super().__init__(
            2001,
            f"Invalid status '{status}'. Use: {', '.join(allowed)}",
            422,
        )


# --- 9xxx: System ---

class StoreUnavailableError(AppError):
    """Relational store unreachable (refused, timed out, pool exhausted).

    Retrying may succeed, at the transport layer.
    """

    def __init__(self, detail: str = "Database unavailable") -> None:
        super().__init__(9001, detail, 503)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


class StoreQueryError(AppError):
    """Malformed query or bad parameters. A programmer error; never retried."""

    def __init__(self, detail: str = "Database query failed") -> None:
        super().__init__(9003, detail, 500)
