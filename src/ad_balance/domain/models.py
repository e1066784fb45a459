"""UserBalance row shape after JSON normalization (NUMERIC → float)."""

from typing import TypedDict


class UserBalance(TypedDict):
    id: str
    user_id: str
    balance: float
    total_earned: float     # non-decreasing upstream
    total_withdrawn: float  # non-decreasing upstream
    updated_at: str
