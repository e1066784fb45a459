"""Withdrawal row shapes after JSON normalization."""

from typing import TypedDict


class Withdrawal(TypedDict):
    id: str
    user_id: str
    amount: float
    wallet_address: str
    transaction_hash: str | None  # set once the transfer is processed
    status: str                   # WithdrawalStatus value
    created_at: str
    updated_at: str


class StatusCount(TypedDict):
    status: str
    count: int
