"""Data models for the budget tracker domain."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Expense", "Income"]


@dataclass(frozen=True)
class Income:
    date: str
    amount: float
    source: str


@dataclass(frozen=True)
class Expense:
    date: str
    amount: float
    category: str
