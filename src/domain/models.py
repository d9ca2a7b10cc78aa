from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TransactionType(str, Enum):
    DEBIT = "debit"
    CREDIT = "credit"


@dataclass(frozen=True)
class Location:
    id: int = 0
    address: str = ""
    city: str = ""
    zip_code: int = 0


@dataclass(frozen=True)
class TransactionRecord:
    id: int
    user_id: int
    timestamp_ms: int
    txn_type: str
    amount: str
    user_name: str = ""
    location: Location | None = None

    @property
    def normalized_type(self) -> str:
        return self.txn_type.lower()


@dataclass(frozen=True)
class Page:
    page_number: int
    per_page: int
    total_records: int
    total_pages: int
    records: tuple[TransactionRecord, ...] = ()


@dataclass(frozen=True)
class MonthYear:
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.month}-{self.year}"
