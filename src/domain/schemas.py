from __future__ import annotations

import os
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.errors import ValidationError
from domain.models import Location, Page, TransactionRecord, TransactionType

DEFAULT_ENDPOINT = "https://jsonmock.hackerrank.com/api/transactions/search"


class LocationPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int = 0
    address: str = ""
    city: str = ""
    zipCode: int = 0


class TransactionPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    userId: int = 0
    userName: str = ""
    timestamp: int
    txnType: str
    amount: str
    location: Optional[LocationPayload] = None

    def to_record(self) -> TransactionRecord:
        location = None
        if self.location is not None:
            location = Location(
                id=self.location.id,
                address=self.location.address,
                city=self.location.city,
                zip_code=self.location.zipCode,
            )
        return TransactionRecord(
            id=self.id,
            user_id=self.userId,
            user_name=self.userName,
            timestamp_ms=self.timestamp,
            txn_type=self.txnType,
            amount=self.amount,
            location=location,
        )


class TransactionSearchResponse(BaseModel):
    """
    Body returned by the transaction search endpoint, one page per response.

    Unknown fields are ignored; ``page``, ``total_pages`` and the core
    per-transaction fields are required.
    """

    model_config = ConfigDict(extra="ignore")

    page: int
    per_page: int = 0
    total: int = 0
    total_pages: int
    data: List[TransactionPayload] = Field(default_factory=list)

    def to_page(self) -> Page:
        return Page(
            page_number=self.page,
            per_page=self.per_page,
            total_records=self.total,
            total_pages=self.total_pages,
            records=tuple(item.to_record() for item in self.data),
        )


class AnalyzerConfig(BaseModel):
    endpoint: str = DEFAULT_ENDPOINT
    timeout_seconds: Optional[float] = None
    credit_label: str = TransactionType.CREDIT.value
    debit_label: str = TransactionType.DEBIT.value
    no_match_sentinel: int = -1

    @field_validator("credit_label", "debit_label")
    @classmethod
    def lower_labels(cls, value: str) -> str:
        return value.strip().lower()

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        raw_timeout = os.getenv("TXN_API_TIMEOUT_SECONDS")
        try:
            timeout = float(raw_timeout) if raw_timeout else None
        except ValueError as exc:
            raise ValidationError(f"Invalid TXN_API_TIMEOUT_SECONDS: {raw_timeout!r}") from exc
        return cls(
            endpoint=os.getenv("TXN_API_ENDPOINT", DEFAULT_ENDPOINT),
            timeout_seconds=timeout,
            credit_label=os.getenv("TXN_CREDIT_LABEL", TransactionType.CREDIT.value),
            debit_label=os.getenv("TXN_DEBIT_LABEL", TransactionType.DEBIT.value),
        )


class AnalysisRequest(BaseModel):
    user_id: int
    txn_type: str = Field(min_length=1)
    month_year: str = Field(min_length=1, description="Month and year as M-YYYY, e.g. 3-2018.")


class AnalysisResult(BaseModel):
    user_id: int
    txn_type: str
    month_year: str
    ids: List[int] = Field(default_factory=list)
    debit_count: int = 0
    debit_average: Optional[float] = None
