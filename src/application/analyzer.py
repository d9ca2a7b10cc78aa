from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from domain.models import MonthYear, TransactionRecord
from domain.parsing import month_year_of, normalize_txn_type, parse_amount, parse_month_year
from domain.schemas import AnalysisRequest, AnalysisResult, AnalyzerConfig
from infrastructure.http_client import JsonHttpClient
from infrastructure.transaction_sources.paged_source import PagedTransactionSource
from infrastructure.transaction_sources.source import PageCursor

logger = logging.getLogger(__name__)

SourceFactory = Callable[[int], PageCursor]


@dataclass
class _MonthScan:
    debit_count: int = 0
    debit_sum: float = 0.0
    candidates: list[TransactionRecord] = field(default_factory=list)

    @property
    def average(self) -> float:
        # No debits in the month leaves the average undefined (NaN), so no
        # candidate can compare above it.
        if self.debit_count == 0:
            return float("nan")
        return self.debit_sum / self.debit_count


class TransactionAnalyzer:
    """
    Finds the transactions of a requested type, within one calendar month,
    whose amount is above that month's average debit.

    Debit statistics always come from every debit in the month, including
    when the requested type is credit.
    """

    def __init__(
        self,
        config: AnalyzerConfig | None = None,
        source_factory: SourceFactory | None = None,
    ) -> None:
        self._config = config or AnalyzerConfig()
        self._source_factory = source_factory or self._default_source

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    def _default_source(self, user_id: int) -> PageCursor:
        return PagedTransactionSource(
            user_id=user_id,
            endpoint_base=self._config.endpoint,
            client=JsonHttpClient(timeout_seconds=self._config.timeout_seconds),
        )

    def analyze(self, user_id: int, txn_type: str, month_year: str) -> list[int]:
        ids, _, _ = self._run(user_id, txn_type, month_year)
        return ids

    def analyze_request(self, request: AnalysisRequest) -> AnalysisResult:
        ids, scan, requested_type = self._run(request.user_id, request.txn_type, request.month_year)
        return AnalysisResult(
            user_id=request.user_id,
            txn_type=requested_type,
            month_year=request.month_year,
            ids=ids,
            debit_count=scan.debit_count,
            debit_average=scan.average if scan.debit_count else None,
        )

    def _run(self, user_id: int, txn_type: str, month_year: str) -> tuple[list[int], _MonthScan, str]:
        requested_type = normalize_txn_type(
            txn_type, (self._config.credit_label, self._config.debit_label)
        )
        period = parse_month_year(month_year)

        logger.info(
            "Analyzer run start user_id=%s txn_type=%s month_year=%s",
            user_id,
            requested_type,
            period,
        )
        t0 = time.perf_counter()

        source = self._source_factory(user_id)
        source.initialize()
        scan = self._scan(source, requested_type, period)

        average = scan.average
        ids = self._select_above(scan.candidates, average)

        logger.info(
            "Analyzer run complete in %.2fs debit_count=%d candidates=%d selected=%d",
            time.perf_counter() - t0,
            scan.debit_count,
            len(scan.candidates),
            len(ids),
        )
        if not ids:
            return [self._config.no_match_sentinel], scan, requested_type
        return ids, scan, requested_type

    def _scan(self, source: PageCursor, requested_type: str, period: MonthYear) -> _MonthScan:
        scan = _MonthScan()
        debit_label = self._config.debit_label
        pages = 0
        for page in source:
            pages += 1
            for record in page.records:
                if month_year_of(record.timestamp_ms) != period:
                    continue
                kind = record.normalized_type
                if kind == debit_label:
                    scan.debit_count += 1
                    scan.debit_sum += parse_amount(record.amount)
                if kind == requested_type:
                    scan.candidates.append(record)
        logger.debug("Analyzer scanned pages=%d", pages)
        return scan

    def _select_above(self, candidates: list[TransactionRecord], average: float) -> list[int]:
        return [record.id for record in candidates if parse_amount(record.amount) > average]
