from __future__ import annotations

import logging
import sys
from typing import TextIO

from application.analyzer import TransactionAnalyzer
from domain.errors import TransactionAnalysisError, ValidationError
from domain.schemas import AnalyzerConfig

logger = logging.getLogger(__name__)


def build_analyzer() -> TransactionAnalyzer:
    return TransactionAnalyzer(config=AnalyzerConfig.from_env())


def _read_line(stream: TextIO) -> str:
    return stream.readline().rstrip("\r\n")


def read_inputs(stream: TextIO) -> tuple[int, str, str]:
    raw_uid = _read_line(stream).strip()
    try:
        user_id = int(raw_uid)
    except ValueError as exc:
        raise ValidationError(f"Invalid userId: {raw_uid!r}") from exc
    txn_type = _read_line(stream)
    month_year = _read_line(stream)
    return user_id, txn_type, month_year


def main(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    try:
        user_id, txn_type, month_year = read_inputs(stdin)
        result = build_analyzer().analyze(user_id, txn_type, month_year)
    except TransactionAnalysisError as exc:
        logger.error("Analysis failed: %s", exc)
        print(f"[txn-analyzer] error: {exc}", file=sys.stderr)
        return 1

    print(result, file=stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
