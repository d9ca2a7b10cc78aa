from __future__ import annotations


class TransactionAnalysisError(RuntimeError):
    """Base class for every failure raised while analyzing transactions."""


class ValidationError(TransactionAnalysisError):
    """Caller supplied a transaction type or month-year that cannot be used."""


class NetworkError(TransactionAnalysisError):
    """Transport-level failure talking to the transaction search endpoint."""


class ParseError(TransactionAnalysisError):
    """Response body or amount string could not be decoded."""
