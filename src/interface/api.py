from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query

from application.analyzer import TransactionAnalyzer
from domain.errors import NetworkError, ParseError, ValidationError
from domain.schemas import AnalysisRequest
from interface.cli import build_analyzer

app = FastAPI(title="Transaction Analyzer API")
analyzer: TransactionAnalyzer = build_analyzer()


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/transactions/above-average")
def above_average(
    user_id: int = Query(...),
    txn_type: str = Query(..., min_length=1),
    month_year: str = Query(..., min_length=1, description="Month and year as M-YYYY, e.g. 3-2018."),
) -> dict:
    request = AnalysisRequest(user_id=user_id, txn_type=txn_type, month_year=month_year)
    try:
        result = analyzer.analyze_request(request)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except (NetworkError, ParseError) as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return result.model_dump()
