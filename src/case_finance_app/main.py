from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from .adapters import to_case_financials, to_financial_assumptions
from .models.assumptions import DEFAULT_ASSUMPTIONS, FinancialAssumptions
from .models.case import CaseAssumptions
from .models.settings import EngineSettings
from .schemas import FinancialsRequest, FinancialsResponse, SensitivityRequest, SensitivityResponse
from .services.calculator import FinancialCalculator


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get("CASE_FINANCE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    yield


app = FastAPI(title="Investment Case Financial Engine", version="0.1.0", lifespan=lifespan)

calculator = FinancialCalculator(EngineSettings.from_env())


def _resolve_assumptions(case: CaseAssumptions) -> FinancialAssumptions:
    try:
        return to_financial_assumptions(case)
    except ValidationError as exc:
        logger.info("Rejected case assumptions: %s", exc.error_count())
        raise HTTPException(status_code=422, detail=jsonable_encoder(exc.errors())) from exc


@app.get("/assumptions/defaults", response_model=FinancialAssumptions)
def get_default_assumptions() -> FinancialAssumptions:
    return DEFAULT_ASSUMPTIONS


@app.post("/financials", response_model=FinancialsResponse)
def compute_case_financials(payload: FinancialsRequest) -> FinancialsResponse:
    assumptions = _resolve_assumptions(payload.assumptions)
    results = calculator.run(assumptions)
    return FinancialsResponse(
        assumptions=assumptions,
        results=results,
        case_financials=to_case_financials(results),
    )


@app.post("/sensitivity", response_model=SensitivityResponse)
def compute_sensitivity(payload: SensitivityRequest) -> SensitivityResponse:
    assumptions = _resolve_assumptions(payload.assumptions)
    result = calculator.sensitivity(assumptions, payload.variation_pct)
    return SensitivityResponse(result=result)


@app.get("/health")
def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}
