"""FastAPI application exposing the launch-delay and recall calculators."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from revenue_impact import __version__
from revenue_impact.calculators import (
    RevenueImpactCalculator,
    get_all_calculators,
    get_calculator,
)
from revenue_impact.config import get_settings
from revenue_impact.models.errors import InvalidArgumentError

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="Revenue Impact API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

calculator = RevenueImpactCalculator()


class CurveInputs(BaseModel):
    triangle_weeks: float
    maturity_weeks: float
    peak_revenue: float


class DelayRequest(CurveInputs):
    delay_weeks: float


class RecallRequest(CurveInputs):
    recall_weeks: float


class DelayResponse(BaseModel):
    ideal_triangle: float
    ideal_plateau: float
    ideal_total: float
    delayed_triangle: float
    delayed_plateau: float
    delayed_total: float
    absolute_loss: float
    percent_loss: float
    delayed_extra: float
    delayed_plateau_height: float


class RecallResponse(BaseModel):
    ideal_total: float
    recall_weeks: float
    recall_loss: float
    adjusted_total: float
    percent_loss: float


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    logger.warning(f"Rejected {request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content={"error": str(exc), "parameter": exc.parameter},
    )


@app.post("/api/delay", response_model=DelayResponse)
async def calculate_delay(body: DelayRequest):
    """Ideal vs. delayed revenue for a launch delayed by ``delay_weeks``."""
    result = calculator.calculate(
        body.triangle_weeks, body.maturity_weeks, body.peak_revenue, body.delay_weeks
    )
    return DelayResponse(**result.to_dict())


@app.post("/api/recall", response_model=RecallResponse)
async def calculate_recall(body: RecallRequest):
    """Revenue lost to a recall during the plateau phase."""
    result = calculator.calculate_recall_loss(
        body.triangle_weeks, body.maturity_weeks, body.peak_revenue, body.recall_weeks
    )
    return RecallResponse(**result.to_dict())


@app.get("/api/calculators")
async def list_calculators():
    """Describe every registered calculator."""
    return [
        {
            "id": d.id,
            "label": d.label,
            "description": d.description,
            "required_inputs": d.required_inputs,
        }
        for d in get_all_calculators().values()
    ]


@app.post("/api/calculators/{calculator_id}")
async def run_calculator(calculator_id: str, inputs: dict[str, float]):
    """Run a registered calculator by ID with a flat mapping of inputs."""
    definition = get_calculator(calculator_id)
    if definition is None:
        return JSONResponse(status_code=404, content={"error": "Calculator not found"})
    return definition.run(inputs).to_dict()


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
