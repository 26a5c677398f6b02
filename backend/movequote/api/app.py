"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from movequote.advisor import build_answer, classify_intent
from movequote.exceptions import MoveQuoteError
from movequote.models.enums import AdvisorIntent  # noqa: TCH001 (FastAPI resolves at runtime)
from movequote.models.request import MoveInput  # noqa: TCH001

if TYPE_CHECKING:
    from movequote.engine import MoveEstimator

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


class AdvisorRequest(BaseModel):
    """A customer question plus the move it is about."""

    question: str = Field(min_length=1)
    intent: AdvisorIntent | None = None
    move: MoveInput = Field(default_factory=MoveInput)


def _engine_from_env() -> MoveEstimator:
    """Build the engine from ``MOVEQUOTE_*`` settings.

    ``MOVEQUOTE_RATE_TABLE`` points at an operator-edited JSON rate table;
    without it the built-in table is used.
    """
    from movequote.config import EngineConfig
    from movequote.factory import create_default_engine, create_engine_from_file

    config = EngineConfig.from_env()
    rate_table_path = os.environ.get("MOVEQUOTE_RATE_TABLE", "").strip()
    if rate_table_path:
        return create_engine_from_file(rate_table_path, config=config)
    return create_default_engine(config=config)


def create_app(*, engine: MoveEstimator | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built estimator (e.g. tests). If not provided, one is
        created from environment variables on first request.
    """
    app = FastAPI(title="movequote", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            origin.strip()
            for origin in os.environ.get(
                "MOVEQUOTE_CORS_ORIGINS", "http://localhost:3000"
            ).split(",")
            if origin.strip()
        ],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own
    app.state.engine = engine

    def _get_engine() -> MoveEstimator:
        eng: MoveEstimator | None = app.state.engine
        if eng is not None:
            return eng
        try:
            eng = _engine_from_env()
        except MoveQuoteError as exc:
            logger.exception("Could not build estimator from configuration")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(move: MoveInput) -> dict[str, Any]:
        eng = _get_engine()
        request = move.to_request()
        derived = eng.derive(request)
        result = eng.estimate(request)
        return {
            "ok": True,
            "distance": derived.distance_miles,
            "is_local": derived.is_local,
            "result": result.model_dump(mode="json"),
            "summary": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/distance
    # ------------------------------------------------------------------

    @app.get("/api/distance")
    def distance(pickup_zip: str, dropoff_zip: str) -> dict[str, Any]:
        eng = _get_engine()
        result = eng.distance_between(pickup_zip, dropoff_zip)
        if result is None:
            return {"miles": None, "confidence": None, "method": None}
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/advisor
    # ------------------------------------------------------------------

    @app.post("/api/advisor")
    def advisor(body: AdvisorRequest) -> dict[str, Any]:
        eng = _get_engine()
        intent = body.intent or classify_intent(body.question)
        request = body.move.to_request()
        result = eng.estimate(request)
        return {
            "intent": intent.value,
            "answer": build_answer(intent, request, result),
            "result": result.model_dump(mode="json"),
        }

    return app
