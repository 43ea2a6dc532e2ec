import logging
import os
from pathlib import Path
import sys

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from color_match import match, run_fixture_suite  # noqa: E402
from color_match.exceptions import InvalidRequestError  # noqa: E402
from color_match.fixtures import FixtureResult  # noqa: E402
from color_match.matching import MatchConfig, MatchResult  # noqa: E402

app = FastAPI(title="color-match API", version="1.0.0")
logger = logging.getLogger(__name__)
SERVICE_NAME = "color-match"

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class MatchColorRequest(BaseModel):
    ourColor: str | None = None
    theirColors: list[str | None] | None = None
    threshold: int | None = None


class HealthResponse(BaseModel):
    status: str
    service: str


class FixtureSuiteResponse(BaseModel):
    testResults: list[FixtureResult] = Field(default_factory=list)


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", service=SERVICE_NAME)


@app.post("/match-color", response_model=MatchResult)
async def match_color(request: Request) -> MatchResult:
    try:
        body = MatchColorRequest.model_validate(await request.json())
    except Exception as exc:
        raise HTTPException(
            status_code=400,
            detail="Missing required fields: ourColor (string) and theirColors (array)",
        ) from exc

    try:
        return match(body.ourColor, body.theirColors, body.threshold, config=MatchConfig.from_env())
    except InvalidRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("match-color failed")
        raise HTTPException(status_code=500, detail="internal_error") from exc


@app.post("/test", response_model=FixtureSuiteResponse)
def fixture_suite() -> FixtureSuiteResponse:
    return FixtureSuiteResponse(testResults=run_fixture_suite(MatchConfig.from_env()))
