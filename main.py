# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Golf Club Service
=================
Record-keeping backend for a golf club: members, tournaments and the
enrollment of members into tournaments.

    POST /api/v1/members                                  create member
    POST /api/v1/tournaments                              create tournament
    POST /api/v1/tournaments/{tid}/members/{mid}          enroll (idempotent)
    GET  /api/v1/tournaments/{tid}/members                entered members

Run:  uvicorn main:app --port 8080
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from golfclub.controllers import member_controller, system_controller, tournament_controller
from golfclub.core.config import settings
from golfclub.core.database import engine
from golfclub.core.errors import GolfClubError
from golfclub.core.logging import get_logger
from golfclub.middleware import MetricsMiddleware, RequestIDMiddleware
from golfclub.models.tables import create_schema
from golfclub.schemas import ErrorResponse

logger = get_logger("golfclub")


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Create tables on startup and release the pool on shutdown."""
    if settings.CREATE_SCHEMA:
        create_schema(engine)
        logger.info("Database schema ensured")
    logger.info("%s %s starting", settings.SERVICE_NAME, settings.SERVICE_VERSION)
    yield
    engine.dispose()
    logger.info("%s shutting down", settings.SERVICE_NAME)


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Golf Club Service",
    description="Members, tournaments and tournament enrollment.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Exception handlers ────────────────────────────────────────────────────
@app.exception_handler(GolfClubError)
async def domain_exception_handler(request: Request, exc: GolfClubError):
    req_id = getattr(request.state, "request_id", None)
    logger.warning("%s: %s", exc.code, exc, extra={"request_id": req_id})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "detail": str(exc), "request_id": req_id},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(member_controller.router)
app.include_router(tournament_controller.router)
