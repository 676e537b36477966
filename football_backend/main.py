import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from football_backend.core.config import TEST_MODE
from football_backend.core.database import init_db
from football_backend.core.errors import DomainError, ErrorKind
from football_backend.core.logging_config import setup_logging
from football_backend.seed.seed_all import seed_default_admin, seed_demo_data

# --- Routers ---
from football_backend.routes.auth_routes import router as auth_router
from football_backend.routes.team_routes import router as team_router
from football_backend.routes.player_routes import router as player_router
from football_backend.routes.match_routes import router as match_router
from football_backend.routes.report_routes import router as report_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
}

app = FastAPI(title="Football Backend")


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    status_code = STATUS_CODES.get(exc.kind, 400)
    logger.info("%s %s -> %d %s", request.method, request.url.path, status_code, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind.value},
        headers=headers,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.on_event("startup")
def on_startup():
    # 1. Logging first so the rest of startup is visible
    setup_logging()

    # 2. Create tables
    init_db()

    # 3. Seed: admin always, demo data only in TEST_MODE
    seed_default_admin()
    if TEST_MODE:
        seed_demo_data()
    logger.info("Football backend started (TEST_MODE=%s)", TEST_MODE)


@app.get(API_PREFIX + "/health")
def health():
    return {"status": "ok"}


# --- Include routers ---
app.include_router(auth_router, prefix=API_PREFIX + "/auth", tags=["Auth"])
app.include_router(team_router, prefix=API_PREFIX + "/teams", tags=["Teams"])
app.include_router(player_router, prefix=API_PREFIX + "/players", tags=["Players"])
app.include_router(match_router, prefix=API_PREFIX + "/matches", tags=["Matches"])
app.include_router(report_router, prefix=API_PREFIX + "/reports", tags=["Reports"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("football_backend.main:app", host="0.0.0.0", port=8000)
