import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from repo_fetcher import FetchError

from tree_api.config import settings
from tree_api.routers import health, tree
from tree_api.schemas import ApiError, server_error

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Repo Tree API",
    description="Directory tree and language statistics of a freshly cloned repository.",
    version="0.1.0",
)

# ── CORS ──────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(health.router)
app.include_router(tree.router, prefix="/api")


# ── Error mapping ─────────────────────────────────────────────────────────────
@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "message": exc.message},
    )


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    logger.error("Could not clone %s: %s", exc.url, exc.reason)
    return await api_error_handler(request, server_error())


@app.get("/", tags=["root"])
def root() -> dict[str, str]:
    return {"message": "Repo Tree API", "docs": "/docs"}


# ── Entrypoint ────────────────────────────────────────────────────────────────
def start() -> None:
    """CLI entrypoint used by the `start-api` script."""
    logger.info("Server is running at http://%s:%s", settings.api_host, settings.api_port)
    uvicorn.run(
        "tree_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    start()
