import subprocess

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from tree_api.services import healthService

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    git: str


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report the git version used for cloning; 503 when git cannot run."""
    try:
        git_version = await run_in_threadpool(healthService.health_check)
    except (OSError, subprocess.SubprocessError) as exc:
        raise HTTPException(status_code=503, detail=f"git unavailable: {exc}") from exc
    return HealthResponse(status="ok", git=git_version)
