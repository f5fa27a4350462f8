from fastapi import APIRouter, status
from pydantic import BaseModel

from src.domain.base import utc_now

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    ok: bool
    time: str


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check():
    """Liveness probe"""
    return {"ok": True, "time": utc_now().isoformat()}
