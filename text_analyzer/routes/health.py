from fastapi import APIRouter
from pydantic import BaseModel
import platform

from text_analyzer import __version__

router = APIRouter()

class HealthResp(BaseModel):
    status: str
    python: str
    version: str

@router.get("/", response_model=HealthResp)
async def health():
    return {"status": "ok", "python": platform.python_version(), "version": __version__}
