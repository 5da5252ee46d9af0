from typing import Dict

from fastapi import APIRouter


router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def hello() -> Dict[str, str]:
    """Liveness greeting at the API root."""
    return {"msg": "Hello"}
