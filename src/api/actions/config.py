from fastapi import APIRouter

from core.config import Settings, get_settings

router = APIRouter()


@router.get("/config", response_model=Settings, tags=["System"])
async def ledger_configuration():
    """Effective ledger and logging settings."""
    return get_settings()
