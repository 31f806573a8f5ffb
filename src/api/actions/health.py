from fastapi import APIRouter

from dnascan import __version__
from schemas.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check the health of the API."""
    return HealthResponse(status="ok", version=__version__)
