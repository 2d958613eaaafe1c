"""
Health check endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic liveness probe - returns healthy if the service is running"""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(request: Request):
    """
    Readiness probe.
    Returns 200 once the dictionary is loaded, 503 otherwise.
    """
    dictionary = getattr(request.app.state, "dictionary", None)
    ready = dictionary is not None and len(dictionary) > 0

    response_data = {
        "status": "healthy" if ready else "unhealthy",
        "checks": {"dictionary": "loaded" if ready else "missing"},
        "words": len(dictionary) if dictionary is not None else 0,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    if ready:
        return response_data
    return JSONResponse(status_code=503, content=response_data)
