from datetime import datetime

from fastapi import APIRouter, status

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    return {
        "status": "ok",
        "service": "official-identity",
        "timestamp": datetime.utcnow().isoformat() + "Z",
    }
