from fastapi import APIRouter

from backoffice.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.APP_VERSION}
