import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_seed_service
from app.services.seed_service import SeedService

# Only included when ENABLE_SEED_ROUTE is set
router = APIRouter(tags=["admin"])
logger = logging.getLogger(__name__)


@router.get("/init", summary="Wipe the database and load the seed catalog")
async def init_database(service: SeedService = Depends(get_seed_service)):
    try:
        return await service.seed_database()
    except Exception as e:
        logger.error(f"Init error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to initialize data")
