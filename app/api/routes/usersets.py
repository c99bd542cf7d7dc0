import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_favorite_service
from app.api.errors import to_http_exception
from app.core.exceptions import FlashcardsError
from app.models.flashcard import UserSetCreate
from app.services.favorite_service import FavoriteService

router = APIRouter(prefix="/usersets", tags=["favorites"])
logger = logging.getLogger(__name__)


@router.post("", summary="Add a set to a user's favorites")
async def add_user_set(user_set: UserSetCreate, service: FavoriteService = Depends(get_favorite_service)):
    try:
        return await service.add_favorite(user_set)
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Create user set error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to add set to favorites")


@router.get("", summary="Get a user's favorite sets")
async def list_user_sets(user: str = Query(...), service: FavoriteService = Depends(get_favorite_service)):
    try:
        return await service.list_favorites(user)
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Get user sets error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to get user sets")
