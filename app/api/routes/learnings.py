import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_learning_service
from app.api.errors import to_http_exception
from app.core.exceptions import FlashcardsError
from app.models.flashcard import LearningCreate
from app.services.learning_service import LearningService

router = APIRouter(prefix="/learnings", tags=["learnings"])
logger = logging.getLogger(__name__)


@router.post("", summary="Record the outcome of a study session")
async def create_learning(learning: LearningCreate, service: LearningService = Depends(get_learning_service)):
    try:
        return await service.record_learning(learning)
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Create learning error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create learning progress")


@router.get("", summary="Get a user's learning progress")
async def list_learnings(user: str = Query(...), service: LearningService = Depends(get_learning_service)):
    try:
        return await service.list_learnings(user)
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Get learnings error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to get learning progress")
