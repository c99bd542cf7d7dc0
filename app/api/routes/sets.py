import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.api.deps import get_set_service
from app.api.errors import to_http_exception
from app.api.forms import parse_model, read_payload
from app.core.exceptions import FlashcardsError
from app.models.flashcard import SetCreate
from app.services.set_service import SetService

router = APIRouter(prefix="/sets", tags=["sets"])
logger = logging.getLogger(__name__)


@router.post("", summary="Create a new set (multipart with optional image, or JSON)")
async def create_set(request: Request, service: SetService = Depends(get_set_service)):
    try:
        fields, upload = await read_payload(request)
        payload = parse_model(SetCreate, fields)
        return await service.create_set(payload, upload)
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Create set error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create set")


@router.get("", summary="List public sets")
async def list_sets(service: SetService = Depends(get_set_service)):
    try:
        return await service.list_public_sets()
    except Exception as e:
        logger.error(f"Get sets error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to get sets")


@router.get("/{set_id}", summary="Get a single set")
async def get_set(set_id: str, service: SetService = Depends(get_set_service)):
    try:
        return await service.get_set(set_id)
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Get set error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to get set")


@router.delete("/{set_id}", summary="Delete a set with its cards, favorites and learnings")
async def delete_set(set_id: str, service: SetService = Depends(get_set_service)):
    try:
        return await service.delete_set(set_id)
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Delete set error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete set")


@router.post("/{set_id}/recount", summary="Recompute a set's card count from its stored cards")
async def recount_set_cards(set_id: str, service: SetService = Depends(get_set_service)):
    try:
        count = await service.recount_cards(set_id)
        return {"success": True, "cards": count}
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Recount set error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to recount set")
