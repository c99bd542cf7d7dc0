import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from app.api.deps import get_card_service
from app.api.errors import to_http_exception
from app.api.forms import parse_model, read_payload
from app.core.exceptions import FlashcardsError
from app.models.flashcard import CardCreate
from app.services.card_service import CardService

router = APIRouter(prefix="/cards", tags=["cards"])
logger = logging.getLogger(__name__)


@router.post("", summary="Create a card (image as multipart file or base64 string)")
async def create_card(request: Request, service: CardService = Depends(get_card_service)):
    try:
        fields, upload = await read_payload(request)
        payload = parse_model(CardCreate, fields)
        return await service.create_card(payload, upload)
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Create card error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create card")


@router.get("", summary="Get all cards of a set")
async def list_cards(setid: str = Query(...), service: CardService = Depends(get_card_service)):
    try:
        return await service.list_cards_for_set(setid)
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Get cards error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to get cards")


@router.get("/learn", summary="Get a random selection of cards from a set")
async def learn_cards(
    setid: str = Query(...),
    limit: int = Query(..., ge=0),
    service: CardService = Depends(get_card_service),
):
    try:
        return await service.sample_cards_for_learning(setid, limit)
    except FlashcardsError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Get learn cards error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to get learning cards")
