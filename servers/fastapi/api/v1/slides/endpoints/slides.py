# servers/fastapi/api/v1/slides/endpoints/slides.py
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from constants.slides import (
    DEFAULT_SLIDE_CONTENT,
    DEFAULT_SLIDE_LAYOUT,
    DEFAULT_SLIDE_ORDER,
    DEFAULT_SLIDE_TITLE,
)
from models.api_error_model import APIErrorModel
from models.slide_request import (
    BulkReplaceSlidesRequest,
    CreateSlideRequest,
    UpdateSlideRequest,
)
from models.slide_response import SlideDeletedResponse, SlideResponse
from models.sql.slide import SlideModel, generate_slide_id
from services.database import get_async_session
from services.slide_seeder import seed_default_slides
from services.slide_store import SlideStore

logger = logging.getLogger(__name__)

SLIDES_ROUTER = APIRouter(prefix="/slides", tags=["Slides"])

SLIDE_NOT_FOUND = "Slide not found"

NOT_FOUND_RESPONSE = {404: {"model": APIErrorModel}}
SERVER_ERROR_RESPONSE = {500: {"model": APIErrorModel}}


def to_slide_responses(slides: List[SlideModel]) -> List[SlideResponse]:
    return [SlideResponse.model_validate(slide) for slide in slides]


# -------------------------
# List
# -------------------------
@SLIDES_ROUTER.get(
    "",
    response_model=List[SlideResponse],
    responses=SERVER_ERROR_RESPONSE,
)
async def get_all_slides(sql_session: AsyncSession = Depends(get_async_session)):
    store = SlideStore(sql_session)
    try:
        slides = await store.list_ordered()

        if not slides:
            logger.info("No slides found, creating default slides...")
            await seed_default_slides(sql_session)
            slides = await store.list_ordered()
            logger.info(f"Created default slides: {len(slides)}")

        return to_slide_responses(slides)
    except Exception:
        logger.exception("Error fetching slides")
        raise HTTPException(status_code=500, detail="Failed to fetch slides")


# -------------------------
# Create
# -------------------------
@SLIDES_ROUTER.post(
    "",
    response_model=SlideResponse,
    status_code=201,
    responses=SERVER_ERROR_RESPONSE,
)
async def create_slide(
    request: Optional[CreateSlideRequest] = Body(default=None),
    sql_session: AsyncSession = Depends(get_async_session),
):
    request = request or CreateSlideRequest()
    slide = SlideModel(
        id=generate_slide_id(),
        title=request.title or DEFAULT_SLIDE_TITLE,
        content=request.content or DEFAULT_SLIDE_CONTENT,
        layout=request.layout or DEFAULT_SLIDE_LAYOUT,
        order=request.order or DEFAULT_SLIDE_ORDER,
    )
    try:
        slide = await SlideStore(sql_session).insert(slide)
        return SlideResponse.model_validate(slide)
    except Exception:
        logger.exception("Error creating slide")
        raise HTTPException(status_code=500, detail="Failed to create slide")


# -------------------------
# Update
# -------------------------
@SLIDES_ROUTER.put(
    "/{slide_id}",
    response_model=SlideResponse,
    responses={**NOT_FOUND_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def update_slide(
    slide_id: str,
    request: Optional[UpdateSlideRequest] = Body(default=None),
    sql_session: AsyncSession = Depends(get_async_session),
):
    request = request or UpdateSlideRequest()
    store = SlideStore(sql_session)
    try:
        slide = await store.get(slide_id)
        if not slide:
            raise HTTPException(status_code=404, detail=SLIDE_NOT_FOUND)

        slide = await store.update(slide, request.get_changes())
        return SlideResponse.model_validate(slide)
    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error updating slide {slide_id}")
        raise HTTPException(status_code=500, detail="Failed to update slide")


# -------------------------
# Delete
# -------------------------
@SLIDES_ROUTER.delete(
    "/{slide_id}",
    response_model=SlideDeletedResponse,
    responses={**NOT_FOUND_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def delete_slide(
    slide_id: str,
    sql_session: AsyncSession = Depends(get_async_session),
):
    store = SlideStore(sql_session)
    try:
        slide = await store.get(slide_id)
        if not slide:
            raise HTTPException(status_code=404, detail=SLIDE_NOT_FOUND)

        await store.delete(slide)
        return SlideDeletedResponse(message="Slide deleted successfully")
    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error deleting slide {slide_id}")
        raise HTTPException(status_code=500, detail="Failed to delete slide")


# -------------------------
# Bulk replace
# -------------------------
@SLIDES_ROUTER.put(
    "",
    response_model=List[SlideResponse],
    responses={400: {"model": APIErrorModel}, **SERVER_ERROR_RESPONSE},
)
async def update_all_slides(
    payload: Any = Body(default=None),
    sql_session: AsyncSession = Depends(get_async_session),
):
    """
    Replace the whole deck with `payload["slides"]`. Slides keep their id
    when one is given and are ordered by their position in the payload.
    """
    # Validated by hand so a malformed payload answers 400 "Invalid slides data"
    try:
        request = BulkReplaceSlidesRequest.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Invalid slides data")

    slides = [
        SlideModel(
            id=item.id or generate_slide_id(),
            title=item.title,
            content=item.content,
            layout=item.layout,
            order=index,
        )
        for index, item in enumerate(request.slides)
    ]

    try:
        slides = await SlideStore(sql_session).replace_all(slides)
        return to_slide_responses(slides)
    except Exception:
        logger.exception("Error updating slides")
        raise HTTPException(status_code=500, detail="Failed to update slides")
