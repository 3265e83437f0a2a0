from fastapi import APIRouter

from api.v1.slides.endpoints.slides import SLIDES_ROUTER


# ---------------------------------------------------------------- #
# Slides API router
# ---------------------------------------------------------------- #
#   GET    /slides         -> get_all_slides
#   POST   /slides         -> create_slide
#   PUT    /slides         -> update_all_slides
#   PUT    /slides/{id}    -> update_slide
#   DELETE /slides/{id}    -> delete_slide
API_V1_SLIDES_ROUTER = APIRouter()

API_V1_SLIDES_ROUTER.include_router(SLIDES_ROUTER)
