from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from api.error_handlers import register_exception_handlers
from api.lifespan import app_lifespan
from api.v1.slides.router import API_V1_SLIDES_ROUTER
from utils.get_env import get_cors_allow_origins_env, get_log_level_env

logging.basicConfig(
    level=get_log_level_env().upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ---------------------------------------------------------------- #
# Initialize FastAPI App
# ---------------------------------------------------------------- #
app = FastAPI(title="Slide Deck API", lifespan=app_lifespan)

# ---------------------------------------------------------------- #
# Register Routers
# ---------------------------------------------------------------- #
app.include_router(API_V1_SLIDES_ROUTER)

# ---------------------------------------------------------------- #
# Error responses ({"error": ...})
# ---------------------------------------------------------------- #
register_exception_handlers(app)

# ---------------------------------------------------------------- #
# CORS
# ---------------------------------------------------------------- #
allow_origins = [
    origin.strip() for origin in get_cors_allow_origins_env().split(",") if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials="*" not in allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

logging.info(f"CORS enabled for origins: {allow_origins}")


# ---------------------------------------------------------------- #
# Root Endpoint
# ---------------------------------------------------------------- #
@app.get("/")
async def root():
    return {
        "message": "Slide Deck API is live!",
        "status": "running",
        "endpoints": [
            "GET /slides",
            "POST /slides",
            "PUT /slides",
            "PUT /slides/{id}",
            "DELETE /slides/{id}",
        ],
    }


@app.get("/health")
async def health():
    return {"status": "ok"}
