"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import search
from settings import settings

logger = logging.getLogger(__name__)

# Create app
app = FastAPI(
    title="Tour Location Search API",
    description="Place autocomplete and resolution with a local sample-data fallback",
    version="0.1.0",
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(search.router, prefix="/search", tags=["search"])


@app.on_event("startup")
def startup_event():
    """Build the search context so provider problems show up in the logs at boot."""
    location_search = search.get_location_search()
    if not location_search.provider_available:
        logger.warning("Places provider unavailable; serving sample data only")
    logger.info(
        "Search debounce=%dms throttle=%dms",
        settings.SEARCH_DEBOUNCE_MS,
        settings.SEARCH_THROTTLE_MS,
    )


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Tour Location Search API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "places_provider": search.get_location_search().provider_available,
    }
