"""
FastAPI application entry point for the Movie Review API.

Run with:
    uvicorn movie_api.api.main:app --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_api import __version__
from movie_api.api.config import get_api_host, get_api_port, get_log_file, get_log_level
from movie_api.api.routers import movies, reviews, system
from movie_api.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the application with logging configured and all routers mounted."""
    configure_api_logging(level=get_log_level(), log_file=get_log_file() or None)

    application = FastAPI(
        title="Movie Review API",
        description="REST API for managing movies and their reviews",
        version=__version__,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(movies.router)
    application.include_router(reviews.router)
    application.include_router(system.router)

    @application.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Movie Review API",
            "docs": "/docs",
            "health": "/api/health",
        }

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
