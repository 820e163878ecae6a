"""
FastAPI application entry point for the Movie Catalog API.

Run: uvicorn app.api.main:app --host 0.0.0.0 --port 8000
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.api.config import get_api_host, get_api_port, get_log_level, get_log_file
from app.api.routers import movies, system
from app.utils.logging_config import configure_api_logging

configure_api_logging(level=get_log_level(), log_file=get_log_file())

app = FastAPI(
    title="Movie Catalog API",
    description="Browse, look up and search an in-memory movie catalog",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Catalog API",
        "docs": "/docs",
        "health": "/api/health",
    }


def run() -> None:
    """Serve the API with uvicorn using configured host and port."""
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())


if __name__ == "__main__":
    run()
