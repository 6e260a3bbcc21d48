"""FastAPI app factory for the leadernet analysis API."""

from fastapi import FastAPI

from leadernet import __version__
from leadernet.api.leaders import router as leaders_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(title="leadernet Leader Network API", version=__version__)
    app.include_router(leaders_router)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


# For uvicorn, expose `app` at module level
app = create_app()

__all__ = ["app", "create_app"]
