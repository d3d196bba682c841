from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.settings import settings


def setup_middleware(app: FastAPI) -> None:
    """Attach CORS handling for browser clients."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
