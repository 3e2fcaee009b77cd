"""
Performance OCR service - FastAPI application
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import router
from .helpers.config import get_settings, configure_logging
from .helpers.storage import StorageManager, storage as default_storage
from .ocr.engine import TextRecognizer
from .ocr.pipeline import PerformancePipeline


def create_app(
    recognizer: Optional[TextRecognizer] = None,
    storage: Optional[StorageManager] = None,
) -> FastAPI:
    """Build the app; the recognizer is the one engine instance it owns"""
    settings = get_settings()
    configure_logging(settings.log_level)

    recognizer = recognizer or TextRecognizer(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        recognizer.close()

    app = FastAPI(
        title="Performance OCR API",
        description="Extract player performance rows from match result screenshots",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.recognizer = recognizer
    app.state.pipeline = PerformancePipeline(recognizer)
    app.state.storage = storage if storage is not None else default_storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app


app = create_app()
