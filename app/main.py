from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.quantum.api import api_router
from app.quantum.core.config import settings
from app.quantum.core.errors import setup_exception_handlers
from app.quantum.core.logging import configure_logging
from app.quantum.middleware.observability import ObservabilityMiddleware
from app.quantum.middleware.trace import TraceIdMiddleware


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.APP_NAME)
    app.add_middleware(TraceIdMiddleware)
    app.add_middleware(ObservabilityMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Trace-ID"],
        expose_headers=["X-Trace-ID"],
    )
    setup_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
