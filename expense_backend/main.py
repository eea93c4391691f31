# expense_backend/main.py
# FastAPI application factory

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.engine import Engine

from . import models
from .auth import AuthManager
from .config import Settings, get_settings
from .exceptions import StorageFailure
from .routers import accounts, auth, expenses, users

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the application around a database engine.

    When no engine is given one is created from the settings and disposed
    on shutdown; a caller-supplied engine is left to its owner.
    """
    settings = settings or get_settings()
    owns_engine = engine is None
    if owns_engine:
        engine = models.engine_from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        models.create_tables(app.state.engine)
        yield
        if owns_engine:
            app.state.engine.dispose()

    app = FastAPI(
        title="Expense Tracker Backend",
        description="Users, personal accounts and expenses",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = models.build_session_factory(engine)
    app.state.auth_manager = AuthManager.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    @app.exception_handler(StorageFailure)
    async def storage_failure_handler(request: Request, exc: StorageFailure):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.__cause__})")
        return JSONResponse(status_code=500, content={"detail": exc.message})

    app.include_router(auth.router, tags=["auth"])
    app.include_router(users.router, prefix="/users", tags=["users"])
    app.include_router(expenses.router, tags=["expenses"])
    app.include_router(accounts.router, prefix="/accounts", tags=["accounts"])

    @app.get("/", response_class=PlainTextResponse, tags=["system"])
    def health_check():
        """Liveness check."""
        return "backend is running"

    return app
