"""accountgate API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers turn validation and unexpected errors into structured JSON
    - CORS configured from settings (not hardcoded)
    - Account server client and SessionManager built on startup, client closed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from accountgate.api.error_handlers import register_error_handlers
from accountgate.api.routes import accounts, health
from accountgate.config import Settings, get_settings
from accountgate.infrastructure.account_server_client import HttpAccountServer
from accountgate.infrastructure.observability import setup_logging
from accountgate.infrastructure.password_hardening import make_pbkdf2_hardener
from accountgate.services.session_manager import SessionManager

logger = logging.getLogger(__name__)


def build_session_manager(
    settings: Settings,
) -> tuple[SessionManager, HttpAccountServer]:
    """Wire the HTTP account server and the configured hardener into a manager."""
    server = HttpAccountServer(
        settings.account_server_url,
        timeout_seconds=settings.account_server_timeout_seconds,
    )
    harden = make_pbkdf2_hardener(
        settings.password_salt, settings.password_hash_iterations,
    )
    return SessionManager(server, harden), server


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager, server = build_session_manager(settings)
    app.state.session_manager = manager
    logger.info(
        f"accountgate API started, account server at {settings.account_server_url}",
    )
    yield
    await server.aclose()
    logger.info("accountgate API shutting down")


app = FastAPI(
    title="accountgate API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(accounts.router)

register_error_handlers(app)
