"""
Ledger Core: FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ledger_core.config import Settings, get_settings
from ledger_core.exceptions import InternalError
from ledger_core.logging_config import get_logger, setup_logging
from ledger_core.services.ledger_service import LedgerService
from ledger_core.services.transaction_service import TransactionService
from ledger_core.api.health import router as health_router
from ledger_core.api.accounts import router as accounts_router
from ledger_core.api.transactions import router as transactions_router

logger = get_logger("ledger_core.api")


def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
    logger.error("Internal ledger error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal ledger error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application with its own ledger and journal.

    Each call returns an independent app, so state is never
    shared between instances.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="In-memory double-entry ledger",
        debug=settings.DEBUG,
    )

    ledger = LedgerService()
    if settings.SEED_DEMO_DATA:
        ledger.seed_demo_accounts()
    app.state.ledger = ledger
    app.state.journal = TransactionService(ledger)

    app.add_exception_handler(InternalError, internal_error_handler)

    # Register routers
    app.include_router(health_router)
    app.include_router(accounts_router)
    app.include_router(transactions_router)

    return app


app = create_app()
