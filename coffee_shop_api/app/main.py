"""
Main entrypoint for the Coffee Shop API.

This module assembles the FastAPI application: it sets up logging,
builds the in‑memory state, registers the error handlers and includes
the versioned routers.  ``create_app`` can be called with an explicit
initial state (tests do this to get an isolated shop); the module level
``app`` is seeded from the bundled mock data and can be served with::

    uvicorn coffee_shop_api.app.main:app --reload
"""

from typing import Any, Mapping, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.seed import MOCK_DATA
from .core.state import build_state


def create_app(
    initial_state: Optional[Mapping[str, Any]] = None,
    loyalty_accrual: Optional[bool] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    initial_state : Optional[Mapping]
        Seed data with ``menuItems``, ``menuItemDescriptionMap``,
        ``orders`` and ``loyaltyAccounts`` keys.  When omitted, the
        bundled mock data is used if ``settings.load_mock_data`` is set,
        otherwise the shop starts empty.
    loyalty_accrual : Optional[bool]
        Override ``settings.loyalty_accrual``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file, debug=settings.debug)

    if initial_state is None and settings.load_mock_data:
        initial_state = MOCK_DATA
    if loyalty_accrual is None:
        loyalty_accrual = settings.loyalty_accrual

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.shop = build_state(initial_state, loyalty_accrual=loyalty_accrual)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
