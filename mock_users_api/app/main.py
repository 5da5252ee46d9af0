"""
Main entrypoint for the Mock Users API.

This module assembles the FastAPI application: it sets up logging,
attaches the request logging middleware and the error handlers, and
includes the API router.  The ``create_app`` function builds a fresh
application around its own stores, which is then instantiated at
module import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn mock_users_api.app.main:app --reload

or through ``run.py`` which honours the ``PORT`` environment variable.
"""

from typing import Optional

from fastapi import FastAPI

from mock_users_api.app.api.router import router as api_router
from mock_users_api.app.core.config import settings
from mock_users_api.app.core.errors import register_exception_handlers
from mock_users_api.app.core.logging_config import setup_logging
from mock_users_api.app.core.middleware import register_logging_middleware
from mock_users_api.app.services.product_service import ProductCatalog
from mock_users_api.app.services.user_service import UserStore


def create_app(
    user_store: Optional[UserStore] = None,
    product_catalog: Optional[ProductCatalog] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    user_store : Optional[UserStore]
        Store backing the user endpoints.  A store seeded with the
        default users is created when omitted.
    product_catalog : Optional[ProductCatalog]
        Catalog backing the product listing.  Defaults to the built-in
        product list.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log safely.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.user_store = user_store if user_store is not None else UserStore()
    app.state.product_catalog = product_catalog if product_catalog is not None else ProductCatalog()

    register_logging_middleware(app)
    register_exception_handlers(app)

    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
