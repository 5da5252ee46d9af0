"""
Top-level API router.

This router aggregates the resource routers (greeting, users,
products) under the ``/api`` prefix.  When a new resource is added,
include its router here with its own prefix.
"""

from fastapi import APIRouter

from mock_users_api.app.api.endpoints import greeting, products, users


API_PREFIX = "/api"

router = APIRouter()

router.include_router(greeting.router, prefix=API_PREFIX, tags=["greeting"])
router.include_router(users.router, prefix=f"{API_PREFIX}/users", tags=["users"])
router.include_router(products.router, prefix=f"{API_PREFIX}/products", tags=["products"])
