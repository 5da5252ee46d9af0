"""
Product endpoints.

The product listing is static; there are no mutation routes.
"""

from typing import List

from fastapi import APIRouter, Depends

from mock_users_api.app.schemas.product import Product
from mock_users_api.app.services.product_service import ProductCatalog
from mock_users_api.app.api.deps import get_product_catalog


router = APIRouter()


@router.get("", response_model=List[Product])
async def list_products(catalog: ProductCatalog = Depends(get_product_catalog)) -> List[Product]:
    return catalog.all()
