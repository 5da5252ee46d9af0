"""Read-only product catalog."""

from typing import Iterable, List, Optional

from mock_users_api.app.schemas.product import Product


DEFAULT_PRODUCTS = [
    Product(id=123, name="Chicken Breast", price=12.99),
]


class ProductCatalog:
    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products = tuple(DEFAULT_PRODUCTS if products is None else products)

    def all(self) -> List[Product]:
        return list(self._products)
