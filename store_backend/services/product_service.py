# File: store_backend/services/product_service.py

from typing import Any, Dict, List, Optional

from sqlalchemy import bindparam, delete, insert, select, update

from store_backend.db.gateway import DatabaseGateway
from store_backend.models.product import Product

products = Product.__table__

INSERT_PRODUCT = insert(products).values(
    name=bindparam("new_name"),
    description=bindparam("new_description"),
    price=bindparam("new_price"),
    quantity=bindparam("new_quantity"),
)
SELECT_ALL_PRODUCTS = select(products).order_by(products.c.id)
UPDATE_PRODUCT = (
    update(products)
    .where(products.c.id == bindparam("product_id"))
    .values(
        name=bindparam("new_name"),
        description=bindparam("new_description"),
        price=bindparam("new_price"),
        quantity=bindparam("new_quantity"),
    )
)
DELETE_PRODUCT = delete(products).where(products.c.id == bindparam("product_id"))


def _product_params(
    name: str,
    description: Optional[str],
    price: float,
    quantity: int,
) -> Dict[str, Any]:
    return {
        "new_name": name,
        "new_description": description,
        "new_price": price,
        "new_quantity": quantity,
    }


class ProductService:
    """
    CRUD over ``products``.

    Updates overwrite all four fields; there is no partial update. Updates
    and deletes on a missing id touch nothing and return 0.
    """

    def __init__(self, gateway: DatabaseGateway):
        self.gateway = gateway

    def add_product(
        self,
        name: str,
        description: Optional[str],
        price: float,
        quantity: int,
    ) -> None:
        self.gateway.execute(
            INSERT_PRODUCT, _product_params(name, description, price, quantity)
        )

    def list_products(self) -> List[Dict[str, Any]]:
        return self.gateway.execute(SELECT_ALL_PRODUCTS).rows

    def update_product(
        self,
        product_id: int,
        name: str,
        description: Optional[str],
        price: float,
        quantity: int,
    ) -> int:
        params = _product_params(name, description, price, quantity)
        params["product_id"] = product_id
        return self.gateway.execute(UPDATE_PRODUCT, params).rowcount

    def delete_product(self, product_id: int) -> int:
        return self.gateway.execute(DELETE_PRODUCT, {"product_id": product_id}).rowcount
