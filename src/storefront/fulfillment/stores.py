"""Store contracts the fulfillment engine is written against.

ProductRepository and OrderRepository satisfy these structurally; tests
can hand the engine any object with the same methods.
"""

from typing import Protocol

from storefront.ordering.order import OrderStatus


class CatalogStore(Protocol):
    def lookup(self, product_id): ...

    def list_all(self) -> list: ...

    def adjust_stock(self, product_id, new_quantity: int): ...

    def stock_lock(self): ...


class OrderStore(Protocol):
    def create(self, customer_id, lines, total_amount: float, status: OrderStatus): ...

    def lookup(self, order_id): ...

    def set_status(self, order_id, new_status: OrderStatus) -> bool: ...
