"""Catalogue store — products and their stock levels."""

import threading

from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import ProductNotFound

# One catalogue per process; repository instances are cheap and short-lived.
_catalogue_lock = threading.RLock()


@storefront.repository(part_of=Product)
class ProductRepository:
    """Repository for the Product aggregate.

    Every read returns a fresh copy, so callers never hold a live reference
    into the store. Stock only changes through ``adjust_stock``.
    """

    def lookup(self, product_id) -> Product | None:
        """Return the product, or None when it is not catalogued."""
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            return None

    def list_all(self) -> list[Product]:
        return self._dao.query.all().items

    def stock_lock(self):
        """The lock every stock write takes.

        Hold it to keep a read and a later write of the same level together.
        """
        return _catalogue_lock

    def adjust_stock(self, product_id, new_quantity: int) -> Product:
        """Set the absolute stock level and return the updated product.

        Notification policy is the caller's business; the returned product
        carries the level it needs to decide.
        """
        with _catalogue_lock:
            product = self.lookup(product_id)
            if product is None:
                raise ProductNotFound(product_id)

            product.stock = new_quantity
            self.add(product)
            return product

    def add_product(self, name, price, category=None, stock=0, product_id=None) -> Product:
        """Register a product, assigning the next free id when none is given."""
        with _catalogue_lock:
            if product_id is None:
                existing = [p.product_id for p in self.list_all()]
                product_id = max(existing, default=0) + 1

            product = Product(
                product_id=product_id,
                name=name,
                price=price,
                category=category,
                stock=stock,
            )
            self.add(product)
            return product
