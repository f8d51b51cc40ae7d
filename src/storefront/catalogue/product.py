"""Product aggregate — a catalogue entry with its on-hand stock.

Price is fixed at catalogue time; orders snapshot it when they are placed.
Stock is never negative: the field itself rejects values below zero, so a
bad stock adjustment fails validation instead of persisting.
"""

from protean.fields import Float, Integer, String

from storefront.domain import storefront


@storefront.aggregate
class Product:
    """A sellable item and its current stock level."""

    product_id = Integer(identifier=True, required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    category = String(max_length=100)
    stock = Integer(default=0, min_value=0)
