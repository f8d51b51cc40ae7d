"""Demo catalogue used by the application and the demo CLI."""

import structlog

logger = structlog.get_logger(__name__)

DEMO_PRODUCTS = [
    {"product_id": 1, "name": "Laptop Pro", "price": 1200.00, "category": "Electronics", "stock": 50},
    {"product_id": 2, "name": "Wireless Mouse", "price": 25.00, "category": "Accessories", "stock": 200},
    {"product_id": 3, "name": "Mechanical Keyboard", "price": 75.00, "category": "Accessories", "stock": 100},
]


def seed_catalogue(repo) -> list:
    """Register the demo products that are not catalogued yet.

    Existing products are left alone, so seeding twice never resets stock.
    """
    seeded = []
    for entry in DEMO_PRODUCTS:
        if repo.lookup(entry["product_id"]) is not None:
            continue
        seeded.append(repo.add_product(**entry))

    logger.info("Catalogue seeded", added=len(seeded), total=len(DEMO_PRODUCTS))
    return seeded
