"""Storefront management CLI.

Runs a console walkthrough of the fulfillment engine against the in-memory
demo catalogue.

Usage:
    python src/manage.py demo                      # Place, ship and cancel orders
    python src/manage.py demo --decline-payments   # Same, with every payment refused
"""

import argparse
import sys

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def print_catalogue(repo):
    print("\nCatalogue:")
    for product in sorted(repo.list_all(), key=lambda p: p.product_id):
        print(f"  [{product.product_id}] {product.name:<22} {product.price:>9.2f}  stock={product.stock}")


def run_demo(decline_payments=False):
    """Walk through placement, shipment and cancellation."""
    from protean.utils.globals import current_domain

    from storefront.catalogue.product import Product
    from storefront.catalogue.seed import seed_catalogue
    from storefront.domain import storefront
    from storefront.errors import FulfillmentError
    from storefront.fulfillment import get_engine, reset_engine
    from storefront.fulfillment.results import LineRequest
    from storefront.payments import get_payment_authority

    print("Initializing storefront domain...")
    storefront.init()

    with storefront.domain_context():
        catalogue = current_domain.repository_for(Product)
        seed_catalogue(catalogue)
        print_catalogue(catalogue)

        get_payment_authority().configure(
            should_succeed=not decline_payments,
            failure_reason="Card declined (demo)",
        )
        engine = get_engine()

        print("\nPlacing order for cust-001: 1 x Laptop Pro, 2 x Wireless Mouse")
        try:
            order = engine.place_order("cust-001", [LineRequest(1, 1), LineRequest(2, 2)])
        except FulfillmentError as exc:
            print(f"  Order failed: {exc}")
            print_catalogue(catalogue)
            reset_engine()
            return 1
        print(f"  Order #{order.order_id} {order.status}, total {order.total_amount:.2f}")

        result = engine.ship_order(order.order_id)
        print(f"  Ship order #{order.order_id}: {result.outcome.value}")

        result = engine.cancel_order(order.order_id, "Changed my mind")
        print(f"  Cancel shipped order #{order.order_id}: {result.outcome.value} (status {result.status})")

        print("\nPlacing order for cust-002: 3 x Mechanical Keyboard")
        second = engine.place_order("cust-002", [LineRequest(3, 3)])
        print(f"  Order #{second.order_id} {second.status}, total {second.total_amount:.2f}")

        result = engine.cancel_order(second.order_id, "Found a better price")
        print(f"  Cancel order #{second.order_id}: {result.outcome.value}, reason: {result.reason}")
        result = engine.cancel_order(second.order_id)
        print(f"  Cancel again: {result.outcome.value}")

        print("\nPlacing order for cust-003: 60 x Laptop Pro")
        try:
            engine.place_order("cust-003", [LineRequest(1, 60)])
        except FulfillmentError as exc:
            print(f"  Order failed: {exc}")

        print_catalogue(catalogue)
        reset_engine()

    logger.info("Demo complete", decline_payments=decline_payments)
    print("\nDone.")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser("demo", help="Run the fulfillment walkthrough")
    demo_parser.add_argument(
        "--decline-payments",
        action="store_true",
        help="Configure the fake payment authority to refuse every charge",
    )

    args = parser.parse_args()

    if args.command == "demo":
        sys.exit(run_demo(decline_payments=args.decline_payments))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
