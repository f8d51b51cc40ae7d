"""Storefront bounded context — Catalogue, Orders and Fulfillment.

Holds the product catalogue and the order book (aggregates on the in-memory
provider) and the fulfillment engine that moves orders through their
lifecycle while keeping stock consistent.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_dir="logs", log_file_prefix="storefront")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
