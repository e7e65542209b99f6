"""Storefront bounded context: products, customers, carts and checkout.

A single in-memory domain: products carry stock and optional expiry/weight,
customers carry a balance, and checkout settles a cart against that balance.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
