"""Shipping adapter factory.

Provides get_shipper() / set_shipper() to swap implementations:
- ConsoleShippingService prints notices (default)
- FakeShippingService records them for tests

The default is chosen by the SHIPPING_ADAPTER environment variable.
"""

from storefront.config import get_settings
from storefront.shipping.port import ShippingService

_current_shipper: ShippingService | None = None


def get_shipper() -> ShippingService:
    """Return the current shipping service, building the configured one on first use."""
    global _current_shipper
    if _current_shipper is None:
        adapter = get_settings().shipping_adapter
        if adapter == "fake":
            from storefront.shipping.fake_adapter import FakeShippingService

            _current_shipper = FakeShippingService()
        else:
            from storefront.shipping.console_adapter import ConsoleShippingService

            _current_shipper = ConsoleShippingService()
    return _current_shipper


def set_shipper(shipper: ShippingService) -> None:
    """Override the active shipping service (useful for tests)."""
    global _current_shipper
    _current_shipper = shipper


def reset_shipper() -> None:
    """Reset to the configured default."""
    global _current_shipper
    _current_shipper = None
