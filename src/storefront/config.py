"""Store settings read from the environment.

Protean's own configuration (providers, processing mode) lives in
``domain.toml``; this module holds the checkout knobs that are not Protean's
business.
"""

import os
from dataclasses import dataclass

DEFAULT_SHIPPING_FEE = 30.0
SHIPPING_ADAPTERS = ("console", "fake")


@dataclass(frozen=True)
class StoreSettings:
    """Checkout settings for the storefront."""

    shipping_fee: float = DEFAULT_SHIPPING_FEE
    shipping_adapter: str = "console"


def get_settings() -> StoreSettings:
    """Build settings from ``STOREFRONT_SHIPPING_FEE`` and ``SHIPPING_ADAPTER``."""
    raw_fee = os.environ.get("STOREFRONT_SHIPPING_FEE")
    if raw_fee is None or raw_fee.strip() == "":
        shipping_fee = DEFAULT_SHIPPING_FEE
    else:
        try:
            shipping_fee = float(raw_fee)
        except ValueError:
            raise ValueError(f"Invalid STOREFRONT_SHIPPING_FEE: {raw_fee!r}") from None
        if shipping_fee < 0:
            raise ValueError(f"STOREFRONT_SHIPPING_FEE must not be negative, got {shipping_fee}")

    adapter = os.environ.get("SHIPPING_ADAPTER", "console").strip().lower()
    if adapter not in SHIPPING_ADAPTERS:
        raise ValueError(f"Unknown shipping adapter: {adapter}")

    return StoreSettings(shipping_fee=shipping_fee, shipping_adapter=adapter)
