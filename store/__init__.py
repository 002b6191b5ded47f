"""Point-of-sale register with promotional pricing schemes."""

__version__ = "0.1.0"

from .errors import (
    StoreError,
    InvalidPricingSchemeError,
    ReceiptClosedError,
    errmsg,
)
from .items import SKU, Item, WeightedItem
from .pricing import (
    PricingScheme,
    MultiBuyPricingScheme,
    BundleDiscountPricingScheme,
    sum_prices,
)
from .receipt import Receipt, format_cents
from .register import Register
from .config import (
    configure_logging,
    get_log_level,
    pricing_scheme,
    pricing_scheme_from_config,
    registered_kinds,
)

__all__ = [
    "__version__",
    # Errors
    "StoreError",
    "InvalidPricingSchemeError",
    "ReceiptClosedError",
    "errmsg",
    # Items
    "SKU",
    "Item",
    "WeightedItem",
    # Pricing
    "PricingScheme",
    "MultiBuyPricingScheme",
    "BundleDiscountPricingScheme",
    "sum_prices",
    # Receipt and register
    "Receipt",
    "format_cents",
    "Register",
    # Config
    "configure_logging",
    "get_log_level",
    "pricing_scheme",
    "pricing_scheme_from_config",
    "registered_kinds",
]
