"""Register: accumulates scans into the current receipt.

``total()`` is the transaction boundary. It hands the current receipt to the
caller and starts a fresh, empty one with no pricing scheme.
"""

from __future__ import annotations

import structlog

from .items import SKU
from .pricing import PricingScheme, sum_prices
from .receipt import Receipt


class Register:
    """A single checkout lane, owned by one caller at a time."""

    def __init__(self, logger: structlog.BoundLogger | None = None) -> None:
        self._log = logger or structlog.get_logger(component="register")
        self._receipt = Receipt()

    @property
    def receipt(self) -> Receipt:
        """The in-progress receipt."""
        return self._receipt

    def scan(self, item: SKU) -> None:
        self._receipt.add(item)
        self._log.debug("item_scanned", name=item.name)

    def subtotal(self) -> int:
        """Running total of raw item prices, ignoring any pricing scheme."""
        return sum_prices(self._receipt.items())

    def apply_pricing_scheme(self, scheme: PricingScheme) -> None:
        self._receipt.set_pricing_scheme(scheme)
        self._log.info("pricing_scheme_applied", scheme=type(scheme).__name__)

    def total(self) -> Receipt:
        """Close the transaction and return its receipt."""
        receipt, self._receipt = self._receipt, Receipt()
        receipt.close()
        self._log.info(
            "transaction_closed",
            item_count=len(receipt),
            total_cents=receipt.total(),
        )
        return receipt
