"""Receipt: the items of one transaction plus its active pricing scheme."""

from typing import Optional

from .errors import ReceiptClosedError, errmsg
from .items import SKU
from .pricing import PricingScheme, sum_prices

SEPARATOR = "-" * 18


def format_cents(cents: int) -> str:
    """Render cents as dollars with exactly two decimals (199 -> "1.99")."""
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(cents), 100)
    return f"{sign}{dollars}.{remainder:02d}"


class Receipt:
    """Scanned items of a single transaction, in scan order.

    With no pricing scheme attached the total is the plain sum of item
    prices. ``Register.total()`` closes the receipt before handing it back;
    a closed receipt rejects further items and scheme changes.
    """

    def __init__(self) -> None:
        self._items: list[SKU] = []
        self._pricing_scheme: Optional[PricingScheme] = None
        self._closed = False

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> list[SKU]:
        """Return a copy of the scanned items."""
        return list(self._items)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise ReceiptClosedError(errmsg.RECEIPT_CLOSED)

    def add(self, item: SKU) -> None:
        self._check_open()
        self._items.append(item)

    @property
    def pricing_scheme(self) -> Optional[PricingScheme]:
        return self._pricing_scheme

    def set_pricing_scheme(self, scheme: PricingScheme) -> None:
        self._check_open()
        self._pricing_scheme = scheme

    def total(self) -> int:
        """Return the transaction total in cents."""
        if self._pricing_scheme is None:
            return sum_prices(self._items)
        return self._pricing_scheme.get_price(self._items)

    def output(self) -> str:
        """Format a human-readable receipt."""
        lines = ["Receipt:"]

        for item in self._items:
            lines.append(f"{item.name}: ${format_cents(item.price())}")

        lines.append(SEPARATOR)
        lines.append(f"TOTAL: ${format_cents(self.total())}")

        return "\n".join(lines)
