"""Pricing schemes.

A pricing scheme computes the total of a whole basket. Discounts depend on
cross-item counts, so every scheme is handed the full list of scanned items
each time a total is requested and keeps no state between calls.

Uniform price policy: the discount schemes price every unit of a name at the
price of the first unit of that name in the basket. Baskets where same-named
units carry different prices are totalled using that first price. Only
``sum_prices`` (the no-scheme path) prices each unit individually.
"""

from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from .errors import InvalidPricingSchemeError, errmsg
from .items import SKU


def sum_prices(items: Sequence[SKU]) -> int:
    """Total a basket with no promotions applied."""
    return sum(item.price() for item in items)


def _is_whole(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _first_by_name(items: Sequence[SKU]) -> dict[str, SKU]:
    first: dict[str, SKU] = {}
    for item in items:
        first.setdefault(item.name, item)
    return first


class PricingScheme(ABC):
    """Strategy for totalling a basket under a promotion."""

    @abstractmethod
    def get_price(self, items: Sequence[SKU]) -> int:
        """Return the total for ``items`` in cents."""
        pass


@dataclass(frozen=True)
class MultiBuyPricingScheme(PricingScheme):
    """Buy ``buy`` units of one item, pay for ``pay_for`` of them.

    The default is 3-for-2: three cans of beans cost the price of two.
    Units left over after the last full group are charged full price, so
    five units cost four.
    """

    item_name: str
    buy: int = 3
    pay_for: int = 2

    def __post_init__(self) -> None:
        if not self.item_name:
            raise InvalidPricingSchemeError(errmsg.ITEM_NAME_REQUIRED)
        if not _is_whole(self.buy):
            raise InvalidPricingSchemeError(errmsg.BUY_INTEGER)
        if not _is_whole(self.pay_for):
            raise InvalidPricingSchemeError(errmsg.PAY_FOR_INTEGER)
        if self.buy < 1:
            raise InvalidPricingSchemeError(errmsg.BUY_POSITIVE)
        if not 0 <= self.pay_for <= self.buy:
            raise InvalidPricingSchemeError(errmsg.PAY_FOR_RANGE)

    def get_price(self, items: Sequence[SKU]) -> int:
        eligible = [item for item in items if item.name == self.item_name]
        if not eligible:
            return sum_prices(items)

        unit_price = eligible[0].price()
        groups, remainder = divmod(len(eligible), self.buy)
        discounted = groups * self.pay_for * unit_price + remainder * unit_price

        others = [item for item in items if item.name != self.item_name]
        return discounted + sum_prices(others)


@dataclass(frozen=True)
class BundleDiscountPricingScheme(PricingScheme):
    """Take ``percent_off`` off both items of every matched pair.

    Each ``item1`` scanned alongside an ``item2`` forms a pair; both units of
    the pair get the discount. Unpaired units are charged full price. The
    discounted unit price is truncated to whole cents.
    """

    item1: str
    item2: str
    percent_off: int = 10

    def __post_init__(self) -> None:
        if not self.item1 or not self.item2:
            raise InvalidPricingSchemeError(errmsg.ITEM_NAME_REQUIRED)
        if self.item1 == self.item2:
            raise InvalidPricingSchemeError(errmsg.BUNDLE_NAMES_DISTINCT)
        if not _is_whole(self.percent_off):
            raise InvalidPricingSchemeError(errmsg.PERCENT_INTEGER)
        if not 0 <= self.percent_off <= 100:
            raise InvalidPricingSchemeError(errmsg.PERCENT_RANGE)

    def discounted(self, unit_price: int) -> int:
        """Return the bundled price of one unit, truncated to cents."""
        return unit_price * (100 - self.percent_off) // 100

    def get_price(self, items: Sequence[SKU]) -> int:
        counts = Counter(item.name for item in items)
        first = _first_by_name(items)
        paired = min(counts[self.item1], counts[self.item2])

        total = 0
        for name, count in counts.items():
            unit_price = first[name].price()
            if name in (self.item1, self.item2):
                total += paired * self.discounted(unit_price)
                total += (count - paired) * unit_price
            else:
                total += count * unit_price
        return total
