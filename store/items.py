"""Priceable items.

All prices are integer minor units (cents). Weighted items are the only
place floating point appears, and the result is truncated to cents.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class SKU(ABC):
    """
    Base class for anything that can be scanned at a register.

    Subclasses expose a display ``name`` and an integer ``price()``.
    Two SKUs with the same name are distinct physical units.
    """

    name: str

    @abstractmethod
    def price(self) -> int:
        """Return the price of this unit in cents."""
        pass


@dataclass(frozen=True)
class Item(SKU):
    """A fixed-price item, priced per unit."""

    name: str
    price_each: int

    def price(self) -> int:
        return self.price_each


@dataclass(frozen=True)
class WeightedItem(SKU):
    """An item sold by weight.

    ``price_per_unit`` is in major units (dollars per pound, say) and
    ``weight`` in the same unit of measure.
    """

    name: str
    price_per_unit: float
    weight: float

    def price(self) -> int:
        # Truncates toward zero, no rounding: 8.99 * 1.1 -> 988
        return int(self.price_per_unit * self.weight * 100)
