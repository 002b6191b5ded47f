"""Error types and error message constants for the store register."""


class errmsg:
    """Error message constants for pricing schemes and receipts."""

    ITEM_NAME_REQUIRED = "item name is required"
    BUNDLE_NAMES_DISTINCT = "bundle items must have distinct names"
    BUY_INTEGER = "buy quantity must be an integer"
    BUY_POSITIVE = "buy quantity must be at least 1"
    PAY_FOR_INTEGER = "pay-for quantity must be an integer"
    PAY_FOR_RANGE = "pay-for quantity must be between 0 and the buy quantity"
    PERCENT_INTEGER = "percent off must be a whole number"
    PERCENT_RANGE = "percent off must be 0-100"
    CONFIG_KIND_REQUIRED = "config is missing 'kind'"
    UNKNOWN_KIND = "unknown pricing scheme kind"
    MISSING_KEY = "config is missing required key"
    BAD_VALUE = "config value has the wrong type"
    BUNDLE_ITEMS_PAIR = "bundle 'items' must name exactly two items"
    RECEIPT_CLOSED = "receipt is closed; scan into the register's new receipt"


class StoreError(Exception):
    """Base class for errors raised by the register and its pricing schemes.

    Subclasses set ``prefix`` to label the message. When raised with
    ``raise ... from exc`` the chained exception is exposed as ``cause``
    and appended to the message.
    """

    prefix = ""

    def __init__(self, message: str):
        self.message = f"{self.prefix}{message}"
        super().__init__(self.message)

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidPricingSchemeError(StoreError):
    """Pricing scheme configuration is malformed."""

    prefix = "invalid pricing scheme: "


class ReceiptClosedError(StoreError):
    """A receipt handed over by ``Register.total()`` was modified."""
