"""Logging setup and pricing scheme configuration.

Pricing schemes can be built from plain mappings (parsed from JSON, YAML or
environment by the caller)::

    pricing_scheme_from_config({"kind": "multi_buy", "item": "Beans (8oz Can)"})
    pricing_scheme_from_config(
        {"kind": "bundle", "items": ["Ketchup", "Mustard"], "percent_off": 10}
    )

New kinds register a factory with the ``pricing_scheme`` decorator.
"""

import logging
import os
from typing import Callable, Mapping

import structlog

from .errors import InvalidPricingSchemeError, errmsg
from .pricing import BundleDiscountPricingScheme, MultiBuyPricingScheme, PricingScheme

SchemeFactory = Callable[[Mapping], PricingScheme]

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_SCHEME_FACTORIES: dict[str, SchemeFactory] = {}


def get_log_level() -> int:
    """Get the log level from the environment.

    Environment variables:
        STORE_LOG_LEVEL: "debug", "info" (default), "warning", "error" or
            "critical". Unrecognised values fall back to "info".
    """
    name = os.environ.get("STORE_LOG_LEVEL", "info").lower()
    return _LOG_LEVELS.get(name, logging.INFO)


def configure_logging(level: int | None = None) -> None:
    """Configure structlog with JSON rendering and ISO timestamps."""
    if level is None:
        level = get_log_level()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def pricing_scheme(kind: str):
    """Decorator registering a factory for a config ``kind``.

    Example:
        @pricing_scheme("multi_buy")
        def build_multi_buy(config: Mapping) -> PricingScheme:
            return MultiBuyPricingScheme(config["item"])
    """

    def decorator(func: SchemeFactory) -> SchemeFactory:
        _SCHEME_FACTORIES[kind] = func
        return func

    return decorator


def registered_kinds() -> list[str]:
    return sorted(_SCHEME_FACTORIES)


def pricing_scheme_from_config(config: Mapping) -> PricingScheme:
    """Build a pricing scheme from a mapping with a ``kind`` key.

    Raises:
        InvalidPricingSchemeError: If the kind is missing or unknown, a
            required key is absent, a value has the wrong type, or the
            resulting scheme is malformed.
    """
    kind = config.get("kind")
    if not kind:
        raise InvalidPricingSchemeError(errmsg.CONFIG_KIND_REQUIRED)

    factory = _SCHEME_FACTORIES.get(kind)
    if factory is None:
        raise InvalidPricingSchemeError(f"{errmsg.UNKNOWN_KIND}: {kind}")

    try:
        return factory(config)
    except KeyError as e:
        raise InvalidPricingSchemeError(errmsg.MISSING_KEY) from e
    except (TypeError, ValueError) as e:
        raise InvalidPricingSchemeError(errmsg.BAD_VALUE) from e


@pricing_scheme("multi_buy")
def _build_multi_buy(config: Mapping) -> PricingScheme:
    return MultiBuyPricingScheme(
        item_name=config["item"],
        buy=config.get("buy", 3),
        pay_for=config.get("pay_for", 2),
    )


@pricing_scheme("bundle")
def _build_bundle(config: Mapping) -> PricingScheme:
    items = config["items"]
    if isinstance(items, str) or len(items) != 2:
        raise InvalidPricingSchemeError(errmsg.BUNDLE_ITEMS_PAIR)
    item1, item2 = items
    return BundleDiscountPricingScheme(
        item1=item1,
        item2=item2,
        percent_off=config.get("percent_off", 10),
    )
