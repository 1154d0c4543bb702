"""Promotions: each one looks at the whole basket and returns one discount amount.

A promotion is any callable taking ``(items, catalog)`` and returning a
non-negative amount. `Promotion` subclasses are callable, so the basket treats
them and plain functions the same way. Promotions must only read their inputs.
"""
import logging
from abc import ABC, abstractmethod
from decimal import Decimal

from models import ZERO, as_money
from products import find_product

logger = logging.getLogger(__name__)

BULK_THRESHOLD = 3
BULK_UNIT_DISCOUNT = Decimal("0.50")


class Promotion(ABC):

    @abstractmethod
    def discount(self, items, catalog):
        """Return the amount to take off a basket holding `items`."""

    def __call__(self, items, catalog):
        return self.discount(items, catalog)


class BuyOneGetOneFree(Promotion):
    """Every second unit of `code` is free."""

    def __init__(self, code):
        self.code = code

    def __repr__(self):
        return f"BuyOneGetOneFree({self.code!r})"

    def discount(self, items, catalog):
        # Withdrawn products earn nothing
        product = find_product(catalog, self.code)
        if product is None:
            logger.debug("%s skipped: %r is not in the catalog", self, self.code)
            return ZERO

        free_units = items.count(self.code) // 2
        return free_units * product.price


class BulkDiscount(Promotion):
    """Buying `threshold` or more units of `code` takes `unit_discount` off each unit."""

    def __init__(self, code, threshold=BULK_THRESHOLD, unit_discount=BULK_UNIT_DISCOUNT):
        self.code = code
        self.threshold = threshold
        self.unit_discount = as_money(unit_discount)

    def __repr__(self):
        return f"BulkDiscount({self.code!r}, threshold={self.threshold}, unit_discount={self.unit_discount})"

    def discount(self, items, catalog):
        if find_product(catalog, self.code) is None:
            logger.debug("%s skipped: %r is not in the catalog", self, self.code)
            return ZERO

        units = items.count(self.code)
        if units < self.threshold:
            return ZERO
        return self.unit_discount * units
