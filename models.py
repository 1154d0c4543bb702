import logging
from collections.abc import Mapping, Sequence
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from errors import ConfigurationError, InvalidArgumentError, ProductNotFoundError
from products import find_product, product_codes

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def as_money(value):
    """Coerce a price or discount to Decimal; floats go through str() so 3.11 stays 3.11."""
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _is_sequence(value):
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


#product model
class Product(BaseModel):
    """A catalog entry. Frozen once built."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    name: str
    price: Decimal = Field(ge=0)

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_money(cls, value):
        if isinstance(value, float):
            return str(value)
        return value

    @classmethod
    def from_row(cls, row):
        """Build a product from a mapping, accepting `productCode` as an alias for `code`."""
        return cls(
            code=row.get("code", row.get("productCode")),
            name=row.get("name"),
            price=row.get("price"),
        )


#basket model
class Basket:
    """Ordered multiset of item codes priced against a catalog and a list of promotions.

    The catalog and promotions are held by reference and never modified.
    Item codes are only checked against the catalog when `total()` runs.
    """

    def __init__(self, catalog, promotions=None):
        if not _is_sequence(catalog):
            raise ConfigurationError("Need a sequence of products (code, name, price)")

        if promotions is None:
            promotions = []
        elif not _is_sequence(promotions):
            raise ConfigurationError("Promotions need to be a sequence")

        self.catalog = catalog
        self.promotions = promotions
        self.items = []
        logger.debug("Basket created with %d products and %d promotions",
                     len(catalog), len(promotions))

    @classmethod
    def from_pricing_rules(cls, rules):
        """Build a basket from a mapping with `products` and optional `promotions` keys.

        Product rows given as mappings are converted with `Product.from_row`;
        a catalog made only of `Product` instances is passed through as is.
        """
        if not isinstance(rules, Mapping) or "products" not in rules:
            raise ConfigurationError("Pricing rules need a 'products' entry")

        products = rules["products"]
        if _is_sequence(products) and any(not isinstance(p, Product) for p in products):
            converted = []
            for row in products:
                if isinstance(row, Product):
                    converted.append(row)
                    continue
                if not isinstance(row, Mapping):
                    raise ConfigurationError(f"Cannot build a product from {row!r}")
                try:
                    converted.append(Product.from_row(row))
                except ValidationError as e:
                    raise ConfigurationError(f"Invalid product row {dict(row)!r}") from e
            products = converted

        return cls(products, rules.get("promotions"))

    def add(self, code):
        self.items.append(code)

    def add_many(self, *codes):
        """Add several codes at once: either one sequence or two or more codes.

            basket.add_many(["FR1", "SR1"])
            basket.add_many("FR1", "SR1")
        """
        if len(codes) > 1:
            added = codes
        elif len(codes) == 1 and _is_sequence(codes[0]):
            added = list(codes[0])
        else:
            raise InvalidArgumentError(
                "Need a sequence of product codes or several product codes")

        for code in added:
            self.add(code)

    def clear(self):
        self.items = []

    def __len__(self):
        return len(self.items)

    def gross_total(self, items=None):
        """Sum of catalog prices for `items` (the current items by default)."""
        if items is None:
            items = tuple(self.items)

        gross = ZERO
        for code in items:
            product = find_product(self.catalog, code)
            if product is None:
                logger.warning("Unfound product %r, catalog has %s",
                               code, product_codes(self.catalog))
                raise ProductNotFoundError(code)
            gross += product.price
        return gross

    def discount_total(self, items=None):
        """Sum of every promotion's discount, each promotion called once in order."""
        if items is None:
            items = tuple(self.items)

        savings = ZERO
        for promotion in self.promotions:
            discount = as_money(promotion(items, self.catalog))
            logger.debug("Promotion %r took %s off", promotion, discount)
            savings += discount
        return savings

    def total(self):
        """Net total: gross price of all items minus all promotion discounts.

        Not floored at zero; discounts larger than the gross give a negative total.
        """
        items = tuple(self.items)
        gross = self.gross_total(items)
        savings = self.discount_total(items)
        net = gross - savings
        logger.debug("Basket of %d items: gross %s, discount %s, net %s",
                     len(items), gross, savings, net)
        return net
