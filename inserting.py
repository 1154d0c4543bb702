from models import Product
from promotions import BulkDiscount, BuyOneGetOneFree

# Reference catalog (code, name, price)
SAMPLE_PRODUCTS = [
    ("FR1", "Fruit tea", "3.11"),
    ("SR1", "Strawberries", "5.00"),
    ("CF1", "Coffee", "11.23"),
]


def build_catalog(rows=SAMPLE_PRODUCTS):
    return [Product(code=code, name=name, price=price) for code, name, price in rows]


def default_promotions():
    """Buy-one-get-one-free on fruit tea and the bulk strawberry deal."""
    return [
        BuyOneGetOneFree("FR1"),
        BulkDiscount("SR1"),
    ]


def pricing_rules():
    """Reference rules in the shape `Basket.from_pricing_rules` takes."""
    return {
        "products": build_catalog(),
        "promotions": default_promotions(),
    }
