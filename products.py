#Catalog lookups
def find_product(catalog, code):
    """Return the first product in `catalog` whose code equals `code`, or None."""
    for product in catalog:
        if product.code == code:
            return product
    return None


def product_codes(catalog):
    return [product.code for product in catalog]
