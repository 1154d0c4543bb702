import os
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models import Product
from products import find_product, product_codes


class CatalogLookupTests(unittest.TestCase):
    def setUp(self):
        self.catalog = [
            Product(code='FR1', name='Fruit tea', price='3.11'),
            Product(code='SR1', name='Strawberries', price='5.00'),
            Product(code='FR1', name='Second fruit tea', price='9.99'),
        ]

    def test_find_returns_first_match(self):
        found = find_product(self.catalog, 'FR1')
        self.assertEqual(found.name, 'Fruit tea')

    def test_find_missing_returns_none(self):
        self.assertIsNone(find_product(self.catalog, 'CF1'))
        self.assertIsNone(find_product(self.catalog, 'fr1'))
        self.assertIsNone(find_product([], 'FR1'))

    def test_product_codes_keep_catalog_order(self):
        self.assertEqual(product_codes(self.catalog), ['FR1', 'SR1', 'FR1'])


if __name__ == '__main__':
    unittest.main()
