"""Errors raised by the basket pricing engine."""


class BasketError(Exception):
    """Base class for every error the engine raises."""


class ConfigurationError(BasketError):
    """The catalog or promotion list given to a basket is malformed."""


class InvalidArgumentError(BasketError, ValueError):
    """A basket method was called with arguments of the wrong shape."""


class ProductNotFoundError(BasketError, LookupError):
    """An item code in the basket has no match in the catalog."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"Product not found in catalog: {code!r}")
