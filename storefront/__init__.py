"""Storefront core: product catalog, catalog queries and Braintree checkout"""

__version__ = "0.1.0"
