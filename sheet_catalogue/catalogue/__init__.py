"""
Consumer-side view of the normalized product list.
"""

from .product_catalogue import ALL, DEFAULT_PAGE_SIZE, SHOES, ProductCatalogue

__all__ = ['ALL', 'DEFAULT_PAGE_SIZE', 'SHOES', 'ProductCatalogue']
