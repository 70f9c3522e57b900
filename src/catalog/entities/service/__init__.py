"""Catalog entities: domain model, table and repository per aggregate."""

from .category import Category, CategoryRepository, CategoryTable
from .product import Product, ProductRepository, ProductTable

__all__ = [
    "Category",
    "CategoryRepository",
    "CategoryTable",
    "Product",
    "ProductRepository",
    "ProductTable",
]
