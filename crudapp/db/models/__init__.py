"""
Модели базы данных.

Импортирует все модели для корректной работы SQLAlchemy.
"""

from .base import Base
from .category import Category
from .product import Product

__all__ = [
    "Base",
    "Category",
    "Product",
]
