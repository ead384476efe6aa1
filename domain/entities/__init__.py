"""
Entités du domaine
"""

from domain.entities.user import User, create_user
from domain.entities.product import (
    Product, ProductCategory, create_product, validate_product_category
)
from domain.entities.review import Review, create_review

__all__ = [
    "User",
    "Product",
    "ProductCategory",
    "Review",
    "create_user",
    "create_product",
    "create_review",
    "validate_product_category"
]
