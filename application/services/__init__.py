"""
Services applicatifs
"""

from application.services.user_service import UserService
from application.services.product_service import ProductService
from application.services.review_service import ReviewService

__all__ = [
    "UserService",
    "ProductService",
    "ReviewService"
]
