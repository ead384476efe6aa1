"""
Repositories - Interfaces pour l'accès aux données
"""

from domain.repositories.user_repository import UserRepository
from domain.repositories.product_repository import ProductRepository
from domain.repositories.review_repository import ReviewRepository

__all__ = [
    "UserRepository",
    "ProductRepository",
    "ReviewRepository"
]
