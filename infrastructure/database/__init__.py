"""
Infrastructure Database - Configuration et repositories SQLAlchemy
"""

from infrastructure.database.session import SessionLocal, engine, build_engine
from infrastructure.database.models import Base, UserModel, ProductModel, ReviewModel
from infrastructure.database.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyReviewRepository
)

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "UserModel",
    "ProductModel",
    "ReviewModel",
    "SQLAlchemyUserRepository",
    "SQLAlchemyProductRepository",
    "SQLAlchemyReviewRepository"
]
