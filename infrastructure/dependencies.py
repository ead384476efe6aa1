"""
Dépendances FastAPI pour l'injection de services
"""

from typing import Generator
from sqlalchemy.orm import Session
from fastapi import Depends

from infrastructure.database.session import SessionLocal
from infrastructure.database.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyReviewRepository
)
from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.jwt_service import JWTService
from application.services.user_service import UserService
from application.services.product_service import ProductService
from application.services.review_service import ReviewService
from config import Config

config = Config()


def get_db() -> Generator[Session, None, None]:
    """Dépendance pour obtenir une session de base de données"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_user_repository(db: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    """Dépendance pour obtenir le UserRepository"""
    return SQLAlchemyUserRepository(db)


def get_product_repository(db: Session = Depends(get_db)) -> SQLAlchemyProductRepository:
    """Dépendance pour obtenir le ProductRepository"""
    return SQLAlchemyProductRepository(db)


def get_review_repository(db: Session = Depends(get_db)) -> SQLAlchemyReviewRepository:
    """Dépendance pour obtenir le ReviewRepository"""
    return SQLAlchemyReviewRepository(db)


def get_password_hasher() -> PasswordHasher:
    """Dépendance pour obtenir le PasswordHasher"""
    return PasswordHasher()


def get_jwt_service() -> JWTService:
    """Dépendance pour obtenir le JWTService"""
    return JWTService(
        secret_key=config.jwt_secret_key,
        algorithm=config.jwt_algorithm,
        expire_minutes=config.jwt_expire_minutes
    )


def get_user_service(
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher)
) -> UserService:
    """Dépendance pour obtenir le UserService"""
    return UserService(user_repository, password_hasher)


def get_product_service(
    product_repository: SQLAlchemyProductRepository = Depends(get_product_repository)
) -> ProductService:
    """Dépendance pour obtenir le ProductService"""
    return ProductService(product_repository)


def get_review_service(
    review_repository: SQLAlchemyReviewRepository = Depends(get_review_repository)
) -> ReviewService:
    """Dépendance pour obtenir le ReviewService"""
    return ReviewService(review_repository)
