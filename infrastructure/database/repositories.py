"""
Implémentations des repositories SQLAlchemy

Les erreurs du moteur de stockage sont traduites ici en erreurs du domaine :
les couches supérieures n'inspectent jamais d'IntegrityError.
"""

import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from domain.entities import User, Product, Review
from domain.errors import (
    DuplicateEmailError, ReferencedEntityNotFoundError, UndefinedCategoryError
)
from domain.repositories import (
    UserRepository, ProductRepository, ReviewRepository
)
from infrastructure.database.models import (
    UserModel, ProductModel, ReviewModel
)
from infrastructure.database.mappers import (
    UserMapper, ProductMapper, ReviewMapper
)

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError, column: str) -> bool:
    message = str(error.orig).lower()
    return column in message and ("unique" in message or "duplicate" in message)


def _is_foreign_key_violation(error: IntegrityError) -> bool:
    return "foreign key" in str(error.orig).lower()


class SQLAlchemyUserRepository(UserRepository):
    """Implémentation SQLAlchemy du UserRepository"""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Trouve un utilisateur par son ID"""
        model = self.session.query(UserModel).filter(UserModel.user_id == user_id).first()
        return UserMapper.to_domain(model) if model else None

    def find_by_email(self, email: str) -> Optional[User]:
        """Trouve un utilisateur par son email"""
        model = self.session.query(UserModel).filter(UserModel.email == email).first()
        return UserMapper.to_domain(model) if model else None

    def find_all(self) -> List[User]:
        """Retourne tous les utilisateurs"""
        models = self.session.query(UserModel).order_by(UserModel.user_id).all()
        return [UserMapper.to_domain(model) for model in models]

    def save(self, user: User) -> User:
        """Enregistre un utilisateur"""
        model = UserMapper.to_model(user)
        self.session.add(model)

        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if _is_unique_violation(e, "email"):
                logger.info(f"Duplicate email on user registration: {user.email}")
                raise DuplicateEmailError(cause=f"'{user.email}' is already registered")
            logger.error(f"Error saving user: {e}")
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Error saving user: {e}")
            raise

        self.session.refresh(model)
        return UserMapper.to_domain(model)


class SQLAlchemyProductRepository(ProductRepository):
    """Implémentation SQLAlchemy du ProductRepository"""

    def __init__(self, session: Session):
        self.session = session

    def _to_domain_or_skip(self, model: ProductModel) -> Optional[Product]:
        """Les lignes avec une catégorie inconnue sont ignorées (et journalisées)"""
        try:
            return ProductMapper.to_domain(model)
        except UndefinedCategoryError:
            logger.warning(
                f"Skipping product {model.product_id}: undefined category '{model.category}' in storage"
            )
            return None

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Trouve un produit par son ID"""
        model = self.session.query(ProductModel).filter(ProductModel.product_id == product_id).first()
        return self._to_domain_or_skip(model) if model else None

    def find_all(self) -> List[Product]:
        """Retourne tous les produits"""
        models = self.session.query(ProductModel).order_by(ProductModel.product_id).all()
        products = (self._to_domain_or_skip(model) for model in models)
        return [product for product in products if product is not None]

    def save(self, product: Product) -> Product:
        """Enregistre un produit"""
        model = ProductMapper.to_model(product)
        self.session.add(model)

        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Error saving product: {e}")
            raise

        self.session.refresh(model)
        return ProductMapper.to_domain(model)


class SQLAlchemyReviewRepository(ReviewRepository):
    """Implémentation SQLAlchemy du ReviewRepository"""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, review_id: str) -> Optional[Review]:
        """Trouve un avis par son ID"""
        model = self.session.query(ReviewModel).filter(ReviewModel.review_id == review_id).first()
        return ReviewMapper.to_domain(model) if model else None

    def find_by_product_id(self, product_id: int) -> List[Review]:
        """Trouve les avis d'un produit, du plus récent au plus ancien"""
        models = (
            self.session.query(ReviewModel)
            .filter(ReviewModel.product_id == product_id)
            .order_by(ReviewModel.created_at.desc())
            .all()
        )
        return [ReviewMapper.to_domain(model) for model in models]

    def save(self, review: Review) -> Review:
        """Enregistre un avis après vérification du produit et de l'utilisateur"""
        if self.session.get(ProductModel, review.product_id) is None:
            raise ReferencedEntityNotFoundError(
                "Product not found", cause=f"product {review.product_id} does not exist"
            )
        if self.session.get(UserModel, review.user_id) is None:
            raise ReferencedEntityNotFoundError(
                "User not found", cause=f"user {review.user_id} does not exist"
            )

        model = ReviewMapper.to_model(review)
        self.session.add(model)

        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if _is_foreign_key_violation(e):
                logger.info(f"Review {review.review_id} references a missing product or user")
                raise ReferencedEntityNotFoundError()
            logger.error(f"Error saving review: {e}")
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Error saving review: {e}")
            raise

        self.session.refresh(model)
        return ReviewMapper.to_domain(model)

    def erase(self, review_id: str) -> None:
        """Supprime un avis"""
        model = self.session.query(ReviewModel).filter(ReviewModel.review_id == review_id).first()
        if model is None:
            return

        try:
            self.session.delete(model)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Error erasing review {review_id}: {e}")
            raise
