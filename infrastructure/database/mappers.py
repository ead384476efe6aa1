"""
Mappers - Conversion entre modèles SQLAlchemy et entités de domaine
"""

import json
from typing import List, Optional
from infrastructure.database.models import (
    UserModel, ProductModel, ReviewModel
)
from domain.entities import User, Product, Review


def serialize_ingredients(ingredients: List[str]) -> str:
    """Sérialise la liste des ingrédients en tableau JSON (ordre conservé)"""
    return json.dumps(list(ingredients or []), ensure_ascii=False)


def deserialize_ingredients(raw: Optional[str]) -> List[str]:
    """
    Reconstruit la liste des ingrédients.

    Les anciennes lignes stockées au format "a,b,c" sont découpées sur la virgule.
    """
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        value = None

    if isinstance(value, list):
        return [str(item) for item in value]

    return [item.strip() for item in raw.split(",") if item.strip()]


class UserMapper:
    """Mapper entre UserModel et User"""

    @staticmethod
    def to_domain(model: UserModel) -> User:
        """Convertit un UserModel en entité User"""
        return User(
            user_id=model.user_id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at
        )

    @staticmethod
    def to_model(user: User, model: Optional[UserModel] = None) -> UserModel:
        """Convertit une entité User en UserModel"""
        if model is None:
            model = UserModel()

        if user.user_id is not None:
            model.user_id = user.user_id
        model.name = user.name
        model.email = user.email
        model.password_hash = user.password_hash
        if user.created_at is not None:
            model.created_at = user.created_at

        return model


class ProductMapper:
    """Mapper entre ProductModel et Product"""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        """
        Convertit un ProductModel en entité Product.
        Lève UndefinedCategoryError si la catégorie stockée est inconnue.
        """
        return Product(
            product_id=model.product_id,
            name=model.name,
            manufacturer=model.manufacturer,
            category=model.category,
            ingredients=deserialize_ingredients(model.ingredients),
            created_at=model.created_at
        )

    @staticmethod
    def to_model(product: Product, model: Optional[ProductModel] = None) -> ProductModel:
        """Convertit une entité Product en ProductModel"""
        if model is None:
            model = ProductModel()

        if product.product_id is not None:
            model.product_id = product.product_id
        model.name = product.name
        model.manufacturer = product.manufacturer
        model.category = product.category.value
        model.ingredients = serialize_ingredients(product.ingredients)
        if product.created_at is not None:
            model.created_at = product.created_at

        return model


class ReviewMapper:
    """Mapper entre ReviewModel et Review"""

    @staticmethod
    def to_domain(model: ReviewModel) -> Review:
        """Convertit un ReviewModel en entité Review"""
        return Review(
            review_id=model.review_id,
            product_id=model.product_id,
            user_id=model.user_id,
            rating=model.rating,
            comment=model.comment or "",
            created_at=model.created_at
        )

    @staticmethod
    def to_model(review: Review, model: Optional[ReviewModel] = None) -> ReviewModel:
        """Convertit une entité Review en ReviewModel (created_at attribué à l'insertion)"""
        if model is None:
            model = ReviewModel()

        model.review_id = review.review_id
        model.product_id = review.product_id
        model.user_id = review.user_id
        model.rating = review.rating
        model.comment = review.comment
        if review.created_at is not None:
            model.created_at = review.created_at

        return model
