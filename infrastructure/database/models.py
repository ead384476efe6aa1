"""
Modèles SQLAlchemy - Schéma relationnel (users, products, reviews)
"""

from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, DateTime, Integer, ForeignKey
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserModel(Base):
    """Modèle SQLAlchemy pour les utilisateurs"""
    __tablename__ = "users"
    
    user_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=_utc_now, nullable=False)

    reviews = relationship("ReviewModel", back_populates="user")


class ProductModel(Base):
    """Modèle SQLAlchemy pour les produits"""
    __tablename__ = "products"
    
    product_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    manufacturer = Column(String, nullable=False)
    category = Column(String, nullable=False)
    ingredients = Column(Text, nullable=False, default="[]")  # Liste JSON stringifiée
    created_at = Column(DateTime, default=_utc_now, nullable=False)

    reviews = relationship("ReviewModel", back_populates="product")


class ReviewModel(Base):
    """Modèle SQLAlchemy pour les avis"""
    __tablename__ = "reviews"
    
    review_id = Column(String, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.product_id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, default=_utc_now, nullable=False, index=True)

    product = relationship("ProductModel", back_populates="reviews")
    user = relationship("UserModel", back_populates="reviews")
