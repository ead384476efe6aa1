"""Fixtures partagées : base SQLite en mémoire, client HTTP, repositories en mémoire."""

import os

# Doit précéder tout import de config / app
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from domain.entities import User, Product, Review
from domain.errors import DuplicateEmailError, ReferencedEntityNotFoundError
from domain.repositories import UserRepository, ProductRepository, ReviewRepository
from infrastructure.database.models import Base
from infrastructure.database.session import engine, SessionLocal


class FakePasswordHasher:
    """Hachage réversible et rapide pour les tests unitaires."""

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        return hashed_password == f"hashed:{plain_password}"


class InMemoryUserRepository(UserRepository):
    """Implémentation en mémoire de UserRepository pour les tests."""

    def __init__(self) -> None:
        self._users: List[User] = []
        self.save_calls = 0

    def find_by_id(self, user_id: int) -> Optional[User]:
        return next((u for u in self._users if u.user_id == user_id), None)

    def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users if u.email == email), None)

    def find_all(self) -> List[User]:
        return list(self._users)

    def save(self, user: User) -> User:
        self.save_calls += 1
        if self.find_by_email(user.email):
            raise DuplicateEmailError()
        user.user_id = len(self._users) + 1
        self._users.append(user)
        return user


class InMemoryProductRepository(ProductRepository):
    """Implémentation en mémoire de ProductRepository pour les tests."""

    def __init__(self) -> None:
        self._products: List[Product] = []
        self.save_calls = 0

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return next((p for p in self._products if p.product_id == product_id), None)

    def find_all(self) -> List[Product]:
        return list(self._products)

    def save(self, product: Product) -> Product:
        self.save_calls += 1
        product.product_id = len(self._products) + 1
        self._products.append(product)
        return product


class InMemoryReviewRepository(ReviewRepository):
    """Implémentation en mémoire de ReviewRepository pour les tests."""

    def __init__(self, product_ids=(1,), user_ids=(1, 2)) -> None:
        self._reviews: List[Review] = []
        self._product_ids = set(product_ids)
        self._user_ids = set(user_ids)
        self.save_calls = 0

    def find_by_id(self, review_id: str) -> Optional[Review]:
        return next((r for r in self._reviews if r.review_id == review_id), None)

    def find_by_product_id(self, product_id: int) -> List[Review]:
        return [r for r in reversed(self._reviews) if r.product_id == product_id]

    def save(self, review: Review) -> Review:
        self.save_calls += 1
        if review.product_id not in self._product_ids or review.user_id not in self._user_ids:
            raise ReferencedEntityNotFoundError()
        self._reviews.append(review)
        return review

    def erase(self, review_id: str) -> None:
        self._reviews = [r for r in self._reviews if r.review_id != review_id]


@pytest.fixture
def password_hasher():
    return FakePasswordHasher()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def product_repository():
    return InMemoryProductRepository()


@pytest.fixture
def review_repository():
    return InMemoryReviewRepository()


@pytest.fixture
def db_tables():
    """Recrée un schéma vide pour chaque test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(db_tables):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_tables):
    from app import app

    return TestClient(app)


def register(client, name="Alice", email="alice@example.com", password="password123"):
    return client.post(
        "/api/users/register",
        json={"name": name, "email": email, "password": password},
    )


def login(client, email="alice@example.com", password="password123"):
    return client.post("/api/users/login", json={"email": email, "password": password})


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user_token(client):
    """Inscrit un utilisateur puis retourne son token."""

    def _make(name="Alice", email="alice@example.com", password="password123"):
        assert register(client, name, email, password).status_code == 200
        response = login(client, email, password)
        assert response.status_code == 200
        return response.json()["token"]

    return _make


@pytest.fixture
def product_id(client, make_user_token):
    """Crée un produit via l'API et retourne son ID."""
    token = make_user_token(name="Admin", email="admin@example.com")
    response = client.post(
        "/api/products",
        json={
            "name": "Cream",
            "manufacturer": "Acme",
            "category": "skin_care",
            "ingredients": ["water", "glycerin"],
        },
        headers=auth_headers(token),
    )
    assert response.status_code == 200
    return response.json()["product"]["id"]
