"""Tests unitaires des services applicatifs (repositories en mémoire)."""

import pytest

from application.services import UserService, ProductService, ReviewService
from domain.errors import (
    DuplicateEmailError, ForbiddenError, InvalidRatingError, NotFoundError,
    ReferencedEntityNotFoundError, UndefinedCategoryError, ValidationError
)


def test_register_and_authenticate(user_repository, password_hasher):
    service = UserService(user_repository, password_hasher)

    user = service.register("Alice", "alice@example.com", "password123")

    assert user.user_id == 1
    assert service.authenticate("alice@example.com", "password123") == user
    assert service.authenticate("alice@example.com", "wrong-password") is None
    assert service.authenticate("bob@example.com", "password123") is None


def test_register_duplicate_email(user_repository, password_hasher):
    service = UserService(user_repository, password_hasher)
    service.register("Alice", "alice@example.com", "password123")

    with pytest.raises(DuplicateEmailError):
        service.register("Alice 2", "alice@example.com", "password456")


def test_get_user_absent_raises_not_found(user_repository, password_hasher):
    service = UserService(user_repository, password_hasher)

    with pytest.raises(NotFoundError):
        service.get_user(1)


def test_create_product_with_undefined_category_does_not_persist(product_repository):
    service = ProductService(product_repository)

    with pytest.raises(UndefinedCategoryError):
        service.create_product("Cream", "Acme", "nail_care", ["water"])

    assert product_repository.save_calls == 0


def test_create_and_get_product(product_repository):
    service = ProductService(product_repository)

    product = service.create_product("Cream", "Acme", "fragrance", ["alcohol"])

    assert service.get_product(product.product_id) == product
    assert service.get_all_products() == [product]


def test_get_product_absent_raises_not_found(product_repository):
    with pytest.raises(NotFoundError):
        ProductService(product_repository).get_product(42)


@pytest.mark.parametrize("rating", [0, 8, -3])
def test_create_review_with_invalid_rating_does_not_persist(review_repository, rating):
    service = ReviewService(review_repository)

    with pytest.raises(InvalidRatingError):
        service.create_review(product_id=1, user_id=1, rating=rating)

    assert review_repository.save_calls == 0


def test_create_review_for_missing_product(review_repository):
    with pytest.raises(ReferencedEntityNotFoundError):
        ReviewService(review_repository).create_review(product_id=99, user_id=1, rating=5)


def test_get_reviews_for_product_rejects_invalid_id(review_repository):
    service = ReviewService(review_repository)

    for product_id in (0, -1):
        with pytest.raises(ValidationError):
            service.get_reviews_for_product(product_id)


def test_delete_review_by_owner(review_repository):
    service = ReviewService(review_repository)
    review = service.create_review(product_id=1, user_id=1, rating=5, comment="nice")

    service.delete_review(review.review_id, requester_id=1)

    assert service.get_reviews_for_product(1) == []


def test_delete_review_by_non_owner_is_forbidden(review_repository):
    service = ReviewService(review_repository)
    review = service.create_review(product_id=1, user_id=1, rating=5)

    with pytest.raises(ForbiddenError):
        service.delete_review(review.review_id, requester_id=2)

    assert service.get_review(review.review_id) == review


def test_delete_missing_review_raises_not_found(review_repository):
    with pytest.raises(NotFoundError):
        ReviewService(review_repository).delete_review("00000000-0000-4000-8000-000000000000", 1)
