"""
cosme-review-api/api/endpoints.py
Endpoints de l'API (utilisateurs, produits, avis)
"""

import uuid
import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Query

from api.auth import get_current_user
from api.schemas import (
    MAX_ID,
    ErrorResponse, ValidationErrorResponse, MessageResponse,
    UserRegister, UserLogin, UserResponse, UserRegisteredResponse,
    LoginResponse, UserListResponse,
    ProductCreate, ProductResponse, ProductCreatedResponse,
    ReviewCreate, ReviewResponse, ReviewCreatedResponse, ReviewListResponse
)
from application.services.user_service import UserService
from application.services.product_service import ProductService
from application.services.review_service import ReviewService
from domain.entities import User
from domain.errors import UnauthorizedError
from infrastructure.dependencies import (
    get_user_service, get_product_service, get_review_service, get_jwt_service
)
from infrastructure.security.jwt_service import JWTService

logger = logging.getLogger(__name__)
user_router = APIRouter(tags=["Users"])
product_router = APIRouter(tags=["Products"])
review_router = APIRouter(tags=["Reviews"])

# Réponses d'erreur documentées dans OpenAPI
BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Invalid input"}}
UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Unauthorized"}}
FORBIDDEN = {403: {"model": ErrorResponse, "description": "Forbidden"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Not found"}}

# ============================================================================
# UTILISATEURS
# ============================================================================

@user_router.post("/users/register", response_model=UserRegisteredResponse, responses={**BAD_REQUEST})
def register_user(
    user_in: UserRegister,
    user_service: UserService = Depends(get_user_service)
):
    """
    Inscrit un nouvel utilisateur.
    400 si l'email est déjà utilisé ou si l'entrée est invalide.
    """
    user = user_service.register(user_in.name, user_in.email, user_in.password)
    return {"message": "User registered", "user": UserResponse.from_entity(user)}


@user_router.post("/users/login", response_model=LoginResponse, responses={**BAD_REQUEST, **UNAUTHORIZED})
def login(
    credentials: UserLogin,
    user_service: UserService = Depends(get_user_service),
    jwt_service: JWTService = Depends(get_jwt_service)
):
    """Fournit un token JWT en échange de email/password"""
    user = user_service.authenticate(credentials.email, credentials.password)
    if not user:
        raise UnauthorizedError("Invalid email or password")

    token = jwt_service.create_user_token(user.user_id)
    return {"message": "Login successful", "token": token}


@user_router.get("/users", response_model=UserListResponse, responses={**UNAUTHORIZED})
def list_users(
    user_service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user)
):
    """[JWT Protégé] Liste les utilisateurs"""
    users = user_service.get_all_users()
    return {"users": [UserResponse.from_entity(user) for user in users]}

# ============================================================================
# PRODUITS
# ============================================================================

@product_router.get("/products", response_model=List[ProductResponse])
def list_products(product_service: ProductService = Depends(get_product_service)):
    """Liste tous les produits"""
    products = product_service.get_all_products()
    return [ProductResponse.from_entity(product) for product in products]


@product_router.get("/products/{product_id}", response_model=ProductResponse, responses={**BAD_REQUEST, **NOT_FOUND})
def get_product(
    product_id: int = Path(..., gt=0, le=MAX_ID),
    product_service: ProductService = Depends(get_product_service)
):
    """Détail d'un produit"""
    product = product_service.get_product(product_id)
    return ProductResponse.from_entity(product)


@product_router.post("/products", response_model=ProductCreatedResponse, responses={**BAD_REQUEST, **UNAUTHORIZED})
def create_product(
    product_in: ProductCreate,
    product_service: ProductService = Depends(get_product_service),
    current_user: User = Depends(get_current_user)
):
    """[JWT Protégé] Crée un produit"""
    product = product_service.create_product(
        name=product_in.name,
        manufacturer=product_in.manufacturer,
        category=product_in.category,
        ingredients=product_in.ingredients
    )
    logger.info(f"Product {product.product_id} created by user {current_user.user_id}")
    return {"message": "Product created", "product": ProductResponse.from_entity(product)}

# ============================================================================
# AVIS
# ============================================================================

@review_router.get("/reviews", response_model=ReviewListResponse, responses={**BAD_REQUEST})
def list_reviews(
    product_id: int = Query(..., alias="productId", gt=0, le=MAX_ID),
    review_service: ReviewService = Depends(get_review_service)
):
    """Liste les avis d'un produit (?productId=)"""
    reviews = review_service.get_reviews_for_product(product_id)
    return {
        "message": "Reviews fetched",
        "reviews": [ReviewResponse.from_entity(review) for review in reviews]
    }


@review_router.post(
    "/reviews",
    response_model=ReviewCreatedResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED, **NOT_FOUND}
)
def create_review(
    review_in: ReviewCreate,
    review_service: ReviewService = Depends(get_review_service),
    current_user: User = Depends(get_current_user)
):
    """
    [JWT Protégé] Publie un avis au nom de l'utilisateur connecté.
    404 si le produit n'existe pas, 400 si la note est hors de 1..7.
    """
    review = review_service.create_review(
        product_id=review_in.product_id,
        user_id=current_user.user_id,
        rating=review_in.rating,
        comment=review_in.comment
    )
    return {"message": "Review created", "review": ReviewResponse.from_entity(review)}


@review_router.delete(
    "/reviews/{review_id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED, **FORBIDDEN, **NOT_FOUND}
)
def delete_review(
    review_id: uuid.UUID,
    review_service: ReviewService = Depends(get_review_service),
    current_user: User = Depends(get_current_user)
):
    """[JWT Protégé] Supprime un avis (réservé à son auteur)"""
    review_service.delete_review(str(review_id), current_user.user_id)
    return {"message": "Review deleted"}
