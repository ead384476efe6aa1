"""
cosme-review-api/api/schemas.py
Schémas Pydantic pour la validation et la sérialisation
"""

from typing import Annotated, Optional, List
from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictInt, StringConstraints, field_serializer
from datetime import datetime

from domain.entities import User, Product, Review

# Plus grand INTEGER signé accepté par SQLite
MAX_ID = 2**63 - 1

# Les espaces seuls ne comptent pas comme une valeur
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _isoformat(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.isoformat()


class MessageResponse(BaseModel):
    message: str

# ============================================================================
# ERREURS
# ============================================================================

class ErrorResponse(BaseModel):
    """Corps d'erreur (401, 403, 404, 500)"""
    message: str
    cause: Optional[str] = None

class ValidationIssue(BaseModel):
    code: str
    path: List[str]
    message: str

class ValidationErrorDetail(BaseModel):
    name: str
    issues: List[ValidationIssue]

class ValidationErrorResponse(BaseModel):
    """Corps d'erreur 400"""
    message: str
    error: ValidationErrorDetail

# ============================================================================
# UTILISATEURS
# ============================================================================

class UserRegister(BaseModel):
    """Schéma pour inscrire un utilisateur"""
    name: NonBlankStr
    email: EmailStr
    password: str = Field(..., min_length=8)

    model_config = ConfigDict(json_schema_extra={
        "example": {"name": "Alice", "email": "alice@example.com", "password": "password123"}
    })

class UserLogin(BaseModel):
    """Schéma pour se connecter"""
    email: EmailStr
    password: str = Field(..., min_length=8)

class UserResponse(BaseModel):
    """Utilisateur public (sans hachage du mot de passe)"""
    id: int
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.user_id, name=user.name, email=user.email)

class UserRegisteredResponse(MessageResponse):
    user: UserResponse

class LoginResponse(MessageResponse):
    token: str

class UserListResponse(BaseModel):
    users: List[UserResponse]

# ============================================================================
# PRODUITS
# ============================================================================

class ProductCreate(BaseModel):
    """Schéma pour créer un produit (la catégorie est validée par le domaine)"""
    name: NonBlankStr
    manufacturer: NonBlankStr
    category: str
    ingredients: List[str]

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "Cream",
            "manufacturer": "Acme",
            "category": "skin_care",
            "ingredients": ["water", "glycerin"]
        }
    })

class ProductResponse(BaseModel):
    """Schéma pour retourner un produit"""
    id: int
    name: str
    manufacturer: str
    category: str
    ingredients: List[str]
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

    @field_serializer('created_at')
    def serialize_created_at(self, dt: Optional[datetime], _info):
        return _isoformat(dt)

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.product_id,
            name=product.name,
            manufacturer=product.manufacturer,
            category=product.category.value,
            ingredients=list(product.ingredients),
            created_at=product.created_at
        )

class ProductCreatedResponse(MessageResponse):
    product: ProductResponse

# ============================================================================
# AVIS
# ============================================================================

class ReviewCreate(BaseModel):
    """Schéma pour créer un avis (la note 1..7 est validée par le domaine)"""
    product_id: StrictInt = Field(..., alias="productId", gt=0, le=MAX_ID)
    rating: StrictInt
    comment: str = ""

    model_config = ConfigDict(populate_by_name=True, json_schema_extra={
        "example": {"productId": 1, "rating": 5, "comment": "Very moisturizing"}
    })

class ReviewResponse(BaseModel):
    """Schéma pour retourner un avis"""
    id: str
    product_id: int = Field(..., serialization_alias="productId")
    user_id: int = Field(..., serialization_alias="userId")
    rating: int
    comment: str
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

    @field_serializer('created_at')
    def serialize_created_at(self, dt: Optional[datetime], _info):
        return _isoformat(dt)

    @classmethod
    def from_entity(cls, review: Review) -> "ReviewResponse":
        return cls(
            id=review.review_id,
            product_id=review.product_id,
            user_id=review.user_id,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at
        )

class ReviewCreatedResponse(MessageResponse):
    review: ReviewResponse

class ReviewListResponse(MessageResponse):
    reviews: List[ReviewResponse]
