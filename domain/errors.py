"""
Erreurs du domaine - Taxonomie fermée des échecs métier

Chaque classe racine correspond à un code HTTP (voir api/errors.py) :
ValidationError -> 400, UnauthorizedError -> 401, ForbiddenError -> 403,
NotFoundError -> 404, InternalError -> 500.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Erreur de base du domaine"""

    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, cause: Optional[str] = None):
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)


class ValidationError(DomainError):
    """Entrée invalide (forme ou valeur)"""

    default_message = "Invalid input"
    code = "invalid_input"
    field: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[str] = None,
        field: Optional[str] = None,
        issues: Optional[List[Dict[str, Any]]] = None
    ):
        super().__init__(message, cause)
        if field is not None:
            self.field = field
        self._issues = issues

    @property
    def issues(self) -> List[Dict[str, Any]]:
        if self._issues is not None:
            return self._issues
        return [{
            "code": self.code,
            "path": [self.field] if self.field else [],
            "message": self.message
        }]


class UndefinedCategoryError(ValidationError):
    default_message = "Undefined product category"
    code = "undefined_category"
    field = "category"


class InvalidRatingError(ValidationError):
    default_message = "Rating must be an integer between 1 and 7"
    code = "invalid_rating"
    field = "rating"


class DuplicateEmailError(ValidationError):
    default_message = "Email already exists"
    code = "duplicate_email"
    field = "email"


class UnauthorizedError(DomainError):
    default_message = "Unauthorized"


class ForbiddenError(DomainError):
    default_message = "Forbidden"


class NotFoundError(DomainError):
    default_message = "Not found"


class ReferencedEntityNotFoundError(NotFoundError):
    """Le produit ou l'utilisateur référencé n'existe pas"""

    default_message = "Product or User not found"


class InternalError(DomainError):
    default_message = "Internal server error"


class HashError(InternalError):
    default_message = "Failed to hash password"
