"""
cosme-review-api/api/auth.py
Authentification Bearer (JWT) pour les endpoints protégés
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from application.services.user_service import UserService
from domain.entities import User
from domain.errors import NotFoundError, UnauthorizedError
from infrastructure.dependencies import get_jwt_service, get_user_service
from infrastructure.security.jwt_service import JWTService

logger = logging.getLogger(__name__)

# auto_error=False : l'absence de token doit produire un 401 via nos erreurs
bearer_scheme = HTTPBearer(auto_error=False, description="Authorization: Bearer <token>")


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    user_service: UserService = Depends(get_user_service),
    jwt_service: JWTService = Depends(get_jwt_service)
) -> User:
    """
    Dépendance FastAPI : décode le token Bearer et retourne l'utilisateur.

    Token absent, malformé, invalide ou expiré -> UnauthorizedError (401).
    Un token dont l'utilisateur n'existe plus est également refusé.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Missing bearer token")

    user_id = jwt_service.get_user_id_from_token(credentials.credentials)
    if user_id is None:
        raise UnauthorizedError("Invalid or expired token")

    try:
        return user_service.get_user(user_id)
    except NotFoundError:
        logger.warning(f"JWT invalid: User {user_id} not found in DB")
        raise UnauthorizedError("Invalid or expired token")
