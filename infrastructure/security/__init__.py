"""
Sécurité : hachage des mots de passe (passlib) et tokens Bearer (python-jose)
"""

from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.jwt_service import JWTService

__all__ = ["PasswordHasher", "JWTService"]
