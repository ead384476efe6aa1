"""
Entité User - Modèle métier pour les utilisateurs
"""

from datetime import datetime
from typing import Optional
from dataclasses import dataclass

from domain.errors import HashError, ValidationError


@dataclass
class User:
    """Entité User du domaine"""
    user_id: Optional[int]
    name: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.name or not self.name.strip():
            raise ValidationError("User name cannot be empty", field="name")
        if not self.email:
            raise ValidationError("Email cannot be empty", field="email")
        if not self.password_hash:
            raise ValidationError("Password hash cannot be empty", field="password")

    def is_registered(self) -> bool:
        """Vérifie si l'utilisateur a été persisté (ID attribué)"""
        return self.user_id is not None


def create_user(name: str, email: str, password: str, password_hasher) -> User:
    """
    Crée un utilisateur non enregistré avec son mot de passe haché.

    La syntaxe de l'email est vérifiée en amont par le schéma de requête.
    Lève HashError uniquement si le hachage échoue.
    """
    password_hash = password_hasher.hash(password)
    if not password_hash:
        raise HashError()

    return User(
        user_id=None,
        name=name,
        email=email,
        password_hash=password_hash
    )
