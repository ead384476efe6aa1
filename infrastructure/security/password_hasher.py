"""
PasswordHasher - Service pour le hachage des mots de passe
"""

import logging
from passlib.context import CryptContext

from domain.errors import HashError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Service pour le hachage et la vérification des mots de passe"""
    
    def __init__(self, schemes=None):
        self.pwd_context = CryptContext(schemes=schemes or ["bcrypt"], deprecated="auto")
    
    def hash(self, password: str) -> str:
        """Génère un hachage pour un mot de passe"""
        try:
            return self.pwd_context.hash(password)
        except (ValueError, TypeError) as e:
            logger.error(f"Password hashing failed: {e}")
            raise HashError(cause=str(e))
    
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Vérifie un mot de passe non haché contre un mot de passe haché.
        Un hachage corrompu ou inconnu retourne False.
        """
        if not hashed_password:
            return False
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password verification against malformed hash: {e}")
            return False
