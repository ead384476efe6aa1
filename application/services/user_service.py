"""
UserService - Service applicatif pour la gestion des utilisateurs
"""

import logging
from typing import List, Optional
from domain.entities.user import User, create_user
from domain.errors import NotFoundError
from domain.repositories.user_repository import UserRepository
from infrastructure.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class UserService:
    """Service pour la gestion des utilisateurs"""
    
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
    
    def register(self, name: str, email: str, password: str) -> User:
        """
        Inscrit un nouvel utilisateur.
        Lève DuplicateEmailError si l'email est déjà utilisé, HashError si le hachage échoue.
        """
        user = create_user(name, email, password, self.password_hasher)
        saved = self.user_repository.save(user)
        logger.info(f"User registered: id={saved.user_id} email='{saved.email}'")
        return saved
    
    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Authentifie un utilisateur avec son email et mot de passe"""
        user = self.user_repository.find_by_email(email)
        if not user:
            logger.warning(f"Authentication failed: User '{email}' not found")
            return None
        
        if not self.password_hasher.verify(password, user.password_hash):
            logger.warning(f"Authentication failed: Invalid password for user '{email}'")
            return None
        
        logger.info(f"Authentication success: User '{email}' authenticated")
        return user
    
    def get_user(self, user_id: int) -> User:
        """Récupère un utilisateur par son ID (NotFoundError si absent)"""
        user = self.user_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found", cause=f"user {user_id} does not exist")
        return user
    
    def get_all_users(self) -> List[User]:
        """Récupère tous les utilisateurs"""
        return self.user_repository.find_all()
