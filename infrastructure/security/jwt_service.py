"""
JWTService - Service pour la gestion des tokens JWT
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt

logger = logging.getLogger(__name__)


class JWTService:
    """Service pour la gestion des tokens JWT"""
    
    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 1440):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes
    
    def create_access_token(self, data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """Crée un token JWT"""
        to_encode = data.copy()
        
        if expires_delta:
            expire = datetime.now(timezone.utc) + expires_delta
        else:
            expire = datetime.now(timezone.utc) + timedelta(minutes=self.expire_minutes)
        
        to_encode.update({"exp": expire})
        encoded_jwt = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        return encoded_jwt
    
    def create_user_token(self, user_id: int, expires_delta: Optional[timedelta] = None) -> str:
        """Crée un token portant l'ID de l'utilisateur dans 'sub'"""
        return self.create_access_token({"sub": str(user_id)}, expires_delta=expires_delta)
    
    def decode_token(self, token: str) -> Dict[str, Any]:
        """Décode un token JWT (signature et expiration vérifiées)"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
            return payload
        except JWTError as e:
            logger.warning(f"JWT decode error: {e}")
            raise ValueError(f"Invalid token: {str(e)}")
    
    def get_user_id_from_token(self, token: str) -> Optional[int]:
        """Extrait l'ID utilisateur depuis un token JWT"""
        try:
            payload = self.decode_token(token)
        except ValueError:
            return None
        
        subject = payload.get("sub")
        if subject is None:
            return None
        try:
            return int(subject)
        except (TypeError, ValueError):
            logger.warning(f"JWT subject is not a user ID: {subject!r}")
            return None
