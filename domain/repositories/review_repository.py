"""
Interface ReviewRepository - Définit les opérations d'accès aux données pour Review
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from domain.entities.review import Review


class ReviewRepository(ABC):
    """Interface pour le repository des avis"""
    
    @abstractmethod
    def find_by_id(self, review_id: str) -> Optional[Review]:
        """Trouve un avis par son ID"""
        pass
    
    @abstractmethod
    def find_by_product_id(self, product_id: int) -> List[Review]:
        """Trouve les avis d'un produit (du plus récent au plus ancien)"""
        pass
    
    @abstractmethod
    def save(self, review: Review) -> Review:
        """
        Enregistre un nouvel avis.
        Lève ReferencedEntityNotFoundError si le produit ou l'utilisateur n'existe pas.
        """
        pass
    
    @abstractmethod
    def erase(self, review_id: str) -> None:
        """Supprime un avis"""
        pass
