"""
Interface ProductRepository - Définit les opérations d'accès aux données pour Product
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from domain.entities.product import Product


class ProductRepository(ABC):
    """Interface pour le repository des produits"""
    
    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Trouve un produit par son ID"""
        pass
    
    @abstractmethod
    def find_all(self) -> List[Product]:
        """Retourne tous les produits"""
        pass
    
    @abstractmethod
    def save(self, product: Product) -> Product:
        """Enregistre un nouveau produit et retourne l'entité avec son ID"""
        pass
