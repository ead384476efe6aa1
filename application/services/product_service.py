"""
ProductService - Service applicatif pour la gestion des produits
"""

import logging
from typing import List
from domain.entities.product import Product, create_product
from domain.errors import NotFoundError
from domain.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Service pour la gestion des produits"""
    
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository
    
    def create_product(
        self,
        name: str,
        manufacturer: str,
        category: str,
        ingredients: List[str]
    ) -> Product:
        """Crée un produit (UndefinedCategoryError si la catégorie est inconnue)"""
        product = create_product(name, manufacturer, category, ingredients)
        saved = self.product_repository.save(product)
        logger.info(f"Product created: id={saved.product_id} name='{saved.name}'")
        return saved
    
    def get_product(self, product_id: int) -> Product:
        """Récupère un produit par son ID (NotFoundError si absent)"""
        product = self.product_repository.find_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found", cause=f"product {product_id} does not exist")
        return product
    
    def get_all_products(self) -> List[Product]:
        """Récupère tous les produits"""
        return self.product_repository.find_all()
