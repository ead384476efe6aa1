"""
Entité Product - Modèle métier pour les produits cosmétiques
"""

from datetime import datetime, timezone
from typing import List, Optional
from dataclasses import dataclass, field
from enum import Enum

from domain.errors import UndefinedCategoryError, ValidationError


class ProductCategory(str, Enum):
    """Catégorie d'un produit"""
    SKIN_CARE = "skin_care"
    MAKEUP = "makeup"
    FRAGRANCE = "fragrance"
    HAIR_CARE = "hair_care"
    BODY_CARE = "body_care"


def validate_product_category(category: str) -> bool:
    """Vérifie que la catégorie fait partie des valeurs définies"""
    return category in {c.value for c in ProductCategory}


@dataclass
class Product:
    """Entité Product du domaine"""
    product_id: Optional[int]
    name: str
    manufacturer: str
    category: ProductCategory
    ingredients: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.name or not self.name.strip():
            raise ValidationError("Product name cannot be empty", field="name")
        if not self.manufacturer or not self.manufacturer.strip():
            raise ValidationError("Manufacturer cannot be empty", field="manufacturer")
        if not isinstance(self.category, ProductCategory):
            if not isinstance(self.category, str) or not validate_product_category(self.category):
                raise UndefinedCategoryError(
                    f"Undefined product category: '{self.category}'",
                    cause=f"category must be one of: {', '.join(c.value for c in ProductCategory)}"
                )
            self.category = ProductCategory(self.category)
        self.ingredients = list(self.ingredients)


def create_product(
    name: str,
    manufacturer: str,
    category: str,
    ingredients: List[str]
) -> Product:
    """
    Crée un produit non enregistré.

    Lève UndefinedCategoryError si la catégorie est inconnue. L'ID est
    attribué par le repository lors de la sauvegarde.
    """
    return Product(
        product_id=None,
        name=name,
        manufacturer=manufacturer,
        category=category,
        ingredients=ingredients,
        created_at=datetime.now(timezone.utc)
    )
