"""
Entité Review - Modèle métier pour les avis
"""

import uuid
from datetime import datetime
from typing import Optional
from dataclasses import dataclass

from domain.errors import InvalidRatingError

MIN_RATING = 1
MAX_RATING = 7


def is_valid_rating(rating) -> bool:
    """Note entière comprise entre 1 et 7 inclus"""
    if isinstance(rating, bool) or not isinstance(rating, int):
        return False
    return MIN_RATING <= rating <= MAX_RATING


@dataclass
class Review:
    """Entité Review du domaine"""
    review_id: str
    product_id: int
    user_id: int
    rating: int
    comment: str = ""
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not is_valid_rating(self.rating):
            raise InvalidRatingError(
                cause=f"rating must be between {MIN_RATING} and {MAX_RATING}, got {self.rating!r}"
            )
        if self.comment is None:
            self.comment = ""

    def is_owned_by(self, user_id: int) -> bool:
        """Vérifie si l'avis appartient à l'utilisateur"""
        return self.user_id == user_id


def create_review(
    product_id: int,
    user_id: int,
    rating: int,
    comment: str = ""
) -> Review:
    """
    Crée un avis non enregistré avec un nouvel identifiant UUID.

    created_at reste vide : il est attribué au moment de la persistance.
    """
    return Review(
        review_id=str(uuid.uuid4()),
        product_id=product_id,
        user_id=user_id,
        rating=rating,
        comment=comment
    )
