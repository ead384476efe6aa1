"""
ReviewService - Service applicatif pour la gestion des avis
"""

import logging
from typing import List
from domain.entities.review import Review, create_review
from domain.errors import ForbiddenError, NotFoundError, ValidationError
from domain.repositories.review_repository import ReviewRepository

logger = logging.getLogger(__name__)


class ReviewService:
    """Service pour la gestion des avis"""
    
    def __init__(self, review_repository: ReviewRepository):
        self.review_repository = review_repository
    
    def create_review(self, product_id: int, user_id: int, rating: int, comment: str = "") -> Review:
        """
        Crée un avis.
        InvalidRatingError si la note est hors de 1..7 (rien n'est enregistré),
        ReferencedEntityNotFoundError si le produit ou l'utilisateur n'existe pas.
        """
        review = create_review(product_id, user_id, rating, comment or "")
        saved = self.review_repository.save(review)
        logger.info(f"Review {saved.review_id} created by user {user_id} for product {product_id}")
        return saved
    
    def get_reviews_for_product(self, product_id: int) -> List[Review]:
        """Récupère les avis d'un produit"""
        if isinstance(product_id, bool) or not isinstance(product_id, int) or product_id <= 0:
            raise ValidationError("Invalid product ID", field="productId")
        return self.review_repository.find_by_product_id(product_id)
    
    def get_review(self, review_id: str) -> Review:
        """Récupère un avis par son ID (NotFoundError si absent)"""
        review = self.review_repository.find_by_id(review_id)
        if not review:
            raise NotFoundError("Review not found", cause=f"review {review_id} does not exist")
        return review
    
    def delete_review(self, review_id: str, requester_id: int) -> None:
        """Supprime un avis ; seul son auteur peut le supprimer"""
        review = self.get_review(review_id)
        if not review.is_owned_by(requester_id):
            logger.warning(f"User {requester_id} attempted to delete review {review_id} owned by user {review.user_id}")
            raise ForbiddenError("You can only delete your own reviews")
        
        self.review_repository.erase(review_id)
        logger.info(f"Review {review_id} deleted by user {requester_id}")
