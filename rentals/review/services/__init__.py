"""Review system services."""

from rentals.review.services.review_service import ReviewService

__all__ = ["ReviewService"]
