"""
Review System

Users rate places they don't own, once per place.
"""

from rentals.review.services.review_service import ReviewService

__all__ = [
    "ReviewService",
]
