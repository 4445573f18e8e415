"""
Review system pipeline functions.

Stateless orchestration logic for review operations.
"""

import logging
from typing import List

from rentals.review.services.review_service import ReviewService

logger = logging.getLogger(__name__)


async def create_review_pipeline(
    review_service: ReviewService,
    author_id: str,
    place_id: str,
    rating: int,
    title: str,
    body: str
) -> dict:
    """
    Post a review of a place.

    Args:
        review_service: Enforces the review rules
        author_id: Authenticated user ID
        place_id: Place being reviewed
        rating: Star rating (1-5)
        title: Review title
        body: Review text

    Returns:
        Created review dict

    Raises:
        NotFoundException: Place does not exist
        ForbiddenException: Own place, or place already reviewed by author
    """
    return await review_service.create_review(
        author_id=author_id,
        place_id=place_id,
        rating=rating,
        title=title,
        body=body,
    )


async def get_place_reviews_pipeline(
    review_service: ReviewService,
    place_id: str
) -> List[dict]:
    """Get a place's reviews."""
    return await review_service.list_for_place(place_id)


async def get_author_reviews_pipeline(
    review_service: ReviewService,
    user_id: str
) -> List[dict]:
    """Get the reviews a user has written."""
    return await review_service.list_by_author(user_id)
