"""
FastAPI router for Review system endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from common.utils import serialize_document
from rentals.auth.dependencies import CurrentUserId
from rentals.dependencies import get_review_service
from rentals.review.services.review_service import ReviewService
from rentals.review.schemas import ReviewCreateRequest
from rentals.review import pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/by/{user_id}")
async def get_reviews_by_author(
    user_id: str,
    review_service: Annotated[ReviewService, Depends(get_review_service)],
):
    """Get every review a user has written, newest first."""
    reviews = await pipelines.get_author_reviews_pipeline(
        review_service=review_service,
        user_id=user_id,
    )

    return {"reviews": [serialize_document(r) for r in reviews]}


@router.post("/for/{place_id}", status_code=status.HTTP_201_CREATED)
async def create_review(
    place_id: str,
    body: ReviewCreateRequest,
    user_id: CurrentUserId,
    review_service: Annotated[ReviewService, Depends(get_review_service)],
):
    """
    Review a place.

    A user can't review their own place and can review each place once.
    """
    review = await pipelines.create_review_pipeline(
        review_service=review_service,
        author_id=user_id,
        place_id=place_id,
        rating=body.rating,
        title=body.title,
        body=body.body,
    )

    return serialize_document(review)


@router.get("/{place_id}")
async def get_place_reviews(
    place_id: str,
    review_service: Annotated[ReviewService, Depends(get_review_service)],
):
    """Get a place's reviews, newest first."""
    reviews = await pipelines.get_place_reviews_pipeline(
        review_service=review_service,
        place_id=place_id,
    )

    return {"reviews": [serialize_document(r) for r in reviews]}
