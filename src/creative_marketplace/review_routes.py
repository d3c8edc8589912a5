"""
Review procedures
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .auth import get_current_user
from .db.engine import get_db
from .db.models import User
from .schemas import ReviewCreate, ReviewOut
from .services.review_service import ReviewService

router = APIRouter(prefix="/api/trpc", tags=["review"])


@router.get("/review.getCreativeReviews", response_model=List[ReviewOut])
async def get_creative_reviews(
    creative_id: int = Query(..., alias="creativeId"),
    db: Optional[Session] = Depends(get_db),
):
    return ReviewService(db).list_for_creative(creative_id)


@router.get("/review.getAverageRating", response_model=float)
async def get_average_rating(
    creative_id: int = Query(..., alias="creativeId"),
    db: Optional[Session] = Depends(get_db),
):
    return ReviewService(db).average_rating(creative_id)


@router.post("/review.create", response_model=ReviewOut)
async def create_review(
    data: ReviewCreate,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return ReviewService(db).create_review(user.id, data)
