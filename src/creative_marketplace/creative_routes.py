"""
Creative profile procedures
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .auth import get_current_user
from .db.engine import get_db
from .db.models import User
from .schemas import CreativeProfileOut, CreativeProfileUpdate
from .services.creative_service import CreativeService

router = APIRouter(prefix="/api/trpc", tags=["creative"])


@router.get("/creative.getProfile", response_model=Optional[CreativeProfileOut])
async def get_profile(user: User = Depends(get_current_user), db: Optional[Session] = Depends(get_db)):
    return CreativeService(db).get_profile_for_user(user.id)


@router.get("/creative.getById", response_model=Optional[CreativeProfileOut])
async def get_by_id(id: int = Query(...), db: Optional[Session] = Depends(get_db)):
    return CreativeService(db).get_by_id(id)


@router.post("/creative.updateProfile", response_model=Optional[CreativeProfileOut])
async def update_profile(
    data: CreativeProfileUpdate,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    """Update the caller's profile with the supplied fields, creating it on first use"""
    return CreativeService(db).update_profile(user.id, data.model_dump(exclude_unset=True))


@router.get("/creative.search", response_model=List[CreativeProfileOut])
async def search(
    category: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    limit: int = Query(20, ge=0),
    offset: int = Query(0, ge=0),
    db: Optional[Session] = Depends(get_db),
):
    return CreativeService(db).search(
        category=category,
        location=location,
        min_rating=min_rating,
        limit=limit,
        offset=offset,
    )
