"""
Gig board procedures
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .auth import get_current_user
from .db.engine import get_db
from .db.models import User
from .schemas import GigApplicationCreate, GigApplicationOut, GigPostCreate, GigPostOut
from .services.gig_service import GigService

router = APIRouter(prefix="/api/trpc", tags=["gig"])


@router.get("/gig.listPosts", response_model=List[GigPostOut])
async def list_posts(
    limit: int = Query(20, ge=0),
    offset: int = Query(0, ge=0),
    db: Optional[Session] = Depends(get_db),
):
    return GigService(db).list_open_posts(limit=limit, offset=offset)


@router.post("/gig.createPost", response_model=GigPostOut)
async def create_post(
    data: GigPostCreate,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return GigService(db).create_post(user.id, data)


@router.post("/gig.applyForGig", response_model=GigApplicationOut)
async def apply_for_gig(
    data: GigApplicationCreate,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return GigService(db).apply(user.id, data)


@router.get("/gig.getApplications", response_model=List[GigApplicationOut])
async def get_applications(
    gig_post_id: int = Query(..., alias="gigPostId"),
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return GigService(db).list_applications(gig_post_id)
