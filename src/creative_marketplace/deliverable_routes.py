"""
Deliverable procedures
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .auth import get_current_user
from .db.engine import get_db
from .db.models import User
from .schemas import DeliverableOut, DeliverableUpload
from .services.deliverable_service import DeliverableService

router = APIRouter(prefix="/api/trpc", tags=["deliverable"])


@router.get("/deliverable.getByBooking", response_model=List[DeliverableOut])
async def get_by_booking(
    booking_id: int = Query(..., alias="bookingId"),
    db: Optional[Session] = Depends(get_db),
):
    return DeliverableService(db).list_for_booking(booking_id)


@router.post("/deliverable.upload", response_model=DeliverableOut)
async def upload(
    data: DeliverableUpload,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return DeliverableService(db).upload(user.id, data)
