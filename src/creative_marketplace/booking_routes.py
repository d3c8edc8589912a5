"""
Booking procedures
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .auth import get_current_user
from .db.engine import get_db
from .db.models import User
from .schemas import BookingCreate, BookingOut, BookingStatusUpdate
from .services.booking_service import BookingService

router = APIRouter(prefix="/api/trpc", tags=["booking"])


@router.post("/booking.create", response_model=BookingOut)
async def create_booking(
    data: BookingCreate,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return BookingService(db).create_booking(user.id, data)


@router.get("/booking.getMyBookings", response_model=List[BookingOut])
async def get_my_bookings(user: User = Depends(get_current_user), db: Optional[Session] = Depends(get_db)):
    return BookingService(db).list_for_client(user.id)


@router.get("/booking.getCreativeBookings", response_model=List[BookingOut])
async def get_creative_bookings(user: User = Depends(get_current_user), db: Optional[Session] = Depends(get_db)):
    return BookingService(db).list_for_creative_user(user.id)


@router.get("/booking.getById", response_model=Optional[BookingOut])
async def get_by_id(id: int = Query(...), db: Optional[Session] = Depends(get_db)):
    return BookingService(db).get_by_id(id)


@router.post("/booking.updateStatus", response_model=BookingOut)
async def update_status(
    data: BookingStatusUpdate,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return BookingService(db).update_status(user.id, data.booking_id, data.status)
