"""
Availability procedures
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .auth import get_current_user
from .db.engine import get_db
from .db.models import User
from .schemas import AvailabilityCreate, AvailabilityOut
from .services.availability_service import AvailabilityService

router = APIRouter(prefix="/api/trpc", tags=["availability"])


@router.get("/availability.getCreativeAvailability", response_model=List[AvailabilityOut])
async def get_creative_availability(
    creative_id: int = Query(..., alias="creativeId"),
    db: Optional[Session] = Depends(get_db),
):
    return AvailabilityService(db).list_for_creative(creative_id)


@router.post("/availability.addAvailability", response_model=AvailabilityOut)
async def add_availability(
    data: AvailabilityCreate,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return AvailabilityService(db).add_slot(user.id, data)
