"""
System procedures: health and owner notifications
"""
import asyncio

from fastapi import APIRouter, Depends, Query

from .auth import get_admin_user
from .db.engine import get_engine
from .db.models import User
from .schemas import NotifyOwnerInput, SuccessResponse
from .services.notification_service import notify_owner

router = APIRouter(tags=["system"])


@router.get("/health")
async def health():
    """Liveness check; does not touch the database"""
    return {
        "status": "healthy",
        "service": "creative-marketplace",
        "database": "configured" if get_engine() is not None else "unavailable",
    }


@router.get("/api/trpc/system.health")
async def system_health(timestamp: float = Query(..., ge=0)):
    return {"ok": True}


@router.post("/api/trpc/system.notifyOwner", response_model=SuccessResponse)
async def system_notify_owner(data: NotifyOwnerInput, user: User = Depends(get_admin_user)):
    loop = asyncio.get_running_loop()
    delivered = await loop.run_in_executor(None, lambda: notify_owner(data.title, data.content))
    return SuccessResponse(success=delivered)
