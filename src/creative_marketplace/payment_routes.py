"""
Payment procedures
"""
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .auth import get_current_user
from .db.engine import get_db
from .db.models import User
from .schemas import PaymentInitiate, TransactionOut
from .services.payment_service import PaymentService

router = APIRouter(prefix="/api/trpc", tags=["payment"])


@router.get("/payment.getTransactions", response_model=List[TransactionOut])
async def get_transactions(user: User = Depends(get_current_user), db: Optional[Session] = Depends(get_db)):
    return PaymentService(db).list_for_user(user.id)


@router.post("/payment.initiatePayment", response_model=TransactionOut)
async def initiate_payment(
    data: PaymentInitiate,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    """Record a pending deposit; no payment provider is contacted"""
    return PaymentService(db).initiate_payment(user.id, data)
