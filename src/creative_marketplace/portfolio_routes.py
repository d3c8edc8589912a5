"""
Portfolio procedures
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .auth import get_current_user
from .db.engine import get_db
from .db.models import User
from .schemas import PortfolioItemCreate, PortfolioItemOut
from .services.portfolio_service import PortfolioService

router = APIRouter(prefix="/api/trpc", tags=["portfolio"])


@router.get("/portfolio.getCreativePortfolio", response_model=List[PortfolioItemOut])
async def get_creative_portfolio(
    creative_id: int = Query(..., alias="creativeId"),
    db: Optional[Session] = Depends(get_db),
):
    return PortfolioService(db).list_for_creative(creative_id)


@router.post("/portfolio.addItem", response_model=PortfolioItemOut)
async def add_item(
    data: PortfolioItemCreate,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return PortfolioService(db).add_item(user.id, data)
