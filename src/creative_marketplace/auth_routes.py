"""
Session procedures: current user and logout
"""
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response

from .auth import COOKIE_NAME, get_optional_user, get_session_cookie_options
from .db.models import User
from .schemas import SuccessResponse, UserOut

router = APIRouter(prefix="/api/trpc", tags=["auth"])


@router.get("/auth.me", response_model=Optional[UserOut])
async def me(user: Optional[User] = Depends(get_optional_user)):
    """The signed-in user, or null for anonymous callers"""
    return user


@router.post("/auth.logout", response_model=SuccessResponse)
async def logout(request: Request, response: Response):
    response.delete_cookie(COOKIE_NAME, **get_session_cookie_options(request))
    return SuccessResponse(success=True)
