"""
OAuth callback route for the hosted identity provider
"""
import asyncio
import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from .auth import COOKIE_NAME, ONE_YEAR_MS, create_session_token, get_session_cookie_options
from .db.engine import get_db
from .services.oauth_service import OAuthService, get_oauth_service
from .services.user_service import upsert_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/oauth", tags=["oauth"])


@router.get("/callback")
async def oauth_callback(
    request: Request,
    code: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    db: Optional[Session] = Depends(get_db),
    oauth_service: OAuthService = Depends(get_oauth_service),
):
    """Exchange the authorization code, store the user and start a session"""
    if not code or not state:
        return JSONResponse(status_code=400, content={"error": "code and state are required"})

    try:
        loop = asyncio.get_running_loop()
        token_response = await loop.run_in_executor(
            None, lambda: oauth_service.exchange_code_for_token(code, state)
        )
        user_info = await loop.run_in_executor(
            None, lambda: oauth_service.get_user_info(token_response.get("accessToken", ""))
        )

        if not user_info.open_id:
            return JSONResponse(status_code=400, content={"error": "openId missing from user info"})

        upsert_user(
            db,
            user_info.open_id,
            name=user_info.name or None,
            email=user_info.email,
            login_method=user_info.login_method,
            last_signed_in=datetime.utcnow(),
        )

        session_token = create_session_token(user_info.open_id, name=user_info.name or "")

        response = RedirectResponse(url="/", status_code=302)
        response.set_cookie(
            COOKIE_NAME,
            session_token,
            max_age=ONE_YEAR_MS // 1000,
            **get_session_cookie_options(request),
        )
        logger.info(f"[OAuth] Session started for {user_info.open_id}")
        return response
    except Exception as e:
        logger.error(f"[OAuth] Callback failed: {type(e).__name__} - {str(e)}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "OAuth callback failed"})
