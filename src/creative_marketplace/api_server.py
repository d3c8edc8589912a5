"""
FastAPI application for the Creative Marketplace API
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import (
    ai_routes,
    auth_routes,
    availability_routes,
    booking_routes,
    creative_routes,
    deliverable_routes,
    gig_routes,
    messaging_routes,
    oauth_routes,
    payment_routes,
    portfolio_routes,
    review_routes,
    system_routes,
)
from .config import config
from .exceptions import register_exception_handlers
from .logging_config import RequestIDMiddleware, setup_logging

logger = logging.getLogger(__name__)

ROUTERS = [
    system_routes.router,
    oauth_routes.router,
    auth_routes.router,
    creative_routes.router,
    booking_routes.router,
    availability_routes.router,
    messaging_routes.router,
    deliverable_routes.router,
    review_routes.router,
    gig_routes.router,
    portfolio_routes.router,
    payment_routes.router,
    ai_routes.router,
]


def create_app() -> FastAPI:
    setup_logging(env=config.ENV, log_level=config.LOG_LEVEL)

    app = FastAPI(title="Creative Marketplace API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it wraps CORS and every response carries X-Request-ID
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    for router in ROUTERS:
        app.include_router(router)

    logger.info(f"Creative Marketplace API ready ({config.ENV})")
    return app


app = create_app()
