"""
Database module for the Creative Marketplace
"""
from .engine import get_engine, get_session_factory, get_db, init_db, reset_engine, test_connection
from .base import Base
from .models import (
    User,
    CreativeProfile,
    PortfolioItem,
    Availability,
    Booking,
    Conversation,
    Message,
    Deliverable,
    Review,
    GigPost,
    GigApplication,
    Transaction,
)

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_engine",
    "test_connection",
    "Base",
    "User",
    "CreativeProfile",
    "PortfolioItem",
    "Availability",
    "Booking",
    "Conversation",
    "Message",
    "Deliverable",
    "Review",
    "GigPost",
    "GigApplication",
    "Transaction",
]
