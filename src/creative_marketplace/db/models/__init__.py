"""
Database models for the Creative Marketplace
"""
from .user import User, UserRole, UserType
from .creative import CreativeProfile, PortfolioItem, Availability
from .booking import Booking, BookingStatus
from .messaging import Conversation, Message
from .deliverable import Deliverable
from .review import Review
from .gig import GigPost, GigApplication, GigPostStatus, GigApplicationStatus
from .payment import Transaction, TransactionType, TransactionStatus, PaymentMethod

__all__ = [
    "User",
    "UserRole",
    "UserType",
    "CreativeProfile",
    "PortfolioItem",
    "Availability",
    "Booking",
    "BookingStatus",
    "Conversation",
    "Message",
    "Deliverable",
    "Review",
    "GigPost",
    "GigApplication",
    "GigPostStatus",
    "GigApplicationStatus",
    "Transaction",
    "TransactionType",
    "TransactionStatus",
    "PaymentMethod",
]
