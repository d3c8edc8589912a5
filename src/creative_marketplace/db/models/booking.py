"""
Booking model
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from datetime import datetime
import enum

from ..base import Base


class BookingStatus(str, enum.Enum):
    """Booking status enum"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DISPUTED = "disputed"


class Booking(Base):
    """Booking of a creative by a client"""
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, nullable=False, index=True)
    creative_id = Column(Integer, nullable=False, index=True)
    service_type = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    booking_date = Column(String(50), nullable=False)  # ISO date string
    start_time = Column(String(50), nullable=False)  # HH:mm
    end_time = Column(String(50), nullable=False)  # HH:mm
    duration = Column(Integer, nullable=True)  # in minutes
    location = Column(String(255), nullable=True)
    total_price = Column(Integer, nullable=False)  # in cents
    deposit_amount = Column(Integer, nullable=False)  # in cents
    deposit_paid = Column(Boolean, default=False)
    status = Column(String(20), default=BookingStatus.PENDING.value, index=True)
    payment_method = Column(String(50), nullable=True)  # paystack, stripe
    transaction_id = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
