"""
Review model
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from datetime import datetime

from ..base import Base


class Review(Base):
    """Client review of a creative, tied to a booking"""
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, nullable=False)
    reviewer_id = Column(Integer, nullable=False, index=True)  # client
    creative_id = Column(Integer, nullable=False, index=True)
    rating = Column(Integer, nullable=False)  # 1-5
    title = Column(String(255), nullable=True)
    comment = Column(Text, nullable=True)
    is_verified = Column(Boolean, default=True)  # verified booking
    is_published = Column(Boolean, default=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
