"""
Creative profile, portfolio and availability models
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from datetime import datetime

from ..base import Base


class CreativeProfile(Base):
    """Public profile of a service-providing user (1:1 with User)"""
    __tablename__ = "creative_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    business_name = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)
    categories = Column(Text, nullable=True)  # JSON array of categories
    location = Column(String(255), nullable=True)
    latitude = Column(String(50), nullable=True)
    longitude = Column(String(50), nullable=True)
    base_price = Column(Integer, nullable=True)  # in cents
    hourly_rate = Column(Integer, nullable=True)  # in cents
    profile_image = Column(String(500), nullable=True)
    cover_image = Column(String(500), nullable=True)
    average_rating = Column(String(10), default="0")  # Denormalized, recomputed by full scan
    total_reviews = Column(Integer, default=0)
    is_verified = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    portfolio = Column(Text, nullable=True)  # JSON array of portfolio items
    social_links = Column(Text, nullable=True)  # JSON object of social links

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class PortfolioItem(Base):
    """Single showcase entry on a creative's portfolio"""
    __tablename__ = "portfolio_items"

    id = Column(Integer, primary_key=True, index=True)
    creative_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    video_url = Column(String(500), nullable=True)
    category = Column(String(100), nullable=True)
    display_order = Column(Integer, default=0)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class Availability(Base):
    """Calendar slot offered by a creative

    is_booked is stored but not enforced: nothing reserves a slot when a
    booking is created.
    """
    __tablename__ = "availability"

    id = Column(Integer, primary_key=True, index=True)
    creative_id = Column(Integer, nullable=False, index=True)
    date = Column(String(50), nullable=False)  # ISO date string
    start_time = Column(String(50), nullable=False)  # HH:mm
    end_time = Column(String(50), nullable=False)  # HH:mm
    is_booked = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
