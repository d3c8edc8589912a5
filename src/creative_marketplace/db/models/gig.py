"""
Gig board models - job posts and applications
"""
from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime
import enum

from ..base import Base


class GigPostStatus(str, enum.Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CLOSED = "closed"


class GigApplicationStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class GigPost(Base):
    """Open job listing posted by a client"""
    __tablename__ = "gig_posts"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=True)
    budget = Column(Integer, nullable=True)  # in cents
    location = Column(String(255), nullable=True)
    deadline = Column(String(50), nullable=True)  # ISO date string
    status = Column(String(20), default=GigPostStatus.OPEN.value, index=True)
    applications_count = Column(Integer, default=0)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class GigApplication(Base):
    """A creative's application to a gig post"""
    __tablename__ = "gig_applications"

    id = Column(Integer, primary_key=True, index=True)
    gig_post_id = Column(Integer, nullable=False, index=True)
    creative_id = Column(Integer, nullable=False, index=True)
    proposed_price = Column(Integer, nullable=True)  # in cents
    cover_letter = Column(Text, nullable=True)
    portfolio_links = Column(Text, nullable=True)  # JSON array
    status = Column(String(20), default=GigApplicationStatus.PENDING.value)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
