"""
Deliverable model - files handed over for a booking
"""
from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime

from ..base import Base


class Deliverable(Base):
    __tablename__ = "deliverables"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, nullable=False, index=True)
    creative_id = Column(Integer, nullable=False, index=True)
    client_id = Column(Integer, nullable=False)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    file_url = Column(String(500), nullable=True)
    file_type = Column(String(50), nullable=True)  # image, video, pdf, zip
    file_size = Column(Integer, nullable=True)  # in bytes
    download_count = Column(Integer, default=0)
    uploaded_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    expires_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
