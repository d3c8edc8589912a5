"""
Conversation and message models
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from datetime import datetime

from ..base import Base


class Conversation(Base):
    """Two-party conversation, optionally tied to a booking"""
    __tablename__ = "conversations"

    id = Column(Integer, primary_key=True, index=True)
    participant_one_id = Column(Integer, nullable=False, index=True)
    participant_two_id = Column(Integer, nullable=False, index=True)
    booking_id = Column(Integer, nullable=True)
    last_message = Column(Text, nullable=True)
    last_message_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class Message(Base):
    """Immutable message inside a conversation"""
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    conversation_id = Column(Integer, nullable=False, index=True)
    sender_id = Column(Integer, nullable=False, index=True)
    content = Column(Text, nullable=True)
    attachment_url = Column(String(500), nullable=True)
    attachment_type = Column(String(50), nullable=True)  # image, file, video
    is_read = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
