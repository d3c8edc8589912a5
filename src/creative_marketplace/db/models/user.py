"""
User model
"""
from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime
import enum

from ..base import Base


class UserRole(str, enum.Enum):
    """User role enum"""
    USER = "user"
    ADMIN = "admin"
    CREATIVE = "creative"


class UserType(str, enum.Enum):
    """Which side of the marketplace the user signed up for"""
    CLIENT = "client"
    CREATIVE = "creative"


class User(Base):
    """User account backing the OAuth login flow"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    open_id = Column(String(64), unique=True, index=True, nullable=False)  # Identifier from the identity provider
    name = Column(Text, nullable=True)
    email = Column(String(320), nullable=True)
    login_method = Column(String(64), nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.USER.value)
    user_type = Column(String(20), nullable=True, default=UserType.CLIENT.value)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    last_signed_in = Column(DateTime, default=datetime.utcnow, nullable=False)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
