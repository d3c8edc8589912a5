"""
Payment transaction model
"""
from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime
import enum

from ..base import Base


class TransactionType(str, enum.Enum):
    DEPOSIT = "deposit"
    FULL_PAYMENT = "full_payment"
    REFUND = "refund"


class TransactionStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentMethod(str, enum.Enum):
    PAYSTACK = "paystack"
    STRIPE = "stripe"


class Transaction(Base):
    """Money movement between a payer (client) and payee (creative)"""
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, nullable=True)
    gig_post_id = Column(Integer, nullable=True)
    payer_id = Column(Integer, nullable=False, index=True)  # client
    payee_id = Column(Integer, nullable=False, index=True)  # creative
    amount = Column(Integer, nullable=False)  # in cents
    currency = Column(String(10), default="USD")
    type = Column(String(20), default=TransactionType.DEPOSIT.value)
    payment_method = Column(String(50), nullable=False)
    external_transaction_id = Column(String(255), nullable=True)
    status = Column(String(20), default=TransactionStatus.PENDING.value)
    # 'metadata' is reserved on declarative classes
    extra_metadata = Column("metadata", Text, nullable=True)  # JSON for additional info

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
