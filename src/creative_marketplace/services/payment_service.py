"""
Payment service - records pending transactions

No payment provider is called here; a transaction row is the ledger entry a
provider integration would later complete.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..db.models import Transaction, TransactionStatus, TransactionType
from ..exceptions import DatabaseUnavailableError, ForbiddenError
from ..schemas import PaymentInitiate
from .booking_service import BookingService

logger = logging.getLogger(__name__)

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "NGN": "₦"}


def format_minor_units(amount: int, currency: str = "USD") -> str:
    """Format an amount stored in cents for display, e.g. 12345 -> '$123.45'"""
    major = (Decimal(amount) / Decimal(100)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    if symbol:
        return f"{symbol}{major:,}"
    return f"{major:,} {currency.upper()}"


class PaymentService:
    """Service for payment transactions"""

    def __init__(self, db: Optional[Session]):
        self.db = db

    def list_for_user(self, user_id: int) -> List[Transaction]:
        """Transactions where the user is the payer or the payee"""
        if self.db is None:
            return []
        return self.db.query(Transaction).filter(
            or_(Transaction.payer_id == user_id, Transaction.payee_id == user_id)
        ).all()

    def initiate_payment(self, user_id: int, data: PaymentInitiate) -> Transaction:
        """
        Record a pending deposit from the booking's client to its creative

        Raises:
            ForbiddenError: booking missing or caller is not its client
        """
        if self.db is None:
            raise DatabaseUnavailableError()

        booking = BookingService(self.db).get_by_id(data.booking_id)
        if booking is None or booking.client_id != user_id:
            raise ForbiddenError("Unauthorized")

        transaction = Transaction(
            booking_id=data.booking_id,
            payer_id=user_id,
            payee_id=booking.creative_id,
            amount=data.amount,
            type=TransactionType.DEPOSIT.value,
            payment_method=data.payment_method.value,
            status=TransactionStatus.PENDING.value,
        )
        self.db.add(transaction)
        self.db.commit()
        self.db.refresh(transaction)

        logger.info(
            f"Pending {data.payment_method.value} deposit of {format_minor_units(data.amount)} "
            f"recorded for booking {data.booking_id}"
        )
        return transaction
