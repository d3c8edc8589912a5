"""
Booking service

Status changes are a single ownership-checked update: any status may follow
any other, and availability slots are not reserved.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from ..db.models import Booking, BookingStatus
from ..exceptions import DatabaseUnavailableError, ForbiddenError, NotFoundError
from ..schemas import BookingCreate, parse_clock_time
from .creative_service import CreativeService

logger = logging.getLogger(__name__)


def compute_duration_minutes(start_time: str, end_time: str) -> int:
    """Minutes between two HH:mm times on the same day (negative if end < start)"""
    delta = parse_clock_time(end_time) - parse_clock_time(start_time)
    return round(delta.total_seconds() / 60)


class BookingService:
    """Service for bookings"""

    def __init__(self, db: Optional[Session]):
        self.db = db

    def create_booking(self, client_id: int, data: BookingCreate) -> Booking:
        if self.db is None:
            raise DatabaseUnavailableError()

        booking = Booking(
            client_id=client_id,
            creative_id=data.creative_id,
            service_type=data.service_type,
            description=data.description,
            booking_date=data.booking_date,
            start_time=data.start_time,
            end_time=data.end_time,
            duration=compute_duration_minutes(data.start_time, data.end_time),
            location=data.location,
            total_price=data.total_price,
            deposit_amount=data.deposit_amount,
            status=BookingStatus.PENDING.value,
        )
        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)

        logger.info(f"Booking {booking.id} created by client {client_id} for creative {data.creative_id}")
        return booking

    def get_by_id(self, booking_id: int) -> Optional[Booking]:
        if self.db is None:
            return None
        return self.db.query(Booking).filter(Booking.id == booking_id).first()

    def list_for_client(self, client_id: int) -> List[Booking]:
        if self.db is None:
            return []
        return self.db.query(Booking).filter(Booking.client_id == client_id).all()

    def list_for_creative(self, creative_id: int) -> List[Booking]:
        if self.db is None:
            return []
        return self.db.query(Booking).filter(Booking.creative_id == creative_id).all()

    def list_for_creative_user(self, user_id: int) -> List[Booking]:
        """Bookings addressed to the user's creative profile"""
        profile = CreativeService(self.db).get_profile_for_user(user_id)
        if profile is None:
            return []
        return self.list_for_creative(profile.id)

    def update_status(self, user_id: int, booking_id: int, status: BookingStatus) -> Booking:
        """
        Set a booking's status

        Raises:
            NotFoundError: booking does not exist
            ForbiddenError: caller is neither the client nor the creative
        """
        if self.db is None:
            raise DatabaseUnavailableError()

        booking = self.get_by_id(booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")

        if booking.creative_id != user_id and booking.client_id != user_id:
            raise ForbiddenError("Unauthorized")

        previous = booking.status
        booking.status = BookingStatus(status).value
        booking.updated_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(booking)

        logger.info(f"Booking {booking_id} status {previous} -> {booking.status} by user {user_id}")
        return booking
