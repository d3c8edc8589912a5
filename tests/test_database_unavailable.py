"""
Tests for behaviour when no database is configured
"""
import pytest

from creative_marketplace.api_server import app
from creative_marketplace.auth import get_current_user
from creative_marketplace.db.engine import get_db, reset_engine
from creative_marketplace.db.models import User
from creative_marketplace.exceptions import DatabaseUnavailableError
from creative_marketplace.schemas import BookingCreate
from creative_marketplace.services.booking_service import BookingService
from creative_marketplace.services.review_service import ReviewService


@pytest.fixture
def signed_in_without_db(no_db_client):
    app.dependency_overrides[get_current_user] = lambda: User(id=1, open_id="abc", name="Ada", role="user")
    yield no_db_client
    app.dependency_overrides.pop(get_current_user, None)


class TestWithoutDatabase:

    def test_get_db_yields_none(self):
        reset_engine()
        assert list(get_db()) == [None]

    def test_public_queries_are_empty(self, no_db_client):
        assert no_db_client.get("/api/trpc/creative.search").json() == []
        assert no_db_client.get("/api/trpc/gig.listPosts").json() == []
        assert no_db_client.get("/api/trpc/creative.getById", params={"id": 1}).json() is None
        assert no_db_client.get("/api/trpc/review.getAverageRating", params={"creativeId": 1}).json() == 0

    def test_sessions_cannot_resolve(self, no_db_client):
        assert no_db_client.get("/api/trpc/auth.me").json() is None

    def test_protected_queries_are_empty(self, signed_in_without_db):
        assert signed_in_without_db.get("/api/trpc/booking.getMyBookings").json() == []
        assert signed_in_without_db.get("/api/trpc/payment.getTransactions").json() == []
        assert signed_in_without_db.get("/api/trpc/messaging.getConversations").json() == []

    def test_mutations_fail(self, signed_in_without_db):
        response = signed_in_without_db.post("/api/trpc/gig.createPost", json={
            "title": "Shoot",
            "description": "Shoot",
            "category": "photography",
            "budget": 100,
            "deadline": "2026-12-01",
        })
        assert response.status_code == 503
        assert response.json()["message"] == "Database not available"

    def test_service_mutation_raises(self):
        data = BookingCreate(
            creative_id=1,
            service_type="Shoot",
            booking_date="2026-11-02",
            start_time="10:00",
            end_time="11:00",
            total_price=100,
            deposit_amount=50,
        )
        with pytest.raises(DatabaseUnavailableError):
            BookingService(None).create_booking(1, data)

    def test_service_queries(self):
        assert BookingService(None).get_by_id(1) is None
        assert ReviewService(None).average_rating(1) == 0
