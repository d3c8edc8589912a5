"""
Tests for the gig board and payment transactions
"""
import pytest

from creative_marketplace.db.models import Booking, GigPost
from creative_marketplace.services.payment_service import format_minor_units


GIG = {
    "title": "Product shoot",
    "description": "Twenty product photos on white background",
    "category": "photography",
    "budget": 80000,
    "deadline": "2026-12-01",
}


class TestGigBoard:

    def test_create_and_list(self, client, user_factory, login_as):
        poster = user_factory()
        login_as(poster)

        post = client.post("/api/trpc/gig.createPost", json=GIG).json()
        assert post["clientId"] == poster.id
        assert post["status"] == "open"
        assert post["applicationsCount"] == 0

        assert [p["id"] for p in client.get("/api/trpc/gig.listPosts").json()] == [post["id"]]

    def test_only_open_posts_listed(self, client, db_session):
        db_session.add(GigPost(client_id=1, title="Open"))
        db_session.add(GigPost(client_id=1, title="Closed", status="closed"))
        db_session.commit()

        assert [p["title"] for p in client.get("/api/trpc/gig.listPosts").json()] == ["Open"]

    def test_list_paginates(self, client, db_session):
        for i in range(25):
            db_session.add(GigPost(client_id=1, title=f"Post {i}"))
        db_session.commit()

        assert len(client.get("/api/trpc/gig.listPosts").json()) == 20
        assert len(client.get("/api/trpc/gig.listPosts", params={"limit": 10, "offset": 20}).json()) == 5

    def test_negative_paging_rejected(self, client):
        assert client.get("/api/trpc/gig.listPosts", params={"offset": -1}).status_code == 422
        assert client.get("/api/trpc/gig.listPosts", params={"limit": -1}).status_code == 422

    def test_apply_counts_applications(self, client, user_factory, login_as):
        login_as(user_factory())
        post = client.post("/api/trpc/gig.createPost", json=GIG).json()

        creative = user_factory(user_type="creative")
        login_as(creative)
        application = client.post("/api/trpc/gig.applyForGig", json={
            "gigPostId": post["id"],
            "proposedPrice": 75000,
            "coverLetter": "I shoot products every week.",
        }).json()
        assert application["creativeId"] == creative.id
        assert application["status"] == "pending"

        applications = client.get("/api/trpc/gig.getApplications", params={"gigPostId": post["id"]}).json()
        assert [a["id"] for a in applications] == [application["id"]]
        assert client.get("/api/trpc/gig.listPosts").json()[0]["applicationsCount"] == 1


class TestPayments:

    def _booking(self, db_session, client_id, creative_id):
        booking = Booking(
            client_id=client_id,
            creative_id=creative_id,
            booking_date="2026-11-02",
            start_time="10:00",
            end_time="12:00",
            total_price=30000,
            deposit_amount=10000,
        )
        db_session.add(booking)
        db_session.commit()
        db_session.refresh(booking)
        return booking

    def test_initiate_records_pending_deposit(self, client, user_factory, login_as, db_session):
        payer = user_factory()
        booking = self._booking(db_session, payer.id, 77)
        login_as(payer)

        response = client.post("/api/trpc/payment.initiatePayment", json={
            "bookingId": booking.id,
            "amount": 10000,
            "paymentMethod": "paystack",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["payerId"] == payer.id
        assert data["payeeId"] == 77
        assert data["type"] == "deposit"
        assert data["status"] == "pending"
        assert data["currency"] == "USD"
        assert "metadata" in data

    def test_only_client_may_pay(self, client, user_factory, login_as, db_session):
        payer, stranger = user_factory(), user_factory()
        booking = self._booking(db_session, payer.id, 77)
        login_as(stranger)

        response = client.post("/api/trpc/payment.initiatePayment",
                               json={"bookingId": booking.id, "amount": 100, "paymentMethod": "stripe"})
        assert response.status_code == 403

    def test_unknown_payment_method(self, client, user_factory, login_as, db_session):
        payer = user_factory()
        booking = self._booking(db_session, payer.id, 77)
        login_as(payer)

        response = client.post("/api/trpc/payment.initiatePayment",
                               json={"bookingId": booking.id, "amount": 100, "paymentMethod": "cash"})
        assert response.status_code == 422

    def test_transactions_as_payer_or_payee(self, client, user_factory, login_as, db_session):
        payer, payee = user_factory(), user_factory()
        booking = self._booking(db_session, payer.id, payee.id)
        login_as(payer)
        client.post("/api/trpc/payment.initiatePayment",
                    json={"bookingId": booking.id, "amount": 10000, "paymentMethod": "stripe"})

        assert len(client.get("/api/trpc/payment.getTransactions").json()) == 1
        login_as(payee)
        assert len(client.get("/api/trpc/payment.getTransactions").json()) == 1
        login_as(user_factory())
        assert client.get("/api/trpc/payment.getTransactions").json() == []


@pytest.mark.parametrize("amount,currency,expected", [
    (12345, "USD", "$123.45"),
    (5, "USD", "$0.05"),
    (1000000, "NGN", "₦10,000.00"),
    (250, "JPY", "2.50 JPY"),
])
def test_format_minor_units(amount, currency, expected):
    assert format_minor_units(amount, currency) == expected
