"""
Tests for availability slots and portfolio items
"""
from creative_marketplace.db.models import CreativeProfile


def _creative(user_factory, db_session):
    user = user_factory(user_type="creative")
    profile = CreativeProfile(user_id=user.id)
    db_session.add(profile)
    db_session.commit()
    db_session.refresh(profile)
    return user, profile


SLOT = {"date": "2026-11-02", "startTime": "09:00", "endTime": "12:00"}


class TestAvailability:

    def test_requires_creative_profile(self, client, user_factory, login_as):
        login_as(user_factory())
        response = client.post("/api/trpc/availability.addAvailability", json=SLOT)
        assert response.status_code == 404
        assert response.json()["message"] == "Creative profile not found"

    def test_add_and_list(self, client, user_factory, login_as, db_session):
        user, profile = _creative(user_factory, db_session)
        login_as(user)

        created = client.post("/api/trpc/availability.addAvailability", json=SLOT).json()
        assert created["creativeId"] == profile.id
        assert created["isBooked"] is False

        # overlapping slots are accepted
        client.post("/api/trpc/availability.addAvailability", json={**SLOT, "startTime": "10:00"})

        slots = client.get("/api/trpc/availability.getCreativeAvailability",
                           params={"creativeId": profile.id}).json()
        assert len(slots) == 2


class TestPortfolio:

    def test_requires_creative_profile(self, client, user_factory, login_as):
        login_as(user_factory())
        response = client.post("/api/trpc/portfolio.addItem", json={"title": "Shoot", "category": "portrait"})
        assert response.status_code == 404

    def test_add_and_list(self, client, user_factory, login_as, db_session):
        user, profile = _creative(user_factory, db_session)
        login_as(user)

        item = client.post("/api/trpc/portfolio.addItem", json={
            "title": "Golden hour",
            "imageUrl": "https://cdn.example.com/golden.jpg",
            "category": "portrait",
        }).json()
        assert item["creativeId"] == profile.id
        assert item["displayOrder"] == 0

        items = client.get("/api/trpc/portfolio.getCreativePortfolio", params={"creativeId": profile.id}).json()
        assert [i["title"] for i in items] == ["Golden hour"]
