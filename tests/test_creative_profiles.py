"""
Tests for creative profile procedures and marketplace search
"""
from creative_marketplace.db.models import CreativeProfile
from creative_marketplace.services.creative_service import CreativeService


def _profile(db_session, user_id, **fields):
    profile = CreativeProfile(user_id=user_id, **fields)
    db_session.add(profile)
    db_session.commit()
    db_session.refresh(profile)
    return profile


class TestProfileProcedures:

    def test_update_creates_profile(self, client, user_factory, login_as):
        user = user_factory(user_type="creative")
        login_as(user)

        response = client.post("/api/trpc/creative.updateProfile", json={
            "businessName": "Lumen Studio",
            "categories": '["photography"]',
            "basePrice": 50000,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == user.id
        assert data["businessName"] == "Lumen Studio"
        assert data["basePrice"] == 50000
        assert data["averageRating"] == "0"
        assert data["isActive"] is True

    def test_update_only_touches_supplied_fields(self, client, user_factory, login_as):
        login_as(user_factory())
        client.post("/api/trpc/creative.updateProfile", json={"businessName": "Lumen", "bio": "Light"})

        response = client.post("/api/trpc/creative.updateProfile", json={"bio": "Shadow"})

        assert response.json()["businessName"] == "Lumen"
        assert response.json()["bio"] == "Shadow"

    def test_get_profile(self, client, user_factory, login_as, db_session):
        user = user_factory()
        _profile(db_session, user.id, business_name="Mine")
        login_as(user)

        response = client.get("/api/trpc/creative.getProfile")
        assert response.json()["businessName"] == "Mine"

    def test_get_profile_without_one(self, client, user_factory, login_as):
        login_as(user_factory())
        response = client.get("/api/trpc/creative.getProfile")
        assert response.status_code == 200
        assert response.json() is None

    def test_get_by_id_is_public(self, client, db_session):
        profile = _profile(db_session, 42, business_name="Public")
        response = client.get("/api/trpc/creative.getById", params={"id": profile.id})
        assert response.json()["businessName"] == "Public"


class TestSearch:

    def test_only_active_profiles(self, client, db_session):
        _profile(db_session, 1, business_name="Active")
        _profile(db_session, 2, business_name="Hidden", is_active=False)

        names = [p["businessName"] for p in client.get("/api/trpc/creative.search").json()]
        assert names == ["Active"]

    def test_filters(self, db_session):
        _profile(db_session, 1, categories='["photography"]', location="Lagos, Nigeria", average_rating="4.50")
        _profile(db_session, 2, categories='["styling"]', location="Accra", average_rating="3.00")
        _profile(db_session, 3, categories='["photography","video"]', location="Abuja", average_rating="4.90")

        service = CreativeService(db_session)

        assert [p.user_id for p in service.search(category="photography")] == [1, 3]
        assert [p.user_id for p in service.search(location="lagos")] == [1]
        assert [p.user_id for p in service.search(min_rating=4.6)] == [3]
        assert [p.user_id for p in service.search(category="photography", min_rating=4.0, limit=1, offset=1)] == [3]

    def test_negative_paging_rejected(self, client, db_session):
        _profile(db_session, 1)

        assert client.get("/api/trpc/creative.search", params={"offset": -1}).status_code == 422
        assert client.get("/api/trpc/creative.search", params={"offset": -1, "minRating": 0}).status_code == 422
        assert client.get("/api/trpc/creative.search", params={"limit": -5}).status_code == 422

    def test_pagination(self, client, db_session):
        for user_id in range(1, 26):
            _profile(db_session, user_id)

        assert len(client.get("/api/trpc/creative.search").json()) == 20
        page = client.get("/api/trpc/creative.search", params={"limit": 10, "offset": 20}).json()
        assert [p["userId"] for p in page] == [21, 22, 23, 24, 25]
