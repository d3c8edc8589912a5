"""
Tests for system procedures and owner notifications
"""
from unittest.mock import Mock, patch

import httpx
import pytest

from creative_marketplace.config import config
from creative_marketplace.exceptions import BadRequestError, ServiceConfigurationError
from creative_marketplace.services.notification_service import notify_owner


class TestHealth:

    def test_liveness(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_procedure_health(self, client):
        response = client.get("/api/trpc/system.health", params={"timestamp": 1700000000000})
        assert response.json() == {"ok": True}

    def test_negative_timestamp_rejected(self, client):
        assert client.get("/api/trpc/system.health", params={"timestamp": -1}).status_code == 422


class TestNotifyOwnerProcedure:

    def test_admin_only(self, client, user_factory, login_as):
        login_as(user_factory())
        response = client.post("/api/trpc/system.notifyOwner", json={"title": "Hi", "content": "There"})
        assert response.status_code == 403
        assert response.json()["message"] == "You do not have required permission (10002)"

    def test_anonymous_is_forbidden(self, client):
        response = client.post("/api/trpc/system.notifyOwner", json={"title": "Hi", "content": "There"})
        assert response.status_code == 403

    def test_empty_fields_rejected(self, client, user_factory, login_as):
        login_as(user_factory(role="admin"))
        response = client.post("/api/trpc/system.notifyOwner", json={"title": "", "content": "There"})
        assert response.status_code == 422

    def test_admin_notifies(self, client, user_factory, login_as):
        login_as(user_factory(role="admin"))
        with patch("creative_marketplace.system_routes.notify_owner", return_value=True) as mock_notify:
            response = client.post("/api/trpc/system.notifyOwner", json={"title": "Hi", "content": "There"})

        assert response.json() == {"success": True}
        mock_notify.assert_called_once_with("Hi", "There")


class TestNotifyOwner:

    @patch("creative_marketplace.services.notification_service.httpx.post")
    def test_posts_trimmed_payload(self, mock_post):
        mock_post.return_value = Mock(is_success=True)

        assert notify_owner("  New booking  ", " Details ") is True

        args, kwargs = mock_post.call_args
        assert args[0] == "https://forge.test/webdevtoken.v1.WebDevService/SendNotification"
        assert kwargs["json"] == {"title": "New booking", "content": "Details"}
        assert kwargs["headers"]["authorization"] == "Bearer test-llm-key"
        assert kwargs["headers"]["connect-protocol-version"] == "1"

    @patch("creative_marketplace.services.notification_service.httpx.post")
    def test_rejected_by_service(self, mock_post):
        mock_post.return_value = Mock(is_success=False, status_code=500, reason_phrase="Server Error", text="")
        assert notify_owner("Title", "Content") is False

    @patch("creative_marketplace.services.notification_service.httpx.post")
    def test_transport_error(self, mock_post):
        mock_post.side_effect = httpx.ConnectError("connection refused")
        assert notify_owner("Title", "Content") is False

    def test_length_limits(self):
        with pytest.raises(BadRequestError):
            notify_owner("x" * 1201, "Content")
        with pytest.raises(BadRequestError):
            notify_owner("Title", "x" * 20001)
        with pytest.raises(BadRequestError):
            notify_owner("   ", "Content")

    def test_requires_configuration(self, monkeypatch):
        monkeypatch.setattr(config, "LLM_API_URL", "")
        with pytest.raises(ServiceConfigurationError):
            notify_owner("Title", "Content")
