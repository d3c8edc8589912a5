"""
Tests for the LLM client and AI assist procedures
"""
import asyncio
import json
import time
from types import SimpleNamespace
from unittest.mock import patch

import httpx
import pytest

from creative_marketplace.api_server import app
from creative_marketplace.auth import get_current_user
from creative_marketplace.config import config
from creative_marketplace.db.models import User
from creative_marketplace.exceptions import ServiceConfigurationError, UpstreamServiceError
from creative_marketplace.services.llm_service import (
    DEFAULT_API_BASE,
    MAX_TOKENS,
    invoke_llm,
    json_schema_format,
    resolve_api_base,
)


def _reply(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestInvokeLLM:

    @patch("creative_marketplace.services.llm_service.litellm.completion")
    def test_call_parameters(self, mock_completion):
        mock_completion.return_value = _reply("hello")
        messages = [{"role": "user", "content": "hi"}]

        assert invoke_llm(messages) is mock_completion.return_value

        kwargs = mock_completion.call_args.kwargs
        assert kwargs["api_base"] == "https://forge.test/v1"
        assert kwargs["api_key"] == "test-llm-key"
        assert kwargs["max_tokens"] == MAX_TOKENS == 32768
        assert kwargs["model"].endswith("gemini-2.5-flash")
        assert "response_format" not in kwargs

    def test_api_base_fallback(self, monkeypatch):
        monkeypatch.setattr(config, "LLM_API_URL", "")
        assert resolve_api_base() == DEFAULT_API_BASE

    def test_api_base_strips_trailing_slash(self, monkeypatch):
        monkeypatch.setattr(config, "LLM_API_URL", "https://llm.example.com/")
        assert resolve_api_base() == "https://llm.example.com/v1"

    def test_requires_key(self, monkeypatch):
        monkeypatch.setattr(config, "LLM_API_KEY", "")
        with pytest.raises(ServiceConfigurationError):
            invoke_llm([{"role": "user", "content": "hi"}])

    def test_json_schema_requires_schema(self):
        with pytest.raises(ValueError):
            invoke_llm([{"role": "user", "content": "hi"}], response_format={"type": "json_schema", "json_schema": {}})

    @patch("creative_marketplace.services.llm_service.litellm.completion")
    def test_provider_failure_wrapped(self, mock_completion):
        mock_completion.side_effect = RuntimeError("rate limited")
        with pytest.raises(UpstreamServiceError):
            invoke_llm([{"role": "user", "content": "hi"}])

    @patch("creative_marketplace.services.llm_service.litellm.completion")
    def test_structured_format_forwarded(self, mock_completion):
        mock_completion.return_value = _reply("{}")
        response_format = json_schema_format("thing", {"type": "object"})
        invoke_llm([{"role": "user", "content": "hi"}], response_format=response_format)
        assert mock_completion.call_args.kwargs["response_format"] == response_format


INVOKE = "creative_marketplace.services.ai_assist_service.invoke_llm"


class TestAIProcedures:

    def test_requires_login(self, client):
        response = client.post("/api/trpc/ai.generateCaption", json={"serviceType": "photography"})
        assert response.status_code == 401

    def test_pricing_suggestion(self, client, user_factory, login_as):
        login_as(user_factory())
        reply = {"basePrice": 800, "hourlyRate": 120, "depositPercentage": 30, "reasoning": "Senior rates"}
        with patch(INVOKE, return_value=_reply(json.dumps(reply))) as mock_invoke:
            response = client.post("/api/trpc/ai.generatePricingSuggestion",
                                   json={"serviceType": "photography", "experience": "10 years"})

        assert response.json() == reply
        messages = mock_invoke.call_args.args[0]
        assert "Experience Level: 10 years" in messages[1]["content"]
        assert "Location: Not specified" in messages[1]["content"]
        assert mock_invoke.call_args.kwargs["response_format"]["json_schema"]["name"] == "pricing_suggestion"

    def test_pricing_suggestion_fallback(self, client, user_factory, login_as):
        login_as(user_factory())
        with patch(INVOKE, return_value=_reply("not json")):
            response = client.post("/api/trpc/ai.generatePricingSuggestion", json={"serviceType": "styling"})

        assert response.json() == {
            "basePrice": 500,
            "hourlyRate": 75,
            "depositPercentage": 50,
            "reasoning": "Default pricing. Please adjust based on your experience and market.",
        }

    def test_caption(self, client, user_factory, login_as):
        login_as(user_factory())
        with patch(INVOKE, return_value=_reply("Light, framed.")) as mock_invoke:
            response = client.post("/api/trpc/ai.generateCaption", json={"serviceType": "photography", "style": "casual"})

        assert response.json() == {"caption": "Light, framed."}
        assert "Style: casual" in mock_invoke.call_args.args[0][1]["content"]

    def test_caption_style_validated(self, client, user_factory, login_as):
        login_as(user_factory())
        response = client.post("/api/trpc/ai.generateCaption", json={"serviceType": "photography", "style": "loud"})
        assert response.status_code == 422

    def test_response_template(self, client, user_factory, login_as):
        login_as(user_factory())
        with patch(INVOKE, return_value=_reply("Hi [NAME]")) as mock_invoke:
            response = client.post("/api/trpc/ai.generateResponseTemplate", json={"inquiryType": "customization"})

        assert response.json() == {"template": "Hi [NAME]"}
        assert "client asking about custom services" in mock_invoke.call_args.args[0][1]["content"]

    def test_profile_bio(self, client, user_factory, login_as):
        login_as(user_factory())
        with patch(INVOKE, return_value=_reply("Ada makes pictures.")):
            response = client.post("/api/trpc/ai.generateProfileBio", json={"name": "Ada", "serviceType": "photographer"})
        assert response.json() == {"bio": "Ada makes pictures."}

    def test_service_description(self, client, user_factory, login_as):
        login_as(user_factory())
        with patch(INVOKE, return_value=_reply("A full day of coverage.")) as mock_invoke:
            response = client.post("/api/trpc/ai.generateServiceDescription", json={"serviceName": "Wedding day"})
        assert response.json() == {"description": "A full day of coverage."}
        assert "Target Audience: General" in mock_invoke.call_args.args[0][1]["content"]

    def test_analyze_profile(self, client, user_factory, login_as):
        login_as(user_factory())
        reply = {"strengths": ["Clear bio"], "improvements": ["More reviews"], "priority": "high"}
        with patch(INVOKE, return_value=_reply(json.dumps(reply))):
            response = client.post("/api/trpc/ai.analyzeProfile", json={"bio": "Hi", "portfolioCount": 3})
        assert response.json() == reply

    def test_analyze_profile_fallback(self, client, user_factory, login_as):
        login_as(user_factory())
        with patch(INVOKE, return_value=_reply('{"strengths": "not a list"}')):
            response = client.post("/api/trpc/ai.analyzeProfile", json={})
        assert response.json() == {
            "strengths": ["Profile exists"],
            "improvements": ["Add more portfolio items", "Encourage client reviews"],
            "priority": "medium",
        }

    def test_unconfigured_llm(self, client, user_factory, login_as, monkeypatch):
        login_as(user_factory())
        monkeypatch.setattr(config, "LLM_API_KEY", "")
        response = client.post("/api/trpc/ai.generateCaption", json={"serviceType": "photography"})
        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"


class TestLLMCallsOffEventLoop:

    def test_health_answers_while_llm_call_runs(self):
        def slow_completion(**kwargs):
            time.sleep(1.0)
            return _reply("Slow caption")

        async def run_requests():
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
                ai_request = asyncio.create_task(
                    http.post("/api/trpc/ai.generateCaption", json={"serviceType": "photography"})
                )
                await asyncio.sleep(0.2)
                started = time.perf_counter()
                health = await http.get("/health")
                health_latency = time.perf_counter() - started
                ai = await ai_request
            return ai, health, health_latency

        app.dependency_overrides[get_current_user] = lambda: User(id=1, open_id="abc", name="Ada", role="user")
        try:
            with patch("creative_marketplace.services.llm_service.litellm.completion", side_effect=slow_completion):
                ai, health, health_latency = asyncio.run(run_requests())
        finally:
            app.dependency_overrides.pop(get_current_user, None)

        assert ai.status_code == 200
        assert ai.json() == {"caption": "Slow caption"}
        assert health.status_code == 200
        assert health_latency < 0.5
