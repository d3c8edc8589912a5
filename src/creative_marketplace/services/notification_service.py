"""
Owner notifications through the hosted notification service
"""
import logging
from typing import Optional

import httpx

from ..config import config
from ..exceptions import BadRequestError, ServiceConfigurationError

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 1200
CONTENT_MAX_LENGTH = 20000
SEND_NOTIFICATION_PATH = "webdevtoken.v1.WebDevService/SendNotification"
HTTP_TIMEOUT_SECONDS = 30.0


def _trim_required(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise BadRequestError(f"Notification {field_name} is required.")
    return value.strip()


def build_endpoint_url(base_url: str) -> str:
    normalized = base_url if base_url.endswith("/") else f"{base_url}/"
    return f"{normalized}{SEND_NOTIFICATION_PATH}"


def notify_owner(title: str, content: str, client: Optional[httpx.Client] = None) -> bool:
    """
    Push a notification to the project owner

    Returns:
        True when the service accepted the notification, False otherwise

    Raises:
        BadRequestError: empty or oversized title/content
        ServiceConfigurationError: notification endpoint or key not configured
    """
    title = _trim_required(title, "title")
    content = _trim_required(content, "content")

    if len(title) > TITLE_MAX_LENGTH:
        raise BadRequestError(f"Notification title must be at most {TITLE_MAX_LENGTH} characters.")
    if len(content) > CONTENT_MAX_LENGTH:
        raise BadRequestError(f"Notification content must be at most {CONTENT_MAX_LENGTH} characters.")

    if not config.LLM_API_URL:
        raise ServiceConfigurationError("Notification service URL is not configured.")
    if not config.LLM_API_KEY:
        raise ServiceConfigurationError("Notification service API key is not configured.")

    headers = {
        "accept": "application/json",
        "authorization": f"Bearer {config.LLM_API_KEY}",
        "content-type": "application/json",
        "connect-protocol-version": "1",
    }
    url = build_endpoint_url(config.LLM_API_URL)

    try:
        if client is not None:
            response = client.post(url, json={"title": title, "content": content}, headers=headers)
        else:
            response = httpx.post(url, json={"title": title, "content": content},
                                  headers=headers, timeout=HTTP_TIMEOUT_SECONDS)
    except httpx.HTTPError as e:
        logger.warning(f"[Notification] Error calling notification service: {e}")
        return False

    if not response.is_success:
        logger.warning(
            f"[Notification] Failed to notify owner ({response.status_code} {response.reason_phrase})"
            f"{': ' + response.text if response.text else ''}"
        )
        return False

    return True
