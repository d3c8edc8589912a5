"""
Identity provider client

Exchanges OAuth authorization codes for access tokens and fetches the
signed-in user's identity.
"""
import base64
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import httpx

from ..config import config

logger = logging.getLogger(__name__)

EXCHANGE_TOKEN_PATH = "/webdev.v1.WebDevAuthPublicService/ExchangeToken"
GET_USER_INFO_PATH = "/webdev.v1.WebDevAuthPublicService/GetUserInfo"
GET_USER_INFO_WITH_JWT_PATH = "/webdev.v1.WebDevAuthPublicService/GetUserInfoWithJwt"

HTTP_TIMEOUT_SECONDS = 30.0

# Checked in order; the first registered platform found wins
PLATFORM_LOGIN_METHODS = [
    ({"REGISTERED_PLATFORM_EMAIL"}, "email"),
    ({"REGISTERED_PLATFORM_GOOGLE"}, "google"),
    ({"REGISTERED_PLATFORM_APPLE"}, "apple"),
    ({"REGISTERED_PLATFORM_MICROSOFT", "REGISTERED_PLATFORM_AZURE"}, "microsoft"),
    ({"REGISTERED_PLATFORM_GITHUB"}, "github"),
]


@dataclass
class UserInfo:
    """Identity returned by the provider"""
    open_id: Optional[str]
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None


def derive_login_method(platforms: Optional[Iterable[Any]], fallback: Optional[str]) -> Optional[str]:
    if fallback:
        return fallback
    if not platforms or isinstance(platforms, (str, bytes)):
        return None

    # Keep first-seen order so the lower-cased fallback is deterministic
    seen = []
    for platform in platforms:
        if isinstance(platform, str) and platform not in seen:
            seen.append(platform)
    if not seen:
        return None

    for names, method in PLATFORM_LOGIN_METHODS:
        if names.intersection(seen):
            return method
    return seen[0].lower()


class OAuthService:
    """Thin httpx client for the identity provider"""

    def __init__(self, base_url: Optional[str] = None, app_id: Optional[str] = None,
                 client: Optional[httpx.Client] = None):
        self.base_url = base_url if base_url is not None else config.OAUTH_SERVER_URL
        self.app_id = app_id if app_id is not None else config.APP_ID
        if not self.base_url:
            logger.error("[OAuth] OAUTH_SERVER_URL is not configured")
        self.client = client or httpx.Client(base_url=self.base_url, timeout=HTTP_TIMEOUT_SECONDS)

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = self.client.post(path, json=payload)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def decode_state(state: str) -> str:
        """The state parameter carries the base64-encoded redirect URI"""
        return base64.b64decode(state).decode("utf-8")

    def exchange_code_for_token(self, code: str, state: str) -> Dict[str, Any]:
        return self._post(EXCHANGE_TOKEN_PATH, {
            "clientId": self.app_id,
            "grantType": "authorization_code",
            "code": code,
            "redirectUri": self.decode_state(state),
        })

    def _to_user_info(self, data: Dict[str, Any]) -> UserInfo:
        login_method = derive_login_method(data.get("platforms"), data.get("platform"))
        return UserInfo(
            open_id=data.get("openId"),
            name=data.get("name"),
            email=data.get("email"),
            login_method=login_method,
        )

    def get_user_info(self, access_token: str) -> UserInfo:
        data = self._post(GET_USER_INFO_PATH, {"accessToken": access_token})
        return self._to_user_info(data)

    def get_user_info_with_jwt(self, jwt_token: str) -> UserInfo:
        data = self._post(GET_USER_INFO_WITH_JWT_PATH, {
            "jwtToken": jwt_token,
            "projectId": self.app_id,
        })
        return self._to_user_info(data)


_oauth_service: Optional[OAuthService] = None


def get_oauth_service() -> OAuthService:
    """Shared provider client; usable as a FastAPI dependency"""
    global _oauth_service
    if _oauth_service is None:
        _oauth_service = OAuthService()
    return _oauth_service
