"""
LLM access through litellm against an OpenAI-compatible endpoint
"""
import logging
from typing import Any, Dict, List, Optional

import litellm

from ..config import config
from ..exceptions import ServiceConfigurationError, UpstreamServiceError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://forge.manus.im/v1"
MAX_TOKENS = 32768

litellm.drop_params = True


def resolve_api_base() -> str:
    if config.LLM_API_URL and config.LLM_API_URL.strip():
        return f"{config.LLM_API_URL.rstrip('/')}/v1"
    return DEFAULT_API_BASE


def normalize_response_format(response_format: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Validate a response_format before it is sent"""
    if response_format is None:
        return None
    if response_format.get("type") == "json_schema" and not response_format.get("json_schema", {}).get("schema"):
        raise ValueError("response_format json_schema requires a defined schema object")
    return response_format


def json_schema_format(name: str, schema: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "json_schema",
        "json_schema": {"name": name, "strict": True, "schema": schema},
    }


def invoke_llm(messages: List[Dict[str, Any]], response_format: Optional[Dict[str, Any]] = None) -> Any:
    """
    Run a chat completion

    Args:
        messages: OpenAI-style role/content dicts
        response_format: Optional structured output format

    Returns:
        The litellm ModelResponse

    Raises:
        ServiceConfigurationError: LLM_API_KEY is not set
        UpstreamServiceError: the provider call failed
    """
    if not config.LLM_API_KEY:
        raise ServiceConfigurationError("LLM_API_KEY is not configured")

    kwargs: Dict[str, Any] = {
        "model": f"openai/{config.LLM_MODEL}",
        "messages": messages,
        "api_base": resolve_api_base(),
        "api_key": config.LLM_API_KEY,
        "max_tokens": MAX_TOKENS,
    }
    normalized = normalize_response_format(response_format)
    if normalized:
        kwargs["response_format"] = normalized

    try:
        return litellm.completion(**kwargs)
    except Exception as e:
        logger.error(f"[LLM] Invocation failed: {type(e).__name__} - {str(e)}")
        raise UpstreamServiceError(f"LLM invoke failed: {e}") from e


def first_message_content(response: Any) -> Optional[str]:
    """Text content of the first choice, or None"""
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, KeyError, TypeError):
        return None
    return content if isinstance(content, str) else None
