"""
AI writing and pricing helpers for creatives

Each helper builds a prompt, calls the LLM once and shapes the reply.
Structured helpers fall back to fixed defaults when the reply is not valid JSON.
"""
import json
import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from ..schemas import (
    BioResponse,
    CaptionInput,
    CaptionResponse,
    DescriptionResponse,
    PricingSuggestion,
    PricingSuggestionInput,
    ProfileAnalysis,
    ProfileAnalysisInput,
    ProfileBioInput,
    ResponseTemplateInput,
    ServiceDescriptionInput,
    TemplateResponse,
)
from .llm_service import first_message_content, invoke_llm, json_schema_format

logger = logging.getLogger(__name__)

DEFAULT_PRICING = PricingSuggestion(
    base_price=500,
    hourly_rate=75,
    deposit_percentage=50,
    reasoning="Default pricing. Please adjust based on your experience and market.",
)

DEFAULT_ANALYSIS = ProfileAnalysis(
    strengths=["Profile exists"],
    improvements=["Add more portfolio items", "Encourage client reviews"],
    priority="medium",
)

INQUIRY_DESCRIPTIONS = {
    "availability": "client asking about availability",
    "pricing": "client asking about pricing",
    "customization": "client asking about custom services",
    "general": "general client inquiry",
}

PRICING_SCHEMA = {
    "type": "object",
    "properties": {
        "basePrice": {"type": "number", "description": "Suggested base price in USD"},
        "hourlyRate": {"type": "number", "description": "Suggested hourly rate in USD"},
        "depositPercentage": {"type": "number", "description": "Suggested deposit percentage"},
        "reasoning": {"type": "string", "description": "Explanation for pricing"},
    },
    "required": ["basePrice", "hourlyRate", "depositPercentage", "reasoning"],
    "additionalProperties": False,
}

PROFILE_ANALYSIS_SCHEMA = {
    "type": "object",
    "properties": {
        "strengths": {"type": "array", "items": {"type": "string"}},
        "improvements": {"type": "array", "items": {"type": "string"}},
        "priority": {"type": "string", "enum": ["high", "medium", "low"]},
    },
    "required": ["strengths", "improvements", "priority"],
    "additionalProperties": False,
}


def _messages(system: str, prompt: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": prompt},
    ]


def _parse_or_default(content: Optional[str], parse: Callable[[Dict[str, Any]], Any], default: Any) -> Any:
    try:
        return parse(json.loads(content or ""))
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        logger.warning(f"[AI] Unparseable structured reply, using defaults: {type(e).__name__}")
        return default


def generate_pricing_suggestion(data: PricingSuggestionInput) -> PricingSuggestion:
    prompt = (
        "You are a pricing expert for creative services. Based on the following information, "
        "provide realistic pricing suggestions:\n\n"
        f"Service Type: {data.service_type}\n"
        f"Experience Level: {data.experience or 'Not specified'}\n"
        f"Location: {data.location or 'Not specified'}\n\n"
        "Provide pricing in JSON format with fields: basePrice (in USD), hourlyRate (in USD), "
        "depositPercentage (0-100), and reasoning."
    )
    response = invoke_llm(
        _messages("You are a pricing expert for creative services. Always respond with valid JSON.", prompt),
        response_format=json_schema_format("pricing_suggestion", PRICING_SCHEMA),
    )
    return _parse_or_default(first_message_content(response), PricingSuggestion.model_validate, DEFAULT_PRICING)


def generate_caption(data: CaptionInput) -> CaptionResponse:
    prompt = (
        f"Generate a compelling portfolio caption for a {data.service_type} professional.\n"
        f"Description: {data.description or 'Not provided'}\n"
        f"Style: {data.style or 'professional'}\n\n"
        "The caption should be engaging, highlight the work quality, and encourage potential "
        "clients to book. Keep it under 150 words."
    )
    response = invoke_llm(_messages("You are a creative copywriter specializing in portfolio captions.", prompt))
    return CaptionResponse(caption=first_message_content(response))


def generate_response_template(data: ResponseTemplateInput) -> TemplateResponse:
    prompt = (
        f"Generate a professional response template for a {INQUIRY_DESCRIPTIONS[data.inquiry_type]}.\n"
        f"Context: {data.context or 'Not provided'}\n\n"
        "The response should be:\n"
        "- Professional and friendly\n"
        "- Clear and concise\n"
        "- Include a call-to-action\n"
        "- Be customizable by the creative\n\n"
        "Provide the template with [PLACEHOLDER] for areas the creative should customize."
    )
    response = invoke_llm(_messages(
        "You are a professional communication expert helping creatives respond to clients.", prompt
    ))
    return TemplateResponse(template=first_message_content(response))


def generate_profile_bio(data: ProfileBioInput) -> BioResponse:
    prompt = (
        f"Create a compelling professional bio for {data.name}, a {data.service_type}.\n"
        f"Experience: {data.experience or 'Not specified'}\n"
        f"Specialties: {data.specialties or 'Not specified'}\n"
        f"Tone: {data.style or 'professional'}\n\n"
        "The bio should:\n"
        "- Be 100-150 words\n"
        "- Highlight unique value proposition\n"
        "- Include relevant experience or achievements\n"
        "- End with a call-to-action\n"
        "- Be suitable for a portfolio website"
    )
    response = invoke_llm(_messages(
        "You are an expert at writing compelling professional bios for creatives.", prompt
    ))
    return BioResponse(bio=first_message_content(response))


def generate_service_description(data: ServiceDescriptionInput) -> DescriptionResponse:
    prompt = (
        f'Create a compelling service description for "{data.service_name}".\n'
        f"Details: {data.details or 'Not provided'}\n"
        f"Target Audience: {data.target_audience or 'General'}\n\n"
        "The description should:\n"
        "- Clearly explain what the service includes\n"
        "- Highlight benefits for the client\n"
        "- Be 75-150 words\n"
        "- Use engaging language\n"
        "- Include what to expect"
    )
    response = invoke_llm(_messages("You are an expert at writing service descriptions that convert.", prompt))
    return DescriptionResponse(description=first_message_content(response))


def analyze_profile(data: ProfileAnalysisInput) -> ProfileAnalysis:
    prompt = (
        "Analyze this creative professional's profile and suggest improvements:\n"
        f"Bio: {data.bio or 'Not provided'}\n"
        f"Service Types: {data.service_types or 'Not specified'}\n"
        f"Portfolio Items: {data.portfolio_count or 0}\n"
        f"Reviews: {data.review_count or 0}\n\n"
        "Provide specific, actionable suggestions in JSON format with fields: strengths (array), "
        "improvements (array), and priority (high/medium/low)."
    )
    response = invoke_llm(
        _messages("You are an expert profile optimizer for creative professionals.", prompt),
        response_format=json_schema_format("profile_analysis", PROFILE_ANALYSIS_SCHEMA),
    )
    return _parse_or_default(first_message_content(response), ProfileAnalysis.model_validate, DEFAULT_ANALYSIS)
