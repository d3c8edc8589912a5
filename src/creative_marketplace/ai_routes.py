"""
AI assist procedures (all require a signed-in user)

LLM calls block, so each helper runs in the default executor.
"""
import asyncio
from typing import Any, Callable

from fastapi import APIRouter, Depends

from .auth import get_current_user
from .db.models import User
from .schemas import (
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
from .services import ai_assist_service

router = APIRouter(prefix="/api/trpc", tags=["ai"])


async def _in_executor(helper: Callable[[Any], Any], data: Any) -> Any:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, lambda: helper(data))


@router.post("/ai.generatePricingSuggestion", response_model=PricingSuggestion)
async def generate_pricing_suggestion(data: PricingSuggestionInput, user: User = Depends(get_current_user)):
    return await _in_executor(ai_assist_service.generate_pricing_suggestion, data)


@router.post("/ai.generateCaption", response_model=CaptionResponse)
async def generate_caption(data: CaptionInput, user: User = Depends(get_current_user)):
    return await _in_executor(ai_assist_service.generate_caption, data)


@router.post("/ai.generateResponseTemplate", response_model=TemplateResponse)
async def generate_response_template(data: ResponseTemplateInput, user: User = Depends(get_current_user)):
    return await _in_executor(ai_assist_service.generate_response_template, data)


@router.post("/ai.generateProfileBio", response_model=BioResponse)
async def generate_profile_bio(data: ProfileBioInput, user: User = Depends(get_current_user)):
    return await _in_executor(ai_assist_service.generate_profile_bio, data)


@router.post("/ai.generateServiceDescription", response_model=DescriptionResponse)
async def generate_service_description(data: ServiceDescriptionInput, user: User = Depends(get_current_user)):
    return await _in_executor(ai_assist_service.generate_service_description, data)


@router.post("/ai.analyzeProfile", response_model=ProfileAnalysis)
async def analyze_profile(data: ProfileAnalysisInput, user: User = Depends(get_current_user)):
    return await _in_executor(ai_assist_service.analyze_profile, data)
