"""
Pydantic schemas for procedure inputs and outputs

Field names are snake_case in Python and camelCase on the wire.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .db.models import BookingStatus, PaymentMethod


TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def parse_clock_time(value: str) -> datetime:
    """Parse an HH:mm (or HH:mm:ss) string onto a fixed reference day"""
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt)
        except ValueError:
            continue
    raise ValueError(f"Invalid time '{value}', expected HH:mm")


class CamelModel(BaseModel):
    """Base schema: camelCase aliases, accepts either spelling, reads ORM rows"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Row outputs
# ---------------------------------------------------------------------------

class UserOut(CamelModel):
    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: str
    user_type: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime


class CreativeProfileOut(CamelModel):
    id: int
    user_id: int
    business_name: Optional[str] = None
    bio: Optional[str] = None
    categories: Optional[str] = None
    location: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    base_price: Optional[int] = None
    hourly_rate: Optional[int] = None
    profile_image: Optional[str] = None
    cover_image: Optional[str] = None
    average_rating: Optional[str] = None
    total_reviews: Optional[int] = None
    is_verified: Optional[bool] = None
    is_active: Optional[bool] = None
    portfolio: Optional[str] = None
    social_links: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class BookingOut(CamelModel):
    id: int
    client_id: int
    creative_id: int
    service_type: Optional[str] = None
    description: Optional[str] = None
    booking_date: str
    start_time: str
    end_time: str
    duration: Optional[int] = None
    location: Optional[str] = None
    total_price: int
    deposit_amount: int
    deposit_paid: Optional[bool] = None
    status: Optional[str] = None
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class AvailabilityOut(CamelModel):
    id: int
    creative_id: int
    date: str
    start_time: str
    end_time: str
    is_booked: Optional[bool] = None
    created_at: datetime
    updated_at: datetime


class ConversationOut(CamelModel):
    id: int
    participant_one_id: int
    participant_two_id: int
    booking_id: Optional[int] = None
    last_message: Optional[str] = None
    last_message_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class MessageOut(CamelModel):
    id: int
    conversation_id: int
    sender_id: int
    content: Optional[str] = None
    attachment_url: Optional[str] = None
    attachment_type: Optional[str] = None
    is_read: Optional[bool] = None
    created_at: datetime


class DeliverableOut(CamelModel):
    id: int
    booking_id: int
    creative_id: int
    client_id: int
    title: Optional[str] = None
    description: Optional[str] = None
    file_url: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    download_count: Optional[int] = None
    uploaded_at: datetime
    expires_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class ReviewOut(CamelModel):
    id: int
    booking_id: int
    reviewer_id: int
    creative_id: int
    rating: int
    title: Optional[str] = None
    comment: Optional[str] = None
    is_verified: Optional[bool] = None
    is_published: Optional[bool] = None
    created_at: datetime
    updated_at: datetime


class GigPostOut(CamelModel):
    id: int
    client_id: int
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    budget: Optional[int] = None
    location: Optional[str] = None
    deadline: Optional[str] = None
    status: Optional[str] = None
    applications_count: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class GigApplicationOut(CamelModel):
    id: int
    gig_post_id: int
    creative_id: int
    proposed_price: Optional[int] = None
    cover_letter: Optional[str] = None
    portfolio_links: Optional[str] = None
    status: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class TransactionOut(CamelModel):
    id: int
    booking_id: Optional[int] = None
    gig_post_id: Optional[int] = None
    payer_id: int
    payee_id: int
    amount: int
    currency: Optional[str] = None
    type: Optional[str] = None
    payment_method: str
    external_transaction_id: Optional[str] = None
    status: Optional[str] = None
    extra_metadata: Optional[str] = Field(
        default=None,
        validation_alias="extra_metadata",
        serialization_alias="metadata",
    )
    created_at: datetime
    updated_at: datetime


class PortfolioItemOut(CamelModel):
    id: int
    creative_id: int
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    category: Optional[str] = None
    display_order: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class SuccessResponse(CamelModel):
    success: bool


# ---------------------------------------------------------------------------
# Procedure inputs
# ---------------------------------------------------------------------------

class CreativeProfileUpdate(CamelModel):
    business_name: Optional[str] = None
    bio: Optional[str] = None
    categories: Optional[str] = None
    location: Optional[str] = None
    base_price: Optional[int] = None
    hourly_rate: Optional[int] = None
    profile_image: Optional[str] = None
    cover_image: Optional[str] = None


class BookingCreate(CamelModel):
    creative_id: int
    service_type: str
    description: Optional[str] = None
    booking_date: str
    start_time: str
    end_time: str
    location: Optional[str] = None
    total_price: int
    deposit_amount: int

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_clock_time(cls, v: str) -> str:
        parse_clock_time(v)
        return v


class BookingStatusUpdate(CamelModel):
    booking_id: int
    status: BookingStatus


class AvailabilityCreate(CamelModel):
    date: str
    start_time: str
    end_time: str


class SendMessageInput(CamelModel):
    conversation_id: int
    content: str
    attachment_url: Optional[str] = None
    attachment_type: Optional[str] = None


class StartConversationInput(CamelModel):
    other_user_id: int
    booking_id: Optional[int] = None


class DeliverableUpload(CamelModel):
    booking_id: int
    title: str
    description: Optional[str] = None
    file_url: str
    file_type: str
    file_size: int


class ReviewCreate(CamelModel):
    booking_id: int
    creative_id: int
    rating: int = Field(..., ge=1, le=5)
    title: Optional[str] = None
    comment: Optional[str] = None


class GigPostCreate(CamelModel):
    title: str
    description: str
    category: str
    budget: int
    location: Optional[str] = None
    deadline: str


class GigApplicationCreate(CamelModel):
    gig_post_id: int
    proposed_price: int
    cover_letter: Optional[str] = None
    portfolio_links: Optional[str] = None


class PortfolioItemCreate(CamelModel):
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    category: str


class PaymentInitiate(CamelModel):
    booking_id: int
    amount: int
    payment_method: PaymentMethod


class NotifyOwnerInput(CamelModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# AI assist
# ---------------------------------------------------------------------------

class PricingSuggestionInput(CamelModel):
    service_type: str
    experience: Optional[str] = None
    location: Optional[str] = None


class PricingSuggestion(CamelModel):
    base_price: float = Field(..., description="Suggested base price in USD")
    hourly_rate: float = Field(..., description="Suggested hourly rate in USD")
    deposit_percentage: float = Field(..., description="Suggested deposit percentage")
    reasoning: str = Field(..., description="Explanation for pricing")


class CaptionInput(CamelModel):
    service_type: str
    description: Optional[str] = None
    style: Optional[Literal["professional", "casual", "creative"]] = None


class ResponseTemplateInput(CamelModel):
    inquiry_type: Literal["availability", "pricing", "customization", "general"]
    context: Optional[str] = None


class ProfileBioInput(CamelModel):
    name: str
    service_type: str
    experience: Optional[str] = None
    specialties: Optional[str] = None
    style: Optional[Literal["professional", "creative", "friendly"]] = None


class ServiceDescriptionInput(CamelModel):
    service_name: str
    details: Optional[str] = None
    target_audience: Optional[str] = None


class ProfileAnalysisInput(CamelModel):
    bio: Optional[str] = None
    service_types: Optional[str] = None
    portfolio_count: Optional[int] = None
    review_count: Optional[int] = None


class ProfileAnalysis(CamelModel):
    strengths: List[str]
    improvements: List[str]
    priority: Literal["high", "medium", "low"]


class CaptionResponse(CamelModel):
    caption: Optional[str] = None


class TemplateResponse(CamelModel):
    template: Optional[str] = None


class BioResponse(CamelModel):
    bio: Optional[str] = None


class DescriptionResponse(CamelModel):
    description: Optional[str] = None
