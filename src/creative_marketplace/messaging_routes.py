"""
Messaging procedures
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .auth import get_current_user
from .db.engine import get_db
from .db.models import User
from .schemas import ConversationOut, MessageOut, SendMessageInput, StartConversationInput
from .services.messaging_service import MessagingService

router = APIRouter(prefix="/api/trpc", tags=["messaging"])


@router.get("/messaging.getConversations", response_model=List[ConversationOut])
async def get_conversations(user: User = Depends(get_current_user), db: Optional[Session] = Depends(get_db)):
    return MessagingService(db).list_conversations(user.id)


@router.get("/messaging.getMessages", response_model=List[MessageOut])
async def get_messages(
    conversation_id: int = Query(..., alias="conversationId"),
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return MessagingService(db).list_messages(conversation_id)


@router.post("/messaging.sendMessage", response_model=MessageOut)
async def send_message(
    data: SendMessageInput,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return MessagingService(db).send_message(user.id, data)


@router.post("/messaging.startConversation", response_model=ConversationOut)
async def start_conversation(
    data: StartConversationInput,
    user: User = Depends(get_current_user),
    db: Optional[Session] = Depends(get_db),
):
    return MessagingService(db).start_conversation(user.id, data.other_user_id, data.booking_id)
