"""
Messaging service - two-party conversations and their messages
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from ..db.models import Conversation, Message
from ..exceptions import DatabaseUnavailableError
from ..schemas import SendMessageInput

logger = logging.getLogger(__name__)


class MessagingService:
    """Service for conversations and messages"""

    def __init__(self, db: Optional[Session]):
        self.db = db

    def find_conversation(self, user_id_1: int, user_id_2: int) -> Optional[Conversation]:
        """Conversation between two users, regardless of argument order"""
        if self.db is None:
            return None
        return self.db.query(Conversation).filter(
            or_(
                and_(Conversation.participant_one_id == user_id_1, Conversation.participant_two_id == user_id_2),
                and_(Conversation.participant_one_id == user_id_2, Conversation.participant_two_id == user_id_1),
            )
        ).order_by(Conversation.id).first()

    def list_conversations(self, user_id: int) -> List[Conversation]:
        if self.db is None:
            return []
        return self.db.query(Conversation).filter(
            or_(Conversation.participant_one_id == user_id, Conversation.participant_two_id == user_id)
        ).all()

    def list_messages(self, conversation_id: int) -> List[Message]:
        if self.db is None:
            return []
        return self.db.query(Message).filter(
            Message.conversation_id == conversation_id
        ).order_by(Message.created_at, Message.id).all()

    def send_message(self, sender_id: int, data: SendMessageInput) -> Message:
        """Store a message and stamp the conversation's last-message preview"""
        if self.db is None:
            raise DatabaseUnavailableError()

        message = Message(
            conversation_id=data.conversation_id,
            sender_id=sender_id,
            content=data.content,
            attachment_url=data.attachment_url,
            attachment_type=data.attachment_type,
            is_read=False,
        )
        self.db.add(message)

        conversation = self.db.query(Conversation).filter(Conversation.id == data.conversation_id).first()
        if conversation is not None:
            conversation.last_message = data.content
            conversation.last_message_at = datetime.utcnow()

        self.db.commit()
        self.db.refresh(message)
        return message

    def start_conversation(self, user_id: int, other_user_id: int, booking_id: Optional[int] = None) -> Conversation:
        """Find the conversation between the two users or create it"""
        if self.db is None:
            raise DatabaseUnavailableError()

        conversation = self.find_conversation(user_id, other_user_id)
        if conversation is None:
            conversation = Conversation(
                participant_one_id=user_id,
                participant_two_id=other_user_id,
                booking_id=booking_id,
            )
            self.db.add(conversation)
            self.db.commit()
            self.db.refresh(conversation)
            logger.info(f"Conversation {conversation.id} started between users {user_id} and {other_user_id}")
        return conversation
