"""
Portfolio service
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from ..db.models import PortfolioItem
from ..exceptions import DatabaseUnavailableError, NotFoundError
from ..schemas import PortfolioItemCreate
from .creative_service import CreativeService


class PortfolioService:

    def __init__(self, db: Optional[Session]):
        self.db = db

    def list_for_creative(self, creative_id: int) -> List[PortfolioItem]:
        if self.db is None:
            return []
        return self.db.query(PortfolioItem).filter(
            PortfolioItem.creative_id == creative_id
        ).order_by(PortfolioItem.display_order, PortfolioItem.id).all()

    def add_item(self, user_id: int, data: PortfolioItemCreate) -> PortfolioItem:
        if self.db is None:
            raise DatabaseUnavailableError()

        profile = CreativeService(self.db).get_profile_for_user(user_id)
        if profile is None:
            raise NotFoundError("Creative profile not found")

        item = PortfolioItem(
            creative_id=profile.id,
            title=data.title,
            description=data.description,
            image_url=data.image_url,
            video_url=data.video_url,
            category=data.category,
        )
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item
