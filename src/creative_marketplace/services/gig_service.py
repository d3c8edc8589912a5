"""
Gig board service - job posts from clients and applications from creatives
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..db.models import GigApplication, GigApplicationStatus, GigPost, GigPostStatus
from ..exceptions import DatabaseUnavailableError
from ..schemas import GigApplicationCreate, GigPostCreate

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


class GigService:
    """Service for the gig board"""

    def __init__(self, db: Optional[Session]):
        self.db = db

    def list_open_posts(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[GigPost]:
        if self.db is None:
            return []
        return self.db.query(GigPost).filter(
            GigPost.status == GigPostStatus.OPEN.value
        ).order_by(GigPost.id).limit(limit or DEFAULT_PAGE_SIZE).offset(offset or 0).all()

    def create_post(self, client_id: int, data: GigPostCreate) -> GigPost:
        if self.db is None:
            raise DatabaseUnavailableError()

        post = GigPost(
            client_id=client_id,
            title=data.title,
            description=data.description,
            category=data.category,
            budget=data.budget,
            location=data.location,
            deadline=data.deadline,
            status=GigPostStatus.OPEN.value,
        )
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)
        return post

    def apply(self, creative_id: int, data: GigApplicationCreate) -> GigApplication:
        """Submit an application and bump the post's application counter"""
        if self.db is None:
            raise DatabaseUnavailableError()

        application = GigApplication(
            gig_post_id=data.gig_post_id,
            creative_id=creative_id,
            proposed_price=data.proposed_price,
            cover_letter=data.cover_letter,
            portfolio_links=data.portfolio_links,
            status=GigApplicationStatus.PENDING.value,
        )
        self.db.add(application)

        post = self.db.query(GigPost).filter(GigPost.id == data.gig_post_id).first()
        if post is not None:
            post.applications_count = (post.applications_count or 0) + 1

        self.db.commit()
        self.db.refresh(application)
        return application

    def list_applications(self, gig_post_id: int) -> List[GigApplication]:
        if self.db is None:
            return []
        return self.db.query(GigApplication).filter(GigApplication.gig_post_id == gig_post_id).all()
