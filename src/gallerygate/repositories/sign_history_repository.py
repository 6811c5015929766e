import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from gallerygate.errors import StoreError
from gallerygate.models.sign_history import SignHistory
from gallerygate.repositories.base_repository import BaseRepository
from gallerygate.schemas.sign import SignAction, SignEvent

logger = logging.getLogger(__name__)


class SignHistoryRepository(BaseRepository):
    """Audit log of sign-in / sign-out events."""

    def record(self, username: str, timestamp: str, action: SignAction) -> None:
        # merge: a second event for the same (username, timestamp) replaces the first
        try:
            self.db.merge(SignHistory(username=username, timestamp=timestamp, action=action.value))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Sign %s of user %s at %s was not saved: %s", action.value, username, timestamp, e)
            raise StoreError("audit.record", username, e) from e

    def list_all(self) -> list[SignEvent]:
        stmt = select(SignHistory).order_by(SignHistory.timestamp.asc(), SignHistory.username.asc())
        try:
            rows = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            logger.error("Could not read sign history: %s", e)
            raise StoreError("audit.list_all", cause=e) from e
        return [SignEvent(username=row.username, timestamp=row.timestamp, action=SignAction(row.action)) for row in rows]
