from sqlalchemy import String
from sqlalchemy.orm import mapped_column

from gallerygate.db import Base


class SignHistory(Base):
    """One sign-in or sign-out event. Rows are only ever inserted."""

    __tablename__ = "sign_history"

    username = mapped_column(String(128), primary_key=True)
    # Stored pre-formatted in the service's fixed offset, e.g. 2024-05-01T18:30:00
    timestamp = mapped_column(String(19), primary_key=True)
    action = mapped_column(String(3), nullable=False)
