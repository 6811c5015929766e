from datetime import UTC, datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import mapped_column

from gallerygate.db import Base


class User(Base):
    __tablename__ = "users"

    username = mapped_column(String(128), primary_key=True)
    name = mapped_column(String(255), nullable=False)
    email = mapped_column(String(255), nullable=False, index=True)
    password_hash = mapped_column(String(255), nullable=False)
    created_at = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)
