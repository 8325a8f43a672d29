from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from .database import Base
from .ids import new_object_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_object_id)
    email = Column(String, unique=True, index=True, nullable=False)
    # Stored verbatim; see DESIGN.md.
    password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
