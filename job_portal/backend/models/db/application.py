from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, UniqueConstraint
from .database import Base
from .ids import new_object_id


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        # One application per user per job, even under concurrent submits.
        UniqueConstraint("user_id", "job_id", name="uq_application_user_job"),
    )

    id = Column(String(24), primary_key=True, default=new_object_id)
    # Plain references without foreign keys: a deleted job may leave orphans.
    user_id = Column(String(24), index=True, nullable=False)
    job_id = Column(String(24), index=True, nullable=False)

    # Snapshot of the user and job at apply time.
    user_email = Column(String, nullable=False)
    job_title = Column(String, nullable=False)
    job_company = Column(String, nullable=False)
    job_location = Column(String, nullable=False)

    applied_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
