from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, String, Text
from .database import Base
from .ids import new_object_id

JOB_TYPES = ("Full-time", "Part-time", "Contract", "Remote")
DEFAULT_JOB_TYPE = "Full-time"
DEFAULT_SALARY = "Not specified"


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(24), primary_key=True, default=new_object_id)
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    location = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    salary = Column(String, default=DEFAULT_SALARY)
    type = Column(Enum(*JOB_TYPES, name="job_type", native_enum=False), default=DEFAULT_JOB_TYPE, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True, nullable=False)
