from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Models serialized with camelCase keys (``createdAt``, ``jobId``...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class Message(BaseModel):
    message: str


# Auth Schemas
class Credentials(BaseModel):
    # Optional so that missing fields produce the API's own 400 message.
    email: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    token: str
    email: str
    message: str


class TokenClaims(CamelModel):
    user_id: Optional[str] = None
    email: str
    is_admin: bool = False


# Job Schemas
class JobCreate(BaseModel):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    salary: Optional[str] = None
    type: Optional[str] = None


class Job(CamelModel):
    id: str
    title: str
    company: str
    location: str
    description: str
    salary: str
    type: str
    created_at: datetime


class JobCreated(BaseModel):
    message: str
    job: Job


# Application Schemas
class ApplicationCreate(CamelModel):
    job_id: Optional[str] = None


class Application(CamelModel):
    id: str
    user_id: str
    job_id: str
    user_email: str
    job_title: str
    job_company: str
    job_location: str
    applied_at: datetime


class MyApplication(CamelModel):
    """An application whose ``jobId`` is expanded to the job, or null once deleted."""

    id: str
    user_id: str
    job_id: Optional[Job] = None
    user_email: str
    job_title: str
    job_company: str
    job_location: str
    applied_at: datetime


class ApplicationCheck(CamelModel):
    has_applied: bool


# Health Schemas
class HealthStatus(BaseModel):
    status: str
    timestamp: str
    uptime: float
