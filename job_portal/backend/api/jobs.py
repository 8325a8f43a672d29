import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import schemas
from ..errors import ValidationError
from ..models.db.database import get_db
from ..models.db.job import JOB_TYPES
from ..services import job_board
from ..utils.api_helpers import check_resource_exists, handle_storage_error, require_fields
from .auth import get_admin_claims

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.Job])
def list_jobs(db: Session = Depends(get_db)):
    """All jobs, newest first."""
    try:
        return job_board.get_jobs(db)
    except SQLAlchemyError as e:
        raise handle_storage_error(e, "Get jobs")


@router.get("/{job_id}", response_model=schemas.Job)
def get_job(job_id: str, db: Session = Depends(get_db)):
    try:
        job = job_board.get_job_by_id(db, job_id)
    except SQLAlchemyError as e:
        raise handle_storage_error(e, "Get job")
    check_resource_exists(job, "Job")
    return job


@router.post("", response_model=schemas.JobCreated, status_code=status.HTTP_201_CREATED)
def create_job(
    job: schemas.JobCreate,
    db: Session = Depends(get_db),
    admin: schemas.TokenClaims = Depends(get_admin_claims)
):
    require_fields(
        "Title, company, location, and description are required.",
        job.title, job.company, job.location, job.description
    )
    if job.type and job.type not in JOB_TYPES:
        raise ValidationError(f"Job type must be one of: {', '.join(JOB_TYPES)}.")

    try:
        db_job = job_board.create_job(db, job)
    except SQLAlchemyError as e:
        db.rollback()
        raise handle_storage_error(e, "Create job")

    logger.info("Job %s created by %s", db_job.id, admin.email)
    return {"message": "Job created successfully.", "job": db_job}


@router.delete("/{job_id}", response_model=schemas.Message)
def delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    admin: schemas.TokenClaims = Depends(get_admin_claims)
):
    try:
        job = job_board.delete_job(db, job_id)
    except SQLAlchemyError as e:
        db.rollback()
        raise handle_storage_error(e, "Delete job")
    check_resource_exists(job, "Job")
    return {"message": "Job deleted successfully."}
