import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import schemas
from ..errors import ConflictError, ValidationError
from ..models.db.database import get_db
from ..services import application_tracker as application_service
from ..services import job_board
from ..utils.api_helpers import check_resource_exists, handle_storage_error, is_duplicate_key, require_fields
from .auth import get_admin_claims, get_token_claims

logger = logging.getLogger(__name__)

router = APIRouter()

ALREADY_APPLIED = "You have already applied to this job."


@router.post("", response_model=schemas.Message, status_code=status.HTTP_201_CREATED)
def apply_to_job(
    application: schemas.ApplicationCreate,
    db: Session = Depends(get_db),
    claims: schemas.TokenClaims = Depends(get_token_claims)
):
    """
    Apply the current user to a job.

    The duplicate check runs twice: once explicitly, and once more through the
    unique (user, job) constraint, which decides concurrent submissions.
    """
    require_fields("Job ID is required.", application.job_id)
    if claims.user_id is None:
        raise ValidationError("Only user accounts can apply to jobs.")

    try:
        job = job_board.get_job_by_id(db, application.job_id)
        check_resource_exists(job, "Job")

        if application_service.has_applied(db, user_id=claims.user_id, job_id=job.id):
            raise ConflictError(ALREADY_APPLIED)

        application_service.create_application(
            db, user_id=claims.user_id, user_email=claims.email, job=job
        )
    except SQLAlchemyError as e:
        db.rollback()
        if is_duplicate_key(e):
            logger.info("Duplicate application rejected by storage for user %s", claims.user_id)
            raise ConflictError(ALREADY_APPLIED)
        raise handle_storage_error(e, "Apply")

    return {"message": "Application submitted successfully."}


@router.get("/my", response_model=List[schemas.MyApplication])
def read_my_applications(
    db: Session = Depends(get_db),
    claims: schemas.TokenClaims = Depends(get_token_claims)
):
    """Applications of the current user, newest first, with the job expanded."""
    try:
        rows = application_service.get_applications_for_user(db, user_id=claims.user_id)
    except SQLAlchemyError as e:
        raise handle_storage_error(e, "Get my applications")

    my_applications = []
    for db_application, job in rows:
        data = schemas.Application.model_validate(db_application).model_dump()
        data["job_id"] = schemas.Job.model_validate(job) if job is not None else None
        my_applications.append(schemas.MyApplication(**data))
    return my_applications


@router.get("/job/{job_id}", response_model=List[schemas.Application])
def read_job_applicants(
    job_id: str,
    db: Session = Depends(get_db),
    admin: schemas.TokenClaims = Depends(get_admin_claims)
):
    try:
        return application_service.get_applications_for_job(db, job_id=job_id)
    except SQLAlchemyError as e:
        raise handle_storage_error(e, "Get job applicants")


@router.get("/check/{job_id}", response_model=schemas.ApplicationCheck)
def check_application(
    job_id: str,
    db: Session = Depends(get_db),
    claims: schemas.TokenClaims = Depends(get_token_claims)
):
    try:
        applied = application_service.has_applied(db, user_id=claims.user_id, job_id=job_id)
    except SQLAlchemyError as e:
        raise handle_storage_error(e, "Check application")
    return schemas.ApplicationCheck(has_applied=applied)
