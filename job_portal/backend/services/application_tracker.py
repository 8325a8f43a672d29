from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from ..models.db import application as application_model
from ..models.db import job as job_model

Application = application_model.Application


def get_application(db: Session, user_id: Optional[str], job_id: str) -> Optional[Application]:
    # A token without a user id (the admin) owns no applications.
    if user_id is None:
        return None
    return db.query(Application).filter(
        Application.user_id == user_id,
        Application.job_id == job_id
    ).first()


def has_applied(db: Session, user_id: Optional[str], job_id: str) -> bool:
    return get_application(db, user_id=user_id, job_id=job_id) is not None


def create_application(db: Session, user_id: str, user_email: str, job: job_model.Job) -> Application:
    """Record an application, snapshotting the job as it is right now."""
    db_application = Application(
        user_id=user_id,
        job_id=job.id,
        user_email=user_email,
        job_title=job.title,
        job_company=job.company,
        job_location=job.location,
    )
    db.add(db_application)
    db.commit()
    db.refresh(db_application)
    return db_application


def get_applications_for_user(
    db: Session, user_id: Optional[str]
) -> List[Tuple[Application, Optional[job_model.Job]]]:
    """Applications of one user, newest first, each paired with its job (None if deleted)."""
    if user_id is None:
        return []
    return (
        db.query(Application, job_model.Job)
        .outerjoin(job_model.Job, job_model.Job.id == Application.job_id)
        .filter(Application.user_id == user_id)
        .order_by(Application.applied_at.desc())
        .all()
    )


def get_applications_for_job(db: Session, job_id: str) -> List[Application]:
    return db.query(Application).filter(
        Application.job_id == job_id
    ).order_by(Application.applied_at.desc()).all()
