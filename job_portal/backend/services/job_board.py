import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.db import application as application_model
from ..models.db import job as job_model
from .. import schemas

logger = logging.getLogger(__name__)


def get_jobs(db: Session) -> List[job_model.Job]:
    return db.query(job_model.Job).order_by(job_model.Job.created_at.desc()).all()


def get_job_by_id(db: Session, job_id: str) -> Optional[job_model.Job]:
    return db.query(job_model.Job).filter(job_model.Job.id == job_id).first()


def create_job(db: Session, job: schemas.JobCreate) -> job_model.Job:
    db_job = job_model.Job(
        title=job.title,
        company=job.company,
        location=job.location,
        description=job.description,
        salary=job.salary or job_model.DEFAULT_SALARY,
        type=job.type or job_model.DEFAULT_JOB_TYPE,
    )
    db.add(db_job)
    db.commit()
    db.refresh(db_job)
    return db_job


def delete_job(db: Session, job_id: str) -> Optional[job_model.Job]:
    """
    Delete a job, then delete its applications.

    The two deletes are committed separately; a failure in between leaves
    orphaned applications behind.
    """
    db_job = get_job_by_id(db, job_id)
    if db_job is None:
        return None
    db.delete(db_job)
    db.commit()

    removed = delete_applications_for_job(db, job_id)
    logger.info("Deleted job %s and %d application(s)", job_id, removed)
    return db_job


def delete_applications_for_job(db: Session, job_id: str) -> int:
    removed = db.query(application_model.Application).filter(
        application_model.Application.job_id == job_id
    ).delete(synchronize_session=False)
    db.commit()
    return removed
