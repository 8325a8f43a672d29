from typing import Optional

from sqlalchemy.orm import Session

from . import user as model


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[model.User]:
    return db.query(model.User).filter(model.User.email == normalize_email(email)).first()


def create_user(db: Session, email: str, password: str) -> model.User:
    db_user = model.User(email=normalize_email(email), password=password)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
