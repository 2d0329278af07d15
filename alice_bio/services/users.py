from typing import Optional

from sqlalchemy.orm import Session

from alice_bio.models.user import User


def create_user(db: Session, email: Optional[str] = None) -> User:
    if email is not None:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            raise ValueError("Email already registered")
    user = User(email=email)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
