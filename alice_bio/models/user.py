import uuid

from sqlalchemy import Column, String, Uuid, func

from alice_bio.core.config import settings
from alice_bio.db.base_class import Base, UTCDateTime, utcnow


class User(Base):
    """Identity rows referenced by job owners.

    In production this is Supabase's ``auth.users`` and only the columns read
    here are mapped; locally the table is created with the rest of the schema.
    """

    __tablename__ = "users"
    __table_args__ = {"schema": settings.AUTH_USERS_SCHEMA} if settings.AUTH_USERS_SCHEMA else {}

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, index=True, nullable=True)
    created_at = Column(UTCDateTime, default=utcnow, server_default=func.now(), nullable=False)


USERS_ID_FK = f"{User.__table__.fullname}.id"
