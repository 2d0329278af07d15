"""Write and read paths for the three job-record tables.

Every row is inserted in its own transaction and never modified afterwards.
Integrity rules live in the schema; failures are rolled back and re-raised
as the errors in :mod:`alice_bio.db.errors`.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Any, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from alice_bio.db.base_class import to_utc
from alice_bio.db.errors import translate_integrity_error
from alice_bio.models.bio_simulation import BioSimulation
from alice_bio.models.drug_screening import DrugScreening
from alice_bio.models.structure_prediction import StructurePrediction

logger = logging.getLogger(__name__)

SERVER_ASSIGNED = ("id", "created_at")

RecordT = TypeVar("RecordT", BioSimulation, DrugScreening, StructurePrediction)


def as_uuid(value: Any) -> Any:
    if value is None or isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))


def _insert(db: Session, model: Type[RecordT], user_id: Any, fields: dict) -> RecordT:
    for name in SERVER_ASSIGNED:
        if name in fields:
            raise ValueError(f"{name} is assigned by the database and cannot be supplied")

    row = model(user_id=as_uuid(user_id), **fields)
    db.add(row)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        violation = translate_integrity_error(exc, model.__tablename__)
        if violation is None:
            raise
        logger.warning("Rejected %s row for user %s: %s", model.__tablename__, user_id, violation)
        raise violation from exc
    except Exception:
        db.rollback()
        raise
    db.refresh(row)
    logger.info("Recorded %s %s for user %s", model.__tablename__, row.id, row.user_id)
    return row


def record_bio_simulation(db: Session, user_id: Any, **fields: Any) -> BioSimulation:
    return _insert(db, BioSimulation, user_id, fields)


def record_drug_screening(db: Session, user_id: Any, **fields: Any) -> DrugScreening:
    return _insert(db, DrugScreening, user_id, fields)


def record_structure_prediction(db: Session, user_id: Any, **fields: Any) -> StructurePrediction:
    return _insert(db, StructurePrediction, user_id, fields)


def get_record(
    db: Session, model: Type[RecordT], record_id: Any, user_id: Any = None
) -> Optional[RecordT]:
    q = db.query(model).filter(model.id == as_uuid(record_id))
    if user_id is not None:
        q = q.filter(model.user_id == as_uuid(user_id))
    return q.first()


def list_user_records(
    db: Session,
    model: Type[RecordT],
    user_id: Any,
    since: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> List[RecordT]:
    """Owner's rows oldest first, walking the (user_id, created_at) index."""
    q = db.query(model).filter(model.user_id == as_uuid(user_id))
    if since is not None:
        q = q.filter(model.created_at >= to_utc(since))
    q = q.order_by(model.created_at, model.id)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def find_screenings_by_target(db: Session, target_protein: str) -> List[DrugScreening]:
    return (
        db.query(DrugScreening)
        .filter(DrugScreening.target_protein == target_protein)
        .order_by(DrugScreening.created_at, DrugScreening.id)
        .all()
    )
