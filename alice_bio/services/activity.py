from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from alice_bio.models.bio_simulation import BioSimulation
from alice_bio.models.drug_screening import DrugScreening
from alice_bio.models.structure_prediction import StructurePrediction
from alice_bio.schemas.activity import UserActivity
from alice_bio.services.records import as_uuid


def summarize_user_activity(db: Session, user_id: Any) -> UserActivity:
    """Per-owner counters; every simulated molecule and screened compound counts as analyzed."""
    owner = as_uuid(user_id)
    simulations = (
        db.query(func.count(BioSimulation.id)).filter(BioSimulation.user_id == owner).scalar() or 0
    )
    screenings, compounds = (
        db.query(
            func.count(DrugScreening.id),
            func.coalesce(func.sum(DrugScreening.compounds_screened), 0),
        )
        .filter(DrugScreening.user_id == owner)
        .one()
    )
    predictions = (
        db.query(func.count(StructurePrediction.id))
        .filter(StructurePrediction.user_id == owner)
        .scalar()
        or 0
    )
    return UserActivity(
        user_id=owner,
        total_simulations=simulations,
        total_screenings=screenings,
        total_predictions=predictions,
        molecules_analyzed=simulations + int(compounds),
    )
