"""Owner-scoped reads and the activity summary."""
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from alice_bio.models.bio_simulation import BioSimulation
from alice_bio.models.drug_screening import DrugScreening
from alice_bio.models.structure_prediction import StructurePrediction
from alice_bio.services.activity import summarize_user_activity
from alice_bio.services.records import (
    get_record,
    list_user_records,
    record_bio_simulation,
    record_drug_screening,
    record_structure_prediction,
)
from alice_bio.services.users import create_user


class TestListUserRecords:
    def test_chronological_and_scoped(self, db, user, other_user):
        names = ["caffeine", "aspirin", "ibuprofen"]
        for name in names:
            record_bio_simulation(db, user.id, molecule_name=name)
        record_bio_simulation(db, other_user.id, molecule_name="glucose")

        rows = list_user_records(db, BioSimulation, user.id)
        assert [r.molecule_name for r in rows] == names

    def test_limit(self, db, user):
        for name in ["a", "b", "c"]:
            record_bio_simulation(db, user.id, molecule_name=name)
        rows = list_user_records(db, BioSimulation, user.id, limit=2)
        assert [r.molecule_name for r in rows] == ["a", "b"]

    def test_since(self, db, user):
        first = record_drug_screening(db, user.id, target_protein="EGFR")
        second = record_drug_screening(db, user.id, target_protein="KRAS")
        rows = list_user_records(db, DrugScreening, user.id, since=second.created_at)
        assert [r.id for r in rows] == [second.id]
        rows = list_user_records(db, DrugScreening, user.id, since=first.created_at - timedelta(seconds=1))
        assert len(rows) == 2

    def test_since_with_offset(self, db, user):
        row = record_bio_simulation(db, user.id, molecule_name="caffeine")
        plus_five = timezone(timedelta(hours=5))
        since = datetime.now(plus_five) - timedelta(minutes=1)
        assert [r.id for r in list_user_records(db, BioSimulation, user.id, since=since)] == [row.id]
        later = datetime.now(plus_five) + timedelta(minutes=1)
        assert list_user_records(db, BioSimulation, user.id, since=later) == []

    def test_empty_for_new_user(self, db, user):
        assert list_user_records(db, StructurePrediction, user.id) == []


class TestGetRecord:
    def test_by_id(self, db, user):
        row = record_structure_prediction(db, user.id, sequence_length=42)
        assert get_record(db, StructurePrediction, row.id).sequence_length == 42

    def test_by_string_id(self, db, user):
        row = record_structure_prediction(db, user.id)
        assert get_record(db, StructurePrediction, str(row.id)).id == row.id

    def test_owner_scope(self, db, user, other_user):
        row = record_bio_simulation(db, user.id, molecule_name="caffeine")
        assert get_record(db, BioSimulation, row.id, user_id=other_user.id) is None
        assert get_record(db, BioSimulation, row.id, user_id=user.id) is not None

    def test_missing(self, db, user):
        assert get_record(db, DrugScreening, uuid.uuid4()) is None


class TestActivitySummary:
    def test_counts(self, db, user, other_user):
        record_bio_simulation(db, user.id, molecule_name="caffeine")
        record_bio_simulation(db, user.id, molecule_name="aspirin")
        record_drug_screening(db, user.id, target_protein="EGFR", compounds_screened=1000)
        record_drug_screening(db, user.id, target_protein="KRAS", compounds_screened=250)
        record_structure_prediction(db, user.id)
        record_bio_simulation(db, other_user.id, molecule_name="glucose")

        activity = summarize_user_activity(db, user.id)
        assert activity.user_id == user.id
        assert activity.total_simulations == 2
        assert activity.total_screenings == 2
        assert activity.total_predictions == 1
        assert activity.molecules_analyzed == 1252

    def test_no_activity(self, db, user):
        activity = summarize_user_activity(db, user.id)
        assert activity.model_dump() == {
            "user_id": user.id,
            "total_simulations": 0,
            "total_screenings": 0,
            "total_predictions": 0,
            "molecules_analyzed": 0,
        }


def test_duplicate_email_refused(db, user):
    with pytest.raises(ValueError):
        create_user(db, email=user.email)
