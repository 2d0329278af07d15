from alice_bio.db.base_class import Base  # noqa: F401

# Import all models here so metadata can see them
from alice_bio.models.user import User  # noqa: F401
from alice_bio.models.bio_simulation import BioSimulation  # noqa: F401
from alice_bio.models.drug_screening import DrugScreening  # noqa: F401
from alice_bio.models.structure_prediction import StructurePrediction  # noqa: F401

JOB_MODELS = (BioSimulation, DrugScreening, StructurePrediction)
