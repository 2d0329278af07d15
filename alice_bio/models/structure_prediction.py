import uuid

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    Text,
    Uuid,
    func,
    text,
)
from sqlalchemy.orm import relationship, validates

from alice_bio.db.base_class import PG_RANDOM_UUID, Base, UTCDateTime, one_of, utcnow
from alice_bio.models.user import USERS_ID_FK
from alice_bio.models.validators import float_value, integer_value
from alice_bio.models.write_once import write_once

PREDICTION_METHODS = ("sdf-fold", "homology", "ab-initio", "hybrid")


@write_once
class StructurePrediction(Base):
    __tablename__ = "structure_predictions"
    __table_args__ = (
        CheckConstraint(one_of("prediction_method", PREDICTION_METHODS), name="prediction_method"),
        Index("idx_structure_predictions_user", "user_id", "created_at"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, info={PG_RANDOM_UUID: True})
    user_id = Column(Uuid, ForeignKey(USERS_ID_FK), nullable=False)
    sequence_length = Column(Integer, default=0, server_default=text("0"), nullable=False)
    prediction_method = Column(Text, default="sdf-fold", server_default="sdf-fold", nullable=False)
    confidence = Column(Float, default=0.0, server_default=text("0.0"), nullable=False)
    rmsd = Column(Float, nullable=True)  # angstrom; NULL when not computed
    domain_count = Column(Integer, default=0, server_default=text("0"), nullable=False)
    secondary_structure = Column(Text, nullable=True)  # e.g. "HHHHCCCEEEE"
    elapsed_ms = Column(BigInteger, default=0, server_default=text("0"), nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, server_default=func.now(), nullable=False)

    user = relationship("User")

    @validates("sequence_length", "domain_count", "elapsed_ms")
    def _validate_integer(self, key, value):
        return integer_value(self.__tablename__, key, value)

    @validates("confidence", "rmsd")
    def _validate_float(self, key, value):
        return float_value(self.__tablename__, key, value)
