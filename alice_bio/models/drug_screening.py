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

SCREENING_METHODS = ("sdf-dock", "pharmacophore", "shape-similarity", "ml-score")


@write_once
class DrugScreening(Base):
    __tablename__ = "drug_screenings"
    __table_args__ = (
        CheckConstraint(one_of("screening_method", SCREENING_METHODS), name="screening_method"),
        Index("idx_drug_screenings_user", "user_id", "created_at"),
        Index("idx_drug_screenings_target", "target_protein"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, info={PG_RANDOM_UUID: True})
    user_id = Column(Uuid, ForeignKey(USERS_ID_FK), nullable=False)
    target_protein = Column(Text, nullable=False)
    compounds_screened = Column(Integer, default=0, server_default=text("0"), nullable=False)
    hits_found = Column(Integer, default=0, server_default=text("0"), nullable=False)
    hit_rate = Column(Float, default=0.0, server_default=text("0.0"), nullable=False)
    best_affinity = Column(Float, default=0.0, server_default=text("0.0"), nullable=False)  # nM
    screening_method = Column(Text, default="sdf-dock", server_default="sdf-dock", nullable=False)
    elapsed_ms = Column(BigInteger, default=0, server_default=text("0"), nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, server_default=func.now(), nullable=False)

    user = relationship("User")

    @validates("compounds_screened", "hits_found", "elapsed_ms")
    def _validate_integer(self, key, value):
        return integer_value(self.__tablename__, key, value)

    @validates("hit_rate", "best_affinity")
    def _validate_float(self, key, value):
        return float_value(self.__tablename__, key, value)
