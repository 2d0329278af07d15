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

FORCE_FIELDS = ("amber", "charmm", "opls", "sdf-field")
SIMULATION_STATUSES = ("queued", "running", "completed", "failed")


@write_once
class BioSimulation(Base):
    __tablename__ = "bio_simulations"
    __table_args__ = (
        CheckConstraint(one_of("force_field", FORCE_FIELDS), name="force_field"),
        CheckConstraint(one_of("status", SIMULATION_STATUSES), name="status"),
        CheckConstraint("atom_count >= 0", name="atom_count"),
        CheckConstraint("total_steps >= 0", name="total_steps"),
        Index("idx_bio_simulations_user", "user_id", "created_at"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, info={PG_RANDOM_UUID: True})
    user_id = Column(Uuid, ForeignKey(USERS_ID_FK), nullable=False)
    molecule_name = Column(Text, nullable=False)
    atom_count = Column(Integer, default=0, server_default=text("0"), nullable=False)
    force_field = Column(Text, default="amber", server_default="amber", nullable=False)
    timestep_fs = Column(Float, default=1.0, server_default=text("1.0"), nullable=False)
    total_steps = Column(BigInteger, default=0, server_default=text("0"), nullable=False)
    total_energy = Column(Float, default=0.0, server_default=text("0.0"), nullable=False)
    elapsed_ms = Column(BigInteger, default=0, server_default=text("0"), nullable=False)
    status = Column(Text, default="completed", server_default="completed", nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, server_default=func.now(), nullable=False)

    user = relationship("User")

    @validates("atom_count", "total_steps", "elapsed_ms")
    def _validate_integer(self, key, value):
        return integer_value(self.__tablename__, key, value)

    @validates("timestep_fs", "total_energy")
    def _validate_float(self, key, value):
        return float_value(self.__tablename__, key, value)
