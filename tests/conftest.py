import pytest

from alice_bio.db.init_db import init_db
from alice_bio.db.session import SessionLocal, make_engine
from alice_bio.services.users import create_user


@pytest.fixture
def engine(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'records.db'}")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = SessionLocal(bind=engine)
    yield session
    session.close()


@pytest.fixture
def user(db):
    return create_user(db, email="researcher@example.org")


@pytest.fixture
def other_user(db):
    return create_user(db, email="collaborator@example.org")
