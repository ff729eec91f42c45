import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DISTINGUISHERS"] = "true"

import pytest
from sqlalchemy.orm import sessionmaker

from app.domain.distinguisher import Distinguisher
from app.domain.licence_plate_validation import LicencePlateValidationService
from app.infrastructure.db import build_engine
from app.infrastructure.distinguisher_repository import DistinguisherRepository


class DictLookup:
    def __init__(self, *distinguishers: Distinguisher):
        self._by_code = {d.code: d for d in distinguishers}
        self.requested_codes: list[str] = []

    def find_by_code(self, code: str) -> Distinguisher | None:
        self.requested_codes.append(code)
        return self._by_code.get(code)


def civilian(code: str, label: str = "") -> Distinguisher:
    return Distinguisher(code=code, label=label or code, deprecated=False, special=False)


def special(code: str, label: str = "") -> Distinguisher:
    return Distinguisher(code=code, label=label or code, deprecated=False, special=True)


@pytest.fixture
def lookup() -> DictLookup:
    return DictLookup(
        civilian("SG", "Solingen, Stadt"),
        civilian("L", "Leipzig"),
        civilian("LI", "Lindau (Bodensee)"),
        civilian("W", "Wuppertal, Stadt"),
        civilian("B", "Berlin"),
        civilian("ME", "Mettmann"),
        civilian("BN", "Bonn, Stadt"),
        civilian("S", "Stuttgart, Stadt"),
        civilian("N", "Nürnberg"),
        special("Y", "Bundeswehr"),
    )


@pytest.fixture
def special_lookup() -> DictLookup:
    return DictLookup(
        civilian("W", "Wuppertal, Stadt"),
        special("BP", "Bundespolizei"),
        special("THW", "Technisches Hilfswerk"),
        special("X", "NATO"),
        special("Y", "Bundeswehr"),
        special("BD", "Bundestag"),
    )


@pytest.fixture
def service(lookup: DictLookup) -> LicencePlateValidationService:
    return LicencePlateValidationService(lookup)


@pytest.fixture
def special_service(special_lookup: DictLookup) -> LicencePlateValidationService:
    return LicencePlateValidationService(special_lookup)


@pytest.fixture
def db_session():
    engine = build_engine("sqlite://")
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def repo(db_session) -> DistinguisherRepository:
    repository = DistinguisherRepository(db_session)
    repository.create_schema()
    return repository
