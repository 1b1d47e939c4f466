"""Shared fixtures: an isolated in-memory database per test, seeded catalog, API client."""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import vaxtrack.db.models  # noqa: F401
from vaxtrack.api.v1.routes.deps import get_db
from vaxtrack.db.base import Base
from vaxtrack.db.models import Patient, ScheduleEntry, Vaccine
from vaxtrack.main import app
from vaxtrack.services.catalog import seed_catalog


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog(db):
    """Seed the bundled catalog and return vaccines keyed by code."""
    seed_catalog(db)
    db.commit()
    return {v.code: v for v in db.execute(select(Vaccine)).scalars().all()}


@pytest.fixture
def make_patient(db):
    def _make(date_of_birth=date(2024, 1, 1), language="en", name="Asha Devi", phone="+919812345678"):
        patient = Patient(name=name, date_of_birth=date_of_birth, phone=phone, language=language)
        db.add(patient)
        db.commit()
        return patient

    return _make


@pytest.fixture
def two_dose_vaccine(db):
    """A vaccine with dose 1 at birth and dose 2 at 366 days (one calendar year from 2024-01-01)."""
    vaccine = Vaccine(
        code="TWO",
        name={"en": "Two Dose Vaccine", "hi": "दो खुराक टीका"},
        contraindications=["immunodeficiency"],
    )
    db.add(vaccine)
    db.flush()
    db.add_all([
        ScheduleEntry(
            vaccine_id=vaccine.vaccine_id,
            dose_number=1,
            recommended_age_days=0,
            age_range_start_days=0,
            age_range_end_days=30,
        ),
        ScheduleEntry(
            vaccine_id=vaccine.vaccine_id,
            dose_number=2,
            recommended_age_days=366,
            age_range_start_days=366,
            age_range_end_days=None,
            interval_from_previous_days=28,
        ),
    ])
    db.commit()
    return vaccine


@pytest.fixture
def client(session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    # Not entered as a context manager, so the lifespan (file-backed init_db) never runs.
    yield TestClient(app)
    app.dependency_overrides.clear()
