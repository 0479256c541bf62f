import os
from datetime import datetime

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BASE_URL"] = "https://activites.example.test/"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from src.db.session import Base, SessionLocal, engine
from src.main import app
from src.models.activity import Activity, ActivityCategory

BASE_URL = "https://activites.example.test"

SEED_ACTIVITIES = [
    dict(
        name="Aïkido Club Capitole",
        category=ActivityCategory.sport,
        subcategory="Arts martiaux",
        address="12 rue du Taur",
        phone="05 61 00 00 01",
        website="https://aikido-capitole.example.test",
        latitude=43.6045,
        longitude=1.4440,
        neighborhood="Capitole",
    ),
    dict(
        name="Basket Club Rangueil",
        category=ActivityCategory.sport,
        subcategory="Basketball",
        address="118 route de Narbonne",
        neighborhood="Rangueil",
    ),
    dict(
        name="Judo Toulouse Carmes",
        category=ActivityCategory.sport,
        subcategory="Arts martiaux",
        address="4 place des Carmes",
        neighborhood="Carmes",
    ),
    dict(
        name="Club de Marche",
        category=ActivityCategory.sport,
        subcategory=None,
        address="1 place du Capitole",
        neighborhood="Capitole",
    ),
    dict(
        name="Échiquier Toulousain",
        category=ActivityCategory.intellectual,
        subcategory="Échecs",
        address="8 rue Saint-Rome",
        neighborhood="Capitole",
    ),
    dict(
        name="Bridge Club Minimes",
        category=ActivityCategory.intellectual,
        subcategory="Bridge",
        address="30 avenue des Minimes",
        neighborhood="Minimes",
    ),
    dict(
        name="Cercle de Lecture",
        category=ActivityCategory.intellectual,
        subcategory=None,
        address="5 allées Jules Guesde",
        neighborhood=None,
    ),
]


@pytest.fixture
def db():
    Base.metadata.create_all(engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)


@pytest.fixture
def activities(db):
    stamp = datetime(2026, 9, 1, 12, 0, 0)
    rows = [Activity(created_at=stamp, updated_at=stamp, **values) for values in SEED_ACTIVITIES]
    db.add_all(rows)
    db.commit()
    return {row.name: row for row in rows}


@pytest.fixture
def client(db):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
