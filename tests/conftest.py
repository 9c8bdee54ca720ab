import pytest
from fastapi.testclient import TestClient
import mongomock
from bson import ObjectId
from the_field.main import app
from the_field import db as real_db

@pytest.fixture(autouse=True)
def mock_db(monkeypatch):
    #replace mongodb collections with mongomock in-memory
    mock_client = mongomock.MongoClient()
    mock_db = mock_client["test_db"]

    monkeypatch.setattr(real_db, "db", mock_db)
    monkeypatch.setattr(real_db, "users", mock_db.users)
    monkeypatch.setattr(real_db, "orgs", mock_db.orgs)
    monkeypatch.setattr(real_db, "athletes", mock_db.athletes)
    monkeypatch.setattr(real_db, "sessions", mock_db.sessions)
    monkeypatch.setattr(real_db, "activity_logs", mock_db.activity_logs)
    monkeypatch.setattr(real_db, "audit_events", mock_db.audit_events)

    yield mock_db

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def user_id(mock_db):
    """A fresh, unfinished user with no org/athlete attached"""
    return str(mock_db.users.insert_one({"name": "", "bio": "", "finished": False}).inserted_id)

@pytest.fixture
def session_headers(mock_db, user_id):
    """Active session for the user, returned as an Authorization header"""
    mock_db.sessions.insert_one({"_id": "sess-123", "user_id": user_id})
    return {"Authorization": "Bearer sess-123"}

@pytest.fixture
def org_body():
    return {
        "country": "Guatemala",
        "email": "Club@FieldClub.COM",
        "city": "Antigua",
        "website": "https://fieldclub.com",
        "sport": ["football"],
        "sponsors": ["Acme"],
    }

@pytest.fixture
def athlete_body():
    return {
        "nationality": "Guatemalan",
        "gender": "female",
        "sport": "football",
        "sponsors": ["Acme"],
        "current_team": "Comunicaciones",
        "height": 170,
        "weight": 140,
        "achievements": "League champion 2023",
        "contact": "Player@FieldClub.COM",
    }

@pytest.fixture
def missing_id():
    return str(ObjectId())
