import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from adventurers_book.database import Base, get_db
from adventurers_book.main import app
from adventurers_book.mentor.directory import MentorDirectory, MentorProfile, get_mentor_directory

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_MENTORS = MentorDirectory([
    MentorProfile(id="gandalf", name="Gandalf the Grey", specialties=["leadership", "lore"]),
    MentorProfile(id="mentor_elrond", name="Elrond Half-elven", specialties=["healing", "diplomacy"]),
])


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def override_dependencies():
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mentor_directory] = lambda: TEST_MENTORS
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_dependencies):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def create_adventurer(client):
    def _create(name="Aragorn", **fields):
        response = client.post("/adventurers/", json={"name": name, **fields})
        assert response.status_code == 201
        return response.json()
    return _create
