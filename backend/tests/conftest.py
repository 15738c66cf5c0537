"""Pytest fixtures for Recordings tests."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import recordings.models  # noqa: F401
from recordings.main import app
from recordings.database import Base, get_db
from recordings.models.album import Album
from recordings.models.artist import Artist
from recordings.models.label import Label

# In-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with the test database."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def test_label(db):
    """Create a test label."""
    label = Label(name="Indie Co", country="US")
    db.add(label)
    db.commit()
    db.refresh(label)
    return label


@pytest.fixture
def test_album(db, test_label):
    """Create a test album on the test label."""
    album = Album(title="X", price=9.99, label_id=test_label.id)
    db.add(album)
    db.commit()
    db.refresh(album)
    return album


@pytest.fixture
def test_artist(db, test_album):
    """Create a test artist on the test album."""
    artist = Artist(name="Y", album_id=test_album.id)
    db.add(artist)
    db.commit()
    db.refresh(artist)
    return artist


@pytest.fixture
def sample_catalog(db):
    """Two labels, three albums (one on a missing label) and their artists."""
    labels = [
        Label(name="Apple", country="UK"),
        Label(name="Blue Note", country="US"),
    ]
    db.add_all(labels)
    db.commit()

    albums = [
        Album(title="Abbey Road", price=19.99, label_id=labels[0].id),
        Album(title="Blue Train", price=14.5, label_id=labels[1].id),
        Album(title="Let It Be", price=17.0, label_id=404),
    ]
    db.add_all(albums)
    db.commit()

    artists = [
        Artist(name="John Lennon", album_id=albums[0].id),
        Artist(name="Paul McCartney", album_id=albums[0].id),
        Artist(name="John Coltrane", album_id=albums[1].id),
    ]
    db.add_all(artists)
    db.commit()

    return {"labels": labels, "albums": albums, "artists": artists}


@pytest.fixture
def db_session(db):
    """Alias for db fixture (used by service tests)."""
    return db
