"""
Shared fixtures: an application on a fresh in-memory database per test.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from app.config import Settings, AuthConfig, DatabaseConfig
from app.core.passwords import hash_password
from app.database import Base, init_db
from app.models.blog import Blog
from app.models.user import User

TEST_SECRET = "test-secret-that-is-long-enough-for-hs256"

INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


@pytest.fixture
def settings():
    """Settings for an isolated in-memory database with cheap hashing."""
    return Settings(
        auth=AuthConfig(SECRET=TEST_SECRET, BCRYPT_ROUNDS=4),
        database=DatabaseConfig(DATABASE_URL="sqlite://"),
    )


@pytest.fixture
def app(settings):
    """Create application and its tables."""
    application = create_app(settings)
    init_db(application.state.engine)
    yield application
    Base.metadata.drop_all(bind=application.state.engine)
    application.state.engine.dispose()


@pytest.fixture
def client(app):
    """Create FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def db(app):
    """Direct database session for arranging and inspecting state."""
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    """Factory inserting a user with a known password."""
    def _make_user(username="root", password="sekret", name="Superuser"):
        user = User(username=username, name=name, password_hash=hash_password(password, rounds=4))
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def root_user(make_user):
    return make_user()


@pytest.fixture
def token(client, root_user):
    """Token obtained by logging in as the root user."""
    response = client.post("/api/login", json={"username": "root", "password": "sekret"})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def initial_blogs(db, root_user):
    """Store the initial blogs, owned by the root user."""
    blogs = []
    for data in INITIAL_BLOGS:
        blog = Blog(user_id=root_user.id, **data)
        db.add(blog)
        blogs.append(blog)
    db.commit()
    for blog in blogs:
        db.refresh(blog)
    return blogs


@pytest.fixture
def blogs_in_db(db):
    """Callable returning all stored blogs, as seen by a fresh query."""
    def _blogs_in_db():
        db.expire_all()
        return db.query(Blog).order_by(Blog.id).all()
    return _blogs_in_db
