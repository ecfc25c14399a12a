import io
import pytest
from app import create_app
from models import db, User, Section
from utils.auth_utils import generate_token


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "UPLOAD_DIR": str(tmp_path / "uploads"),
        "BCRYPT_LOG_ROUNDS": 4,
        "JWT_SECRET": "test-secret",
        "SECTION_PASSWORD": "section-pass",
        "MAX_UPLOAD_FILES": 3,
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Create a user directly in the database and return ``(user_id, auth_headers)``."""
    def _make_user(username="alice", role="user", password="secret", email=None):
        with app.app_context():
            user = User(username=username, email=email or f"{username}@example.com", password=password, role=role)
            db.session.add(user)
            db.session.commit()
            token = generate_token(user)
            return user.id, {"Authorization": f"Bearer {token}"}
    return _make_user


@pytest.fixture
def section_id(app):
    with app.app_context():
        return db.session.query(Section).filter_by(name="Naturaleza").first().id


@pytest.fixture
def upload(client):
    """Upload image files as the given user; returns the response."""
    def _upload(headers, section_id, names=("photo.jpg",)):
        data = {
            "section_id": str(section_id),
            "photos": [(io.BytesIO(b"fake image bytes"), name) for name in names],
        }
        return client.post("/api/photos", data=data, headers=headers, content_type="multipart/form-data")
    return _upload
