from datetime import datetime, timedelta
import jwt
import pytest
from models import db, User


def register(client, **overrides):
    body = {"username": "alice", "email": "alice@example.com", "password": "secret"}
    body.update(overrides)
    return client.post("/api/register", json=body)


def test_register_and_login(client):
    response = register(client)
    assert response.status_code == 200
    assert response.get_json()["ok"] is True

    response = client.post("/api/login", json={"username": "alice", "password": "secret"})
    assert response.status_code == 200
    data = response.get_json()
    assert data["user"]["username"] == "alice"
    assert data["user"]["role"] == "user"

    payload = jwt.decode(data["token"], "test-secret", algorithms=["HS256"])
    assert payload["id"] == data["user"]["id"]
    assert payload["role"] == "user"
    assert "exp" not in payload


def test_password_is_stored_hashed(app, client):
    register(client)
    with app.app_context():
        user = db.session.query(User).filter_by(username="alice").first()
        assert user.password_hash != "secret"
        assert user.check_password("secret")
        assert not user.check_password("wrong")


@pytest.mark.parametrize("missing", ["username", "email", "password"])
def test_register_requires_all_fields(client, missing):
    response = register(client, **{missing: ""})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Missing data"


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@example.com"])
def test_register_rejects_bad_email(client, email):
    response = register(client, email=email)
    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid email format"


def test_register_duplicates(client):
    register(client)
    response = register(client, email="other@example.com")
    assert response.status_code == 400
    assert response.get_json()["error"] == "Username already exists"

    response = register(client, username="bob")
    assert response.status_code == 400
    assert response.get_json()["error"] == "Email already registered"


def test_login_rejects_wrong_credentials(client):
    register(client)
    for body in ({"username": "alice", "password": "nope"}, {"username": "ghost", "password": "secret"}):
        response = client.post("/api/login", json=body)
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid username or password"


def test_login_rejects_banned_user(app, client):
    register(client)
    with app.app_context():
        user = db.session.query(User).filter_by(username="alice").first()
        user.is_banned = True
        db.session.commit()

    response = client.post("/api/login", json={"username": "alice", "password": "secret"})
    assert response.status_code == 403


def test_token_expiry_is_configurable(app, client):
    app.config["JWT_EXPIRES_HOURS"] = 2
    register(client)
    token = client.post("/api/login", json={"username": "alice", "password": "secret"}).get_json()["token"]
    payload = jwt.decode(token, "test-secret", algorithms=["HS256"])
    assert "exp" in payload


def test_protected_route_requires_token(client):
    response = client.get("/api/user/stats")
    assert response.status_code == 401
    assert response.get_json()["error"] == "Token required"


def test_protected_route_rejects_bad_token(client):
    forged = jwt.encode({"id": 1, "username": "x", "role": "admin"}, "other-secret", algorithm="HS256")
    for header in ("Bearer garbage", f"Bearer {forged}"):
        response = client.get("/api/user/stats", headers={"Authorization": header})
        assert response.status_code == 401
        assert response.get_json()["error"] == "Invalid token"


def test_token_of_deleted_user_is_rejected(app, client, make_user):
    user_id, headers = make_user("carol")
    with app.app_context():
        db.session.delete(db.session.get(User, user_id))
        db.session.commit()
    assert client.get("/api/user/stats", headers=headers).status_code == 401


def test_token_of_banned_user_is_rejected(app, client, make_user):
    user_id, headers = make_user("carol")
    with app.app_context():
        db.session.get(User, user_id).is_banned = True
        db.session.commit()
    assert client.get("/api/user/stats", headers=headers).status_code == 403


def test_forgot_password_is_disabled(client):
    response = client.post("/api/forgot-password", json={"email": "alice@example.com"})
    assert response.status_code == 400
    assert "message" in response.get_json()


@pytest.mark.parametrize("overrides, error", [
    ({"email": 123}, "Invalid email format"),
    ({"password": 123}, "Username and password must be text"),
    ({"username": ["alice"]}, "Username and password must be text"),
])
def test_register_rejects_non_text_values(client, overrides, error):
    response = register(client, **overrides)
    assert response.status_code == 400
    assert response.get_json()["error"] == error


@pytest.mark.parametrize("body", [["a"], "alice", 42])
def test_register_rejects_non_object_body(client, body):
    response = client.post("/api/register", json=body)
    assert response.status_code == 400
    assert response.get_json()["error"] == "Missing data"


def test_login_rejects_non_text_values(client):
    register(client)
    for body in ({"username": ["alice"], "password": "secret"}, {"username": "alice", "password": 123}, ["alice"]):
        response = client.post("/api/login", json=body)
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid username or password"


def test_created_at_carries_utc_offset(client):
    register(client)
    token = client.post("/api/login", json={"username": "alice", "password": "secret"}).get_json()["token"]
    users = client.get("/api/users", headers={"Authorization": f"Bearer {token}"}).get_json()
    created_at = datetime.fromisoformat(users[0]["created_at"])
    assert created_at.utcoffset() == timedelta(0)
