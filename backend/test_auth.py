from datetime import timedelta

from jose import jwt

from config import settings
from conftest import auth_header
from core.security import create_access_token, get_password_hash, verify_password, verify_token
from models import User


def test_register_returns_token_and_public_user(client):
    response = client.post("/api/auth/register", json={"name": "Asha", "email": "asha@example.com", "password": "secret123"})

    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "asha@example.com"
    assert body["user"]["name"] == "Asha"
    assert "password" not in body["user"]
    assert "password_hash" not in body["user"]

    payload = jwt.decode(body["token"], settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    assert payload == {"id": body["user"]["id"], "email": "asha@example.com", "name": "Asha"}


def test_register_then_login(client, register):
    registered = register(password="pa55word")

    response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "pa55word"})

    assert response.status_code == 200
    body = response.json()
    assert body["user"] == registered["user"]
    assert verify_token(body["token"])["id"] == registered["user"]["id"]


def test_password_is_stored_hashed(client, db, register):
    register(password="pa55word")

    user = db.query(User).filter(User.email == "asha@example.com").one()
    assert user.password_hash != "pa55word"
    assert verify_password("pa55word", user.password_hash)


def test_duplicate_email_rejected(client, db, register):
    register()

    response = client.post("/api/auth/register", json={"name": "Other", "email": "asha@example.com", "password": "x"})

    assert response.status_code == 400
    assert response.json() == {"error": "Email already exists"}
    assert db.query(User).filter(User.email == "asha@example.com").count() == 1


def test_login_unknown_email(client):
    response = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"})

    assert response.status_code == 400
    assert response.json() == {"error": "User not found"}


def test_login_wrong_password(client, register):
    register(password="right-password")

    response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "wrong-password"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid password"}


def test_register_requires_fields(client):
    response = client.post("/api/auth/register", json={"email": "asha@example.com"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_password_hash_roundtrip():
    hashed = get_password_hash("correct horse")

    assert hashed.startswith("$2")
    assert verify_password("correct horse", hashed)
    assert not verify_password("battery staple", hashed)


def test_token_has_no_expiry_by_default():
    token = create_access_token({"id": 1, "email": "a@example.com", "name": "A"})

    assert "exp" not in jwt.get_unverified_claims(token)


def test_token_expiry_when_configured(monkeypatch):
    monkeypatch.setattr(settings, "ACCESS_TOKEN_EXPIRE_MINUTES", 30)

    token = create_access_token({"id": 1, "email": "a@example.com", "name": "A"})

    assert "exp" in jwt.get_unverified_claims(token)
    assert verify_token(token)["id"] == 1


def test_protected_route_without_header_is_401(client):
    response = client.get("/api/favorites")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_protected_route_with_wrong_scheme_is_401(client):
    response = client.get("/api/favorites", headers={"Authorization": "Token abc"})

    assert response.status_code == 401


def test_protected_route_with_bad_signature_is_403(client):
    forged = jwt.encode({"id": 1, "email": "a@example.com", "name": "A"}, "not-the-secret", algorithm="HS256")

    response = client.get("/api/favorites", headers=auth_header(forged))

    assert response.status_code == 403
    assert response.json() == {"error": "Forbidden"}


def test_protected_route_with_garbage_token_is_403(client):
    response = client.get("/api/favorites", headers=auth_header("not.a.jwt"))

    assert response.status_code == 403


def test_protected_route_with_expired_token_is_403(client, register):
    user = register()["user"]
    expired = create_access_token(user, expires_delta=timedelta(minutes=-5))

    response = client.get("/api/favorites", headers=auth_header(expired))

    assert response.status_code == 403


def test_long_password_register_and_login(client, register):
    long_password = "ज" * 40  # 120 UTF-8 bytes, past the bcrypt limit
    register(password=long_password)

    response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": long_password})

    assert response.status_code == 200


def test_corrupt_stored_hash_is_a_mismatch():
    assert verify_password("secret123", "not-a-bcrypt-hash") is False


def test_demo_user_log_has_no_password(db, caplog):
    import init_db

    with caplog.at_level("INFO"):
        init_db.create_demo_user(db)

    assert init_db.DEMO_USER["email"] in caplog.text
    assert init_db.DEMO_USER["password"] not in caplog.text
