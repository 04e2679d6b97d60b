"""API endpoint tests."""

from contextlib import contextmanager

from sqlalchemy import event

from pantry_tracker.models.user import User
from pantry_tracker.services.auth import create_access_token, resolve_token_user, to_identity


@contextmanager
def count_user_selects(engine):
    """Collect SELECT statements against the users table while active."""
    statements = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        text = statement.lower()
        if text.lstrip().startswith("select") and "from users" in text:
            statements.append(statement)

    event.listen(engine, "before_cursor_execute", before_cursor_execute)
    try:
        yield statements
    finally:
        event.remove(engine, "before_cursor_execute", before_cursor_execute)


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "newuser@example.com", "password": "password123", "name": "New User"},
    )
    assert response.status_code == 201
    assert "access_token" in response.json()
    assert "pantry_session" in response.cookies


def test_register_normalizes_email(client):
    """Test emails are stored lower-cased."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "MixedCase@Example.com", "password": "password123"},
    )
    assert response.status_code == 201
    assert response.json()["user"]["email"] == "mixedcase@example.com"


def test_register_short_password(client):
    """Test passwords under eight characters are rejected."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "short@example.com", "password": "short"},
    )
    assert response.status_code == 422


def test_register_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": auth_headers.email, "password": "password123", "name": "Duplicate"},
    )
    assert response.status_code == 400
    assert "already registered" in response.json()["detail"]


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    assert "access_token" in response.json()


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 401


def test_login_unknown_email(client):
    """Test login with an unknown email."""
    response = client.post(
        "/api/v1/auth/login", json={"email": "nobody@example.com", "password": "testpass123"}
    )
    assert response.status_code == 401


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == auth_headers.email


def test_get_current_user_unauthenticated(client):
    """Test /me without credentials."""
    response = client.get("/api/v1/auth/me")
    assert response.status_code == 401


def test_logout(client, auth_headers):
    """Test logout succeeds."""
    response = client.post("/api/v1/auth/logout", headers=auth_headers)
    assert response.status_code == 200


def test_current_user_is_loaded_once_per_request(client, auth_headers, test_database):
    """Test authenticated requests look the caller up a single time."""
    with count_user_selects(test_database.engine) as statements:
        response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert len(statements) == 1

    with count_user_selects(test_database.engine) as statements:
        response = client.get("/api/v1/pantry", headers=auth_headers)
    assert response.status_code == 200
    assert len(statements) == 1


def test_resolve_token_user(db, auth_headers):
    """Test a valid token loads its user and bad tokens load nothing."""
    token = auth_headers["Authorization"].removeprefix("Bearer ")

    user = resolve_token_user(db, token)
    assert user.id == auth_headers.user_id
    assert to_identity(user).email == auth_headers.email

    assert resolve_token_user(db, None) is None
    assert resolve_token_user(db, "") is None
    assert resolve_token_user(db, "not-a-token") is None
    assert resolve_token_user(db, create_access_token(999999, "ghost@example.com")) is None
    assert to_identity(None) is None


def test_user_email_is_normalized_on_assignment(db):
    """Test the model stores emails trimmed and lower-cased."""
    user = User(email="  Cook@Example.COM ", password_hash="not-a-real-hash")
    db.add(user)
    db.commit()

    assert user.email == "cook@example.com"
    assert db.query(User).filter(User.email == "cook@example.com").count() == 1
