from __future__ import annotations

import pytest

from src.tuition_tracker.tuition_tracker.container import build_services
from src.tuition_tracker.tuition_tracker.core.enums import Role
from src.tuition_tracker.tuition_tracker.core.exceptions import AuthenticationError, AuthorizationError
from src.tuition_tracker.tuition_tracker.main import create_app
from src.tuition_tracker.tuition_tracker.users.service import AuthService, SessionUser


def test_authenticate_known_accounts():
    auth = AuthService()

    assert auth.authenticate("admin@emcgi.ma", "admin123") == SessionUser("admin@emcgi.ma", Role.ADMIN)
    assert auth.authenticate("USER@emcgi.ma", "user123").role == Role.READONLY


def test_authenticate_wrong_password_raises():
    with pytest.raises(AuthenticationError):
        AuthService().authenticate("admin@emcgi.ma", "wrong")
    with pytest.raises(AuthenticationError):
        AuthService({"x@y.z": ("pw", "admin")}).authenticate("admin@emcgi.ma", "admin123")


def test_require_admin():
    with pytest.raises(AuthenticationError):
        AuthService.require_admin(None)
    with pytest.raises(AuthorizationError):
        AuthService.require_admin(SessionUser("u", Role.READONLY))


def test_session_round_trip_ignores_garbage():
    user = SessionUser("admin@emcgi.ma", Role.ADMIN)

    assert SessionUser.from_session(user.to_session()) == user
    assert SessionUser.from_session({"email": "a", "role": "root"}) is None
    assert SessionUser.from_session(None) is None


@pytest.fixture
def secured_client(students_repo):
    app = create_app(container=build_services(students_repo), settings_module="config.testing")
    app.config["AUTH_REQUIRED"] = True
    with app.test_client() as c:
        yield c


def test_reads_need_a_session_and_writes_need_admin(secured_client):
    body = {"firstName": "A", "lastName": "B", "email": "a@b.c"}

    assert secured_client.get("/api/students").status_code == 401
    assert secured_client.get("/api/auth/me").status_code == 401

    assert secured_client.post("/api/auth/login", json={"email": "user@emcgi.ma", "password": "nope"}).status_code == 401
    assert secured_client.post("/api/auth/login", json={"email": "user@emcgi.ma", "password": "user123"}).status_code == 200
    assert secured_client.get("/api/students").status_code == 200
    assert secured_client.post("/api/students", json=body).status_code == 403

    secured_client.post("/api/auth/logout")
    r = secured_client.post("/api/auth/login", json={"email": "admin@emcgi.ma", "password": "admin123"})
    assert r.get_json() == {"email": "admin@emcgi.ma", "role": "admin"}
    assert secured_client.get("/api/auth/me").get_json()["role"] == "admin"
    assert secured_client.post("/api/students", json=body).status_code == 201


def test_login_requires_email(client):
    assert client.post("/api/auth/login", json={"password": "x"}).status_code == 400


def test_admin_routes_answer_with_the_auth_service_messages(secured_client):
    r = secured_client.delete("/api/students/any")
    assert r.status_code == 401
    assert r.get_json() == {"message": "Veuillez vous connecter"}

    secured_client.post("/api/auth/login", json={"email": "user@emcgi.ma", "password": "user123"})
    r = secured_client.post("/api/students/any/payments", json={"month": "Mai", "amount": 10})
    assert r.status_code == 403
    assert r.get_json() == {"message": "Accès en lecture seule"}
