"""
Tests d'intégration API pour l'authentification administrateur.
POST /api/admin/login, POST /api/admin/logout, GET /api/admin/me
"""

from unittest.mock import MagicMock, patch

from app.config import settings
from tests.factories import make_admin


# ============================================================
# POST /api/admin/login
# ============================================================

def test_login_succes_pose_le_cookie(client):
    with patch("app.routers.admin_auth.admin_service.authenticate") as mock_auth, \
            patch("app.routers.admin_auth.session_service.create_admin_session") as mock_session, \
            patch("app.routers.admin_auth.session_service.destroy"):
        mock_auth.return_value = make_admin(id=3)
        mock_session.return_value = MagicMock(token="tok-admin")

        response = client.post("/api/admin/login", json={"email": "admin@cis.com", "password": "admin"})

    assert response.status_code == 200
    admin = response.json()["admin"]
    assert admin["email"] == "admin@cis.com"
    assert "password_hash" not in admin
    assert response.cookies.get(settings.SESSION_COOKIE_NAME) == "tok-admin"
    mock_session.assert_called_once()
    assert mock_session.call_args.args[1] == 3


def test_login_mauvais_mot_de_passe(client):
    with patch("app.routers.admin_auth.admin_service.authenticate") as mock_auth, \
            patch("app.routers.admin_auth.session_service.create_admin_session") as mock_session:
        mock_auth.return_value = None
        response = client.post("/api/admin/login", json={"email": "admin@cis.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}
    mock_session.assert_not_called()


def test_login_email_invalide(client):
    """Entrée invalide → 400 avec message générique."""
    response = client.post("/api/admin/login", json={"email": "pas-un-email", "password": "x"})
    assert response.status_code == 400
    assert response.json() == {"message": "Validation error"}


def test_login_body_manquant(client):
    response = client.post("/api/admin/login")
    assert response.status_code == 400


# ============================================================
# POST /api/admin/logout
# ============================================================

def test_logout_detruit_la_session(client):
    client.cookies.set(settings.SESSION_COOKIE_NAME, "tok-admin")
    with patch("app.routers.admin_auth.session_service.destroy") as mock_destroy:
        response = client.post("/api/admin/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out"}
    assert mock_destroy.call_args.args[1] == "tok-admin"


def test_logout_sans_session(client):
    response = client.post("/api/admin/logout")
    assert response.status_code == 200


# ============================================================
# GET /api/admin/me
# ============================================================

def test_me_sans_session(client):
    response = client.get("/api/admin/me")
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_me_admin_connecte(admin_client):
    with patch("app.routers.admin_auth.admin_service.get_admin") as mock_get:
        mock_get.return_value = make_admin(id=1, name="System Admin")
        response = admin_client.get("/api/admin/me")

    assert response.status_code == 200
    assert response.json()["name"] == "System Admin"


def test_me_session_membre_refusee(member_client):
    """Une session membre ne donne pas accès aux routes administrateur."""
    response = member_client.get("/api/admin/me")
    assert response.status_code == 401
