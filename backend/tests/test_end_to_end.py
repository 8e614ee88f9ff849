"""
Scénario complet sur base SQLite : sessions réelles par cookie.
Pré-inscription admin → demande OTP → vérification → session membre.
"""

from unittest.mock import patch

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.audit_log import AuditLog
from app.services.admin_service import create_admin

IC = "900101145678"


def seed_admin(engine):
    with Session(engine) as db:
        create_admin(db, email="admin@cis.com", password="s3cret", name="System Admin")


def test_scenario_pre_inscription_otp_session_membre(engine, db_client):
    seed_admin(engine)

    # Connexion admin
    response = db_client.post("/api/admin/login", json={"email": "admin@cis.com", "password": "s3cret"})
    assert response.status_code == 200
    assert db_client.get("/api/admin/me").json()["email"] == "admin@cis.com"

    # Pré-inscription
    response = db_client.post("/api/members/pre-register", json={"ic_number": IC, "email": "a@x.com"})
    assert response.status_code == 201
    member_id = response.json()["id"]
    detail = db_client.get(f"/api/members/{member_id}").json()
    assert (detail["is_pre_registered"], detail["is_registered"]) == (True, False)

    # Demande OTP puis vérification
    with patch("app.services.registration_service.deliver_otp") as mock_deliver:
        response = db_client.post("/api/auth/otp/request", json={"ic_number": IC, "email": "a@x.com"})
    assert response.status_code == 200
    code = mock_deliver.call_args.args[1]

    response = db_client.post("/api/auth/otp/verify", json={"ic_number": IC, "email": "a@x.com", "code": code})
    assert response.status_code == 200
    assert response.json()["member"]["is_registered"] is True

    # La session membre remplace la session admin
    me = db_client.get("/api/member/me")
    assert me.status_code == 200
    assert me.json()["id"] == member_id
    assert db_client.get("/api/admin/me").status_code == 401
    assert db_client.get("/api/members").status_code == 401

    # Code déjà consommé
    response = db_client.post("/api/auth/otp/verify", json={"ic_number": IC, "email": "a@x.com", "code": code})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid or expired OTP"}


def test_audit_des_mutations_admin(engine, db_client):
    """Chaque création, modification et suppression admin écrit exactement une entrée MEMBER."""
    seed_admin(engine)
    db_client.post("/api/admin/login", json={"email": "admin@cis.com", "password": "s3cret"})

    member_id = db_client.post(
        "/api/members/pre-register", json={"ic_number": IC, "email": "a@x.com"}
    ).json()["id"]
    assert db_client.put(f"/api/members/{member_id}", json={"full_name": "Ali"}).status_code == 200
    assert db_client.delete(f"/api/members/{member_id}").status_code == 200
    assert db_client.get(f"/api/members/{member_id}").status_code == 404

    with Session(engine) as db:
        logs = db.execute(select(AuditLog).order_by(AuditLog.id)).scalars().all()
    assert [(log.action, log.target_type, log.target_id) for log in logs] == [
        ("PRE_REGISTER", "MEMBER", member_id),
        ("UPDATE_MEMBER", "MEMBER", member_id),
        ("DELETE_MEMBER", "MEMBER", member_id),
    ]

    response = db_client.get("/api/audit-logs")
    assert [entry["action"] for entry in response.json()][0] == "DELETE_MEMBER"


def test_logout_detruit_la_session(engine, db_client):
    seed_admin(engine)
    db_client.post("/api/admin/login", json={"email": "admin@cis.com", "password": "s3cret"})
    assert db_client.get("/api/admin/me").status_code == 200

    db_client.post("/api/admin/logout")

    assert db_client.get("/api/admin/me").status_code == 401


def test_login_mauvais_mot_de_passe(engine, db_client):
    seed_admin(engine)
    response = db_client.post("/api/admin/login", json={"email": "admin@cis.com", "password": "admin"})
    assert response.status_code == 401
