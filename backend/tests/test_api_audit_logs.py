"""
Tests d'intégration API pour le journal d'audit.
"""

from datetime import datetime
from unittest.mock import patch

from app.models.audit_log import AuditLog


def test_audit_logs_sans_session(client):
    assert client.get("/api/audit-logs").status_code == 401


def test_audit_logs_succes(admin_client):
    with patch("app.routers.audit_logs.audit_service.list_recent") as mock:
        mock.return_value = [AuditLog(
            id=1, admin_id=1, action="PRE_REGISTER", target_type="MEMBER", target_id=5,
            details={"ic": "900101145678"}, created_at=datetime.now(),
        )]
        response = admin_client.get("/api/audit-logs")

    assert response.status_code == 200
    entry = response.json()[0]
    assert entry["action"] == "PRE_REGISTER"
    assert entry["details"] == {"ic": "900101145678"}
    assert mock.call_args.kwargs == {"limit": 100}


def test_list_recent_limite_et_ordre(db):
    from app.models.admin import Admin
    from app.services.audit_service import list_recent, record

    admin = Admin(email="admin@cis.com", password_hash="x", name="Admin")
    db.add(admin)
    db.commit()
    for target_id in range(5):
        record(db, admin.id, "UPDATE_MEMBER", "MEMBER", target_id)
    db.commit()

    entries = list_recent(db, limit=3)
    assert [e.target_id for e in entries] == [4, 3, 2]
