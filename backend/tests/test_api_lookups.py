"""
Tests d'intégration API pour les tables de référence.
"""

from unittest.mock import patch

from app.models.lookup import Rank, Supervisor
from app.models.silat_class import SilatClass
from app.services.errors import LookupInUseError


def test_lookups_sans_session(client):
    assert client.get("/api/lookups/classes").status_code == 401
    assert client.post("/api/lookups/ranks", json={"name": "Peringkat 1"}).status_code == 401
    assert client.delete("/api/lookups/supervisors/1").status_code == 401


# ============================================================
# Classes
# ============================================================

def test_list_classes(admin_client):
    with patch("app.routers.lookups.lookup_service.get_classes") as mock:
        mock.return_value = [SilatClass(id=1, name="Kelas A", location="Dewan", is_active=True)]
        response = admin_client.get("/api/lookups/classes")

    assert response.status_code == 200
    assert response.json() == [{"id": 1, "name": "Kelas A", "location": "Dewan", "is_active": True}]


def test_create_class(admin_client):
    with patch("app.routers.lookups.lookup_service.create_class") as mock:
        mock.return_value = SilatClass(id=2, name="Kelas B", location=None, is_active=True)
        response = admin_client.post("/api/lookups/classes", json={"name": "Kelas B"})

    assert response.status_code == 201
    assert response.json()["name"] == "Kelas B"


def test_create_class_nom_vide(admin_client):
    response = admin_client.post("/api/lookups/classes", json={"name": "  "})
    assert response.status_code == 400


def test_delete_class_utilisee(admin_client):
    with patch("app.routers.lookups.lookup_service.delete_class") as mock:
        mock.side_effect = LookupInUseError("Class still has members")
        response = admin_client.delete("/api/lookups/classes/1")

    assert response.status_code == 409
    assert response.json() == {"message": "Class still has members"}


def test_delete_class_introuvable(admin_client):
    with patch("app.routers.lookups.lookup_service.delete_class") as mock:
        mock.return_value = False
        response = admin_client.delete("/api/lookups/classes/1")

    assert response.status_code == 404


# ============================================================
# Superviseurs et rangs
# ============================================================

def test_list_supervisors(admin_client):
    with patch("app.routers.lookups.lookup_service.get_supervisors") as mock:
        mock.return_value = [Supervisor(id=1, name="Cikgu Ali", is_active=True)]
        response = admin_client.get("/api/lookups/supervisors")

    assert response.status_code == 200
    assert response.json()[0]["name"] == "Cikgu Ali"


def test_delete_supervisor(admin_client):
    with patch("app.routers.lookups.lookup_service.delete_supervisor") as mock:
        mock.return_value = True
        response = admin_client.delete("/api/lookups/supervisors/1")

    assert response.status_code == 200
    assert response.json() == {"message": "Deleted"}


def test_create_rank(admin_client):
    with patch("app.routers.lookups.lookup_service.create_rank") as mock:
        mock.return_value = Rank(id=1, name="Peringkat 1", level=1, is_active=True)
        response = admin_client.post("/api/lookups/ranks", json={"name": "Peringkat 1", "level": 1})

    assert response.status_code == 201
    assert response.json()["level"] == 1
    assert mock.call_args.args[1].level == 1


def test_delete_rank_introuvable(admin_client):
    with patch("app.routers.lookups.lookup_service.delete_rank") as mock:
        mock.return_value = False
        response = admin_client.delete("/api/lookups/ranks/9")

    assert response.status_code == 404
