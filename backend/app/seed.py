"""
Initialisation de la base au démarrage : tables et administrateur par défaut.
"""

import logging

from app.config import settings
from app.database import Base, SessionLocal, engine
from app.services import admin_service

logger = logging.getLogger(__name__)


def create_tables() -> None:
    """Crée les tables manquantes (les modèles doivent être importés au préalable)."""
    Base.metadata.create_all(bind=engine)


def seed_default_admin() -> None:
    """Crée l'administrateur SEED_ADMIN_EMAIL s'il n'existe pas encore."""
    if not settings.SEED_ADMIN_EMAIL:
        return
    db = SessionLocal()
    try:
        if admin_service.get_admin_by_email(db, settings.SEED_ADMIN_EMAIL) is None:
            admin_service.create_admin(
                db,
                email=settings.SEED_ADMIN_EMAIL,
                password=settings.SEED_ADMIN_PASSWORD,
                name=settings.SEED_ADMIN_NAME,
            )
            logger.info("Administrateur par défaut créé : %s", settings.SEED_ADMIN_EMAIL)
    finally:
        db.close()
