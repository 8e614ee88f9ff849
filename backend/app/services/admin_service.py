"""
Authentification et provisionnement des administrateurs.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.admin import Admin
from app.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def get_admin(db: Session, admin_id: int) -> Optional[Admin]:
    return db.get(Admin, admin_id)


def get_admin_by_email(db: Session, email: str) -> Optional[Admin]:
    return db.execute(select(Admin).where(Admin.email == email)).scalar()


def authenticate(db: Session, email: str, password: str) -> Optional[Admin]:
    """Retourne l'administrateur si le mot de passe correspond au hash stocké, sinon None."""
    admin = get_admin_by_email(db, email)
    if admin is None or not verify_password(password, admin.password_hash):
        logger.warning("Échec de connexion admin pour %s", email)
        return None
    return admin


def create_admin(db: Session, email: str, password: str, name: str) -> Admin:
    """Crée un administrateur avec un mot de passe haché."""
    admin = Admin(email=email, password_hash=hash_password(password), name=name)
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Administrateur créé : %s", email)
    return admin
