"""
Modèle SQLAlchemy pour les administrateurs du portail.
Le mot de passe n'est jamais stocké en clair (hash pbkdf2_sha256 via passlib).
"""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.database import Base


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
