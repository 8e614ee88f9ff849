"""
Modèles SQLAlchemy pour les classes d'entraînement et l'appartenance des membres.
Nommé silat_class pour éviter le conflit avec le mot-clé Python 'class'.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String

from app.database import Base


class SilatClass(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    location = Column(String(255), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)


class MemberClass(Base):
    """Association membre ↔ classes, remplacée en bloc à chaque mise à jour."""
    __tablename__ = "member_classes"

    id = Column(Integer, primary_key=True)
    member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)
