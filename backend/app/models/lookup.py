"""
Tables de référence gérées par les administrateurs (listes déroulantes).
"""

from sqlalchemy import Boolean, Column, Integer, String

from app.database import Base


class Supervisor(Base):
    __tablename__ = "supervisors"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)


class Rank(Base):
    __tablename__ = "ranks"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    level = Column(Integer, nullable=True)  # ordre d'affichage
    is_active = Column(Boolean, default=True, nullable=False)
