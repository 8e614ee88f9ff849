"""
Modèle SQLAlchemy pour la table members.
Le numéro IC est la clé d'identité durable ; l'email peut changer lors de la vérification OTP.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func

from app.database import Base


class Member(Base):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True)
    ic_number = Column(String(20), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)

    # Statut d'inscription
    is_pre_registered = Column(Boolean, default=False, nullable=False)
    is_registered = Column(Boolean, default=False, nullable=False)

    # Informations personnelles
    full_name = Column(String(255), nullable=True)
    nickname = Column(String(100), nullable=True)
    gender = Column(String(20), nullable=True)
    dob = Column(String(20), nullable=True)
    phone = Column(String(30), nullable=True)
    address = Column(Text, nullable=True)
    postcode = Column(String(10), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)

    # Emploi
    occupation = Column(String(255), nullable=True)
    employer_name = Column(String(255), nullable=True)
    employer_address = Column(Text, nullable=True)

    # Proche à contacter
    kin_name = Column(String(255), nullable=True)
    kin_relation = Column(String(100), nullable=True)
    kin_phone = Column(String(30), nullable=True)

    # Expérience silat
    has_silat_experience = Column(Boolean, default=False, nullable=False)
    silat_experience_details = Column(Text, nullable=True)
    completed_cekak = Column(Boolean, default=False, nullable=False)

    # Consentement PDPA
    pdpa_consent_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())
