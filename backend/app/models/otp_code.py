"""
Modèle SQLAlchemy pour les codes à usage unique envoyés par email.
Plusieurs codes valides peuvent coexister pour un même email.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from app.database import Base


class OtpCode(Base):
    __tablename__ = "otp_codes"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), nullable=False, index=True)
    code = Column(String(10), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    used = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
