"""
Journal d'audit des actions administrateur. Append-only : aucune mise à jour ni suppression.
"""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, func

from app.database import Base


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True)
    admin_id = Column(Integer, ForeignKey("admins.id"), nullable=True)
    action = Column(String(50), nullable=False)  # PRE_REGISTER, UPDATE_MEMBER, DELETE_MEMBER
    target_type = Column(String(50), nullable=False)  # MEMBER
    target_id = Column(Integer, nullable=False)
    details = Column(JSON, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
