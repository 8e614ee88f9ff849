"""
Enregistreur d'audit des actions administrateur.
"""

import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.audit_log import AuditLog
from app.services.otp_service import utcnow

logger = logging.getLogger(__name__)

TARGET_MEMBER = "MEMBER"

ACTION_PRE_REGISTER = "PRE_REGISTER"
ACTION_UPDATE_MEMBER = "UPDATE_MEMBER"
ACTION_DELETE_MEMBER = "DELETE_MEMBER"


def record(
    db: Session,
    admin_id: int,
    action: str,
    target_type: str,
    target_id: int,
    details: Optional[dict[str, Any]] = None,
) -> AuditLog:
    """
    Ajoute une entrée au journal dans la transaction courante.
    Le commit reste à la charge de l'appelant, pour que l'entrée et la mutation
    auditée soient validées ensemble.
    """
    entry = AuditLog(
        admin_id=admin_id,
        action=action,
        target_type=target_type,
        target_id=target_id,
        details=details,
        created_at=utcnow(),
    )
    db.add(entry)
    logger.info("Audit %s %s #%s par admin %s", action, target_type, target_id, admin_id)
    return entry


def list_recent(db: Session, limit: int = 100) -> list[AuditLog]:
    """Retourne les entrées les plus récentes en premier."""
    return db.execute(
        select(AuditLog)
        .order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
        .limit(limit)
    ).scalars().all()
