"""
Router du journal d'audit (lecture seule).
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_admin
from app.schemas.audit_log import AuditLogResponse
from app.services import audit_service

router = APIRouter(prefix="/api/audit-logs", tags=["Audit"])


@router.get("", response_model=List[AuditLogResponse], summary="Dernières entrées du journal")
def list_audit_logs(principal=Depends(require_admin), db: Session = Depends(get_db)):
    """Retourne les 100 entrées les plus récentes."""
    return audit_service.list_recent(db, limit=100)
