"""
Schéma de réponse du journal d'audit.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel


class AuditLogResponse(BaseModel):
    id: int
    admin_id: Optional[int]
    action: str
    target_type: str
    target_id: int
    details: Optional[Any]
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}
