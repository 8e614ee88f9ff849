"""
Politiques d'émission des codes OTP, appliquées avant `otp_service.issue`.

Une politique est un appelable `(db, ic_number, email) -> None` qui lève
`OtpRequestRejected` pour refuser l'émission.
"""

import logging
from datetime import timedelta

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.config import settings
from app.models.otp_code import OtpCode
from app.services.errors import OtpRequestRejected
from app.services.otp_service import utcnow

logger = logging.getLogger(__name__)


def allow_all(db: Session, ic_number: str, email: str) -> None:
    """Aucune restriction."""
    return None


class EmailRateLimitPolicy:
    """Refuse au-delà de `max_requests` codes émis pour un email sur la fenêtre glissante."""

    def __init__(self, max_requests: int, window_minutes: int = 60):
        self.max_requests = max_requests
        self.window_minutes = window_minutes

    def __call__(self, db: Session, ic_number: str, email: str) -> None:
        since = utcnow() - timedelta(minutes=self.window_minutes)
        count = db.execute(
            select(func.count())
            .select_from(OtpCode)
            .where(OtpCode.email == email, OtpCode.created_at >= since)
        ).scalar() or 0

        if count >= self.max_requests:
            logger.warning("Demande OTP refusée pour %s : %d codes dans la fenêtre", email, count)
            raise OtpRequestRejected("Too many OTP requests. Please try again later.")


def get_otp_policy():
    """Dépendance FastAPI — politique active selon la configuration."""
    if settings.OTP_MAX_REQUESTS_PER_HOUR > 0:
        return EmailRateLimitPolicy(settings.OTP_MAX_REQUESTS_PER_HOUR, window_minutes=60)
    return allow_all
