"""
Registre des codes OTP : émission et vérification à usage unique.

Un code n'est accepté que s'il est inutilisé et non expiré. La consommation
se fait en une seule mise à jour conditionnelle sur `used`, de sorte que deux
vérifications concurrentes du même code ne peuvent pas réussir toutes les deux.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.config import settings
from app.models.otp_code import OtpCode

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Horodatage UTC naïf, cohérent avec les colonnes DateTime sans fuseau."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def generate_code(length: Optional[int] = None) -> str:
    """Code numérique aléatoire. Le code fixe de développement n'est jamais utilisé hors ENV=development."""
    if settings.OTP_DEV_CODE and settings.ENV == "development":
        return settings.OTP_DEV_CODE
    length = length or settings.OTP_LENGTH
    return "".join(secrets.choice("0123456789") for _ in range(length))


def issue(db: Session, email: str) -> str:
    """
    Crée un nouveau code pour cet email et le retourne.
    Les codes précédents du même email restent valides jusqu'à leur expiration.
    """
    code = generate_code()
    now = utcnow()
    otp = OtpCode(
        email=email,
        code=code,
        expires_at=now + timedelta(minutes=settings.OTP_EXPIRE_MINUTES),
        created_at=now,
        used=False,
    )
    db.add(otp)
    db.commit()
    logger.info("Code OTP émis pour %s (expire dans %d min)", email, settings.OTP_EXPIRE_MINUTES)
    return code


def verify(db: Session, email: str, code: str) -> bool:
    """
    Vérifie et consomme un code.

    Retourne False si aucun code inutilisé ne correspond, si le plus récent est
    expiré, ou si une vérification concurrente l'a consommé entre-temps.
    La consommation est validée immédiatement (commit), indépendamment de la
    suite de l'inscription.
    """
    otp = db.execute(
        select(OtpCode)
        .where(
            OtpCode.email == email,
            OtpCode.code == code,
            OtpCode.used.is_(False),
        )
        .order_by(OtpCode.created_at.desc(), OtpCode.id.desc())
        .limit(1)
    ).scalar()

    if otp is None:
        return False
    if utcnow() > otp.expires_at:
        return False

    result = db.execute(
        update(OtpCode)
        .where(OtpCode.id == otp.id, OtpCode.used.is_(False))
        .values(used=True)
        .execution_options(synchronize_session=False)
    )
    db.commit()
    return result.rowcount == 1
