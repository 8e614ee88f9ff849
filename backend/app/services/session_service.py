"""
Sessions serveur pour les deux identités du portail : administrateur et membre.

Les deux types de session ne sont jamais fusionnés : une session résout soit
un AdminPrincipal, soit un MemberPrincipal, et chaque route protégée exige
explicitement l'un des deux.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Union

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.config import settings
from app.models.user_session import UserSession
from app.security import generate_session_token
from app.services.otp_service import utcnow

logger = logging.getLogger(__name__)

KIND_ADMIN = "ADMIN"
KIND_MEMBER = "MEMBER"


@dataclass(frozen=True)
class AdminPrincipal:
    admin_id: int
    token: str


@dataclass(frozen=True)
class MemberPrincipal:
    member_id: int
    token: str


Principal = Union[AdminPrincipal, MemberPrincipal]


def purge_expired(db: Session, now: Optional[datetime] = None) -> int:
    """Supprime les sessions expirées (sans commit). Retourne le nombre de lignes supprimées."""
    result = db.execute(delete(UserSession).where(UserSession.expires_at < (now or utcnow())))
    if result.rowcount:
        logger.info("%s session(s) expirée(s) supprimée(s)", result.rowcount)
    return result.rowcount


def _create(db: Session, kind: str, admin_id: Optional[int] = None, member_id: Optional[int] = None) -> UserSession:
    now = utcnow()
    purge_expired(db, now)
    user_session = UserSession(
        token=generate_session_token(),
        kind=kind,
        admin_id=admin_id,
        member_id=member_id,
        created_at=now,
        expires_at=now + timedelta(hours=settings.SESSION_LIFETIME_HOURS),
    )
    db.add(user_session)
    db.commit()
    db.refresh(user_session)
    return user_session


def create_admin_session(db: Session, admin_id: int) -> UserSession:
    """Ouvre une session administrateur de durée absolue SESSION_LIFETIME_HOURS."""
    user_session = _create(db, KIND_ADMIN, admin_id=admin_id)
    logger.info("Session admin ouverte pour admin %s", admin_id)
    return user_session


def create_member_session(db: Session, member_id: int) -> UserSession:
    """Ouvre une session membre de durée absolue SESSION_LIFETIME_HOURS."""
    user_session = _create(db, KIND_MEMBER, member_id=member_id)
    logger.info("Session membre ouverte pour membre %s", member_id)
    return user_session


def resolve(db: Session, token: Optional[str]) -> Optional[Principal]:
    """
    Retourne l'identité portée par le jeton, ou None si le jeton est absent,
    inconnu ou expiré. La durée de vie n'est pas prolongée par l'activité.
    """
    if not token:
        return None

    user_session = db.execute(
        select(UserSession).where(UserSession.token == token)
    ).scalar()
    if user_session is None:
        return None
    if utcnow() > user_session.expires_at:
        db.delete(user_session)
        db.commit()
        return None

    if user_session.kind == KIND_ADMIN:
        return AdminPrincipal(admin_id=user_session.admin_id, token=token)
    if user_session.kind == KIND_MEMBER:
        return MemberPrincipal(member_id=user_session.member_id, token=token)
    return None


def destroy(db: Session, token: Optional[str]) -> None:
    """Supprime la session. Sans effet si le jeton est absent ou inconnu."""
    if not token:
        return
    db.execute(delete(UserSession).where(UserSession.token == token))
    db.commit()
